"""Tests for the end-to-end design pipeline."""

import dataclasses
import logging
import math

import pytest

from oilfire.core.design import DesignRequest, DesignResult, design_engine
from oilfire.core.fuels import Fuel
from oilfire.core.records import MemorySink
from oilfire.utils.validation import InvalidDesignRequest


@pytest.fixture
def reference():
    """200 lbf GOX/gasoline engine at 500 psi."""
    return DesignRequest(
        fuel="gasoline",
        thrust=200.0,
        chamber_pressure=500.0,
        mixture_ratio=2.5,
        l_star=60.0,
        coolant_velocity=30.0,
        fuel_holes=12,
        oxidizer_holes=12,
        contraction_ratio=3.0,
    )


class TestReferenceEngine:
    def test_flows(self, reference):
        r = design_engine(reference)
        assert r.specific_impulse == 279.0
        assert r.total_propellant_flow_rate == pytest.approx(0.3252, abs=1e-3)
        assert r.total_propellant_flow_rate == pytest.approx(200.0 / 279.0 * 0.453592)
        assert r.fuel_flow_rate + r.oxidizer_flow_rate == pytest.approx(r.total_propellant_flow_rate)
        assert r.oxidizer_flow_rate / r.fuel_flow_rate == pytest.approx(2.5)

    def test_temperatures_and_pressure(self, reference):
        r = design_engine(reference)
        assert r.chamber_temperature == pytest.approx(6202.0 * 5.0 / 9.0)
        assert r.throat_temperature == pytest.approx(0.909 * r.chamber_temperature, rel=1e-9)
        assert r.throat_pressure == pytest.approx(282.0 * 6894.76)

    def test_geometry(self, reference):
        r = design_engine(reference)
        assert r.throat_area == pytest.approx(1.719097e-3 * 0.092903, rel=1e-4)
        assert r.throat_diameter == pytest.approx(
            math.sqrt(4.0 * 1.719097e-3 / math.pi) * 304.8, rel=1e-4
        )
        assert r.exit_area == pytest.approx(5.28 * r.throat_area)
        assert r.chamber_diameter == pytest.approx(3.0 * r.throat_diameter)
        assert r.chamber_length > 0
        assert r.wall_thickness > 0
        assert r.inner_coolant_diameter == pytest.approx(r.chamber_diameter + 2.0 * r.wall_thickness)
        assert r.outer_coolant_diameter > r.inner_coolant_diameter
        assert r.coolant_gap == pytest.approx(
            (r.outer_coolant_diameter - r.inner_coolant_diameter) / 2.0
        )

    def test_injector(self, reference):
        r = design_engine(reference)
        assert r.fuel_hole_area == pytest.approx(r.fuel_flow_area / 12.0)
        assert r.oxidizer_hole_area == pytest.approx(r.oxidizer_flow_area / 12.0)
        assert r.fuel_hole_diameter > 0
        assert r.oxidizer_hole_diameter > r.fuel_hole_diameter

    def test_cone_lengths(self, reference):
        r = design_engine(reference)
        rc, rt, re = r.chamber_diameter / 2, r.throat_diameter / 2, r.exit_diameter / 2
        assert r.convergent_length == pytest.approx((rc - rt) / math.tan(math.radians(30)))
        assert r.divergent_length == pytest.approx((re - rt) / math.tan(math.radians(15)))


class TestPipelineProperties:
    def test_deterministic(self, reference):
        assert design_engine(reference) == design_engine(reference)

    def test_all_fields_populated(self, reference):
        r = design_engine(reference)
        values = [v for _, v, _ in r.items()]
        assert len(values) == 30
        assert all(math.isfinite(v) for v in values)

    def test_fixed_keys(self, reference):
        a = design_engine(reference).as_dict()
        b = design_engine(dataclasses.replace(reference, fuel="alcohol", mixture_ratio=1.2)).as_dict()
        assert list(a) == list(b)
        assert "total_propellant_flow_rate_kg/s" in a
        assert "chamber_temperature_K" in a

    def test_units_metadata(self):
        units = DesignResult.units()
        assert units["throat_pressure"] == "Pa"
        assert units["chamber_length"] == "mm"
        assert units["total_heat_transfer"] == "W"

    def test_low_pc_clamps_isp(self, reference, caplog):
        with caplog.at_level(logging.WARNING, logger="oilfire.core.design"):
            r = design_engine(dataclasses.replace(reference, chamber_pressure=50.0))
        assert r.specific_impulse == 220.0
        assert "clamped" in caplog.text

    def test_ethanol_matches_gasoline(self, reference):
        gas = design_engine(dataclasses.replace(reference, mixture_ratio=4.5))
        eth = design_engine(dataclasses.replace(reference, fuel="ethanol", mixture_ratio=4.5))
        assert eth == gas

    def test_unknown_fuel_uses_gasoline(self, reference):
        assert design_engine(dataclasses.replace(reference, fuel="kerosene")) == design_engine(
            reference
        )

    def test_alcohol_differs(self, reference):
        alc = design_engine(dataclasses.replace(reference, fuel="ALCOHOL", mixture_ratio=1.2))
        assert alc.specific_impulse == 265.0
        assert alc.chamber_temperature == pytest.approx(5680.0 * 5.0 / 9.0)

    def test_fuel_enum_member(self, reference):
        req = DesignRequest(fuel=Fuel.ALCOHOL, mixture_ratio=1.2)
        assert req.fuel == "alcohol"
        assert design_engine(req) == design_engine(
            dataclasses.replace(reference, fuel="alcohol", mixture_ratio=1.2)
        )


class TestInvalidRequests:
    @pytest.mark.parametrize(
        "change",
        [
            {"fuel_holes": 0},
            {"oxidizer_holes": -1},
            {"thrust": 0.0},
            {"chamber_pressure": -10.0},
            {"mixture_ratio": -1.0},
            {"contraction_ratio": 1.0},
            {"l_star": 0.0},
            {"coolant_velocity": 0.0},
            {"thrust": math.nan},
            {"thrust": math.inf},
            {"chamber_pressure": math.inf},
            {"mixture_ratio": math.nan},
            {"contraction_ratio": math.nan},
            {"l_star": math.inf},
        ],
    )
    def test_rejected(self, reference, change):
        with pytest.raises(InvalidDesignRequest):
            design_engine(dataclasses.replace(reference, **change))

    def test_rejected_request_never_reaches_sink(self, reference):
        sink = MemorySink()
        with pytest.raises(InvalidDesignRequest):
            design_engine(dataclasses.replace(reference, fuel_holes=0), sink=sink)
        assert sink.records == []

    def test_error_lists_all_problems(self, reference):
        bad = dataclasses.replace(reference, fuel_holes=0, oxidizer_holes=0)
        with pytest.raises(InvalidDesignRequest) as exc:
            design_engine(bad)
        assert len(exc.value.result.errors) == 2
        assert isinstance(exc.value, ValueError)


class TestSink:
    def test_sink_receives_result(self, reference):
        sink = MemorySink()
        result = design_engine(reference, sink=sink)
        assert sink.records == [(reference, result)]
