"""Tests for the combustion and flow stage."""

import pytest

from oilfire.core.fuels import ALCOHOL_PROFILE, GASOLINE_PROFILE
from oilfire.core.thermo import (
    CombustionState,
    compute_combustion,
    flame_temperature,
    specific_impulse,
    split_flow,
)


class TestTableLookups:
    def test_gasoline_flame_temperature_golden(self):
        """MR 2.5 hits the tabulated 5742 °F point exactly."""
        assert flame_temperature(GASOLINE_PROFILE, 2.5) == 5742.0 + 460.0

    def test_flame_temperature_interpolates(self):
        # halfway between (1.0, 5460) and (1.2, 5680)
        assert flame_temperature(ALCOHOL_PROFILE, 1.1) == pytest.approx(5570.0)

    def test_flame_temperature_clamps(self):
        assert flame_temperature(GASOLINE_PROFILE, 0.5) == 4960.0
        assert flame_temperature(GASOLINE_PROFILE, 10.0) == 5960.0

    def test_isp_exact(self):
        assert specific_impulse(GASOLINE_PROFILE, 500.0) == 279.0
        assert specific_impulse(ALCOHOL_PROFILE, 300.0) == 248.0

    def test_isp_clamps_low(self):
        """Pc below the table never extrapolates lower."""
        assert specific_impulse(GASOLINE_PROFILE, 50.0) == 220.0

    def test_isp_clamps_high(self):
        assert specific_impulse(GASOLINE_PROFILE, 900.0) == 279.0


class TestFlowSplit:
    @pytest.mark.parametrize("mr", [-0.5, 0.0, 1.2, 2.5, 4.5, 17.0])
    def test_conservation(self, mr):
        fuel, ox = split_flow(0.7168, mr)
        assert fuel + ox == pytest.approx(0.7168, rel=1e-15)

    def test_ratio(self):
        fuel, ox = split_flow(3.5, 2.5)
        assert fuel == pytest.approx(1.0)
        assert ox / fuel == pytest.approx(2.5)


class TestComputeCombustion:
    def test_reference_engine(self):
        state = compute_combustion(GASOLINE_PROFILE, 200.0, 500.0, 2.5)
        assert isinstance(state, CombustionState)
        assert state.specific_impulse == 279.0
        assert state.chamber_temperature == 6202.0
        assert state.total_flow == pytest.approx(200.0 / 279.0)
        assert state.fuel_flow + state.oxidizer_flow == pytest.approx(state.total_flow)

    def test_higher_thrust_more_flow(self):
        a = compute_combustion(GASOLINE_PROFILE, 200.0, 500.0, 2.5)
        b = compute_combustion(GASOLINE_PROFILE, 400.0, 500.0, 2.5)
        assert b.total_flow == pytest.approx(2.0 * a.total_flow)
