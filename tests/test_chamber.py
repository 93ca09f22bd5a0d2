"""Tests for the chamber sizing module."""

import math

import pytest

from oilfire.core.chamber import (
    ChamberGeometry,
    chamber_length,
    chamber_volume,
    size_chamber,
    wall_thickness,
)


class TestChamberRelations:
    def test_volume_from_l_star(self):
        """V = L* [ft] × At."""
        assert chamber_volume(60.0, 2.0e-3) == pytest.approx(5.0 * 2.0e-3)

    def test_length_includes_volume_factor(self):
        assert chamber_length(1.1, 1.0) == pytest.approx(1.0)

    def test_wall_thickness(self):
        # 500 psi × 2 in / 16000 psi × 3
        assert wall_thickness(500.0, 2.0) == pytest.approx(0.1875)

    def test_wall_scales_with_pressure(self):
        assert wall_thickness(1000.0, 2.0) == pytest.approx(2.0 * wall_thickness(500.0, 2.0))


class TestSizeChamber:
    def test_reference_dimensions(self):
        at = 1.719e-3
        dt = math.sqrt(4.0 * at / math.pi)
        ch = size_chamber(at, dt, l_star=60.0, contraction_ratio=3.0, chamber_pressure=500.0)

        assert isinstance(ch, ChamberGeometry)
        assert ch.diameter == pytest.approx(3.0 * dt)
        assert ch.area == pytest.approx(math.pi * ch.diameter**2 / 4.0)
        assert ch.volume == pytest.approx(5.0 * at)
        assert ch.length == pytest.approx(ch.volume / (1.1 * ch.area))
        assert ch.wall_thickness == pytest.approx(500.0 * ch.diameter_in / 16000.0 * 3.0)

    def test_unit_helpers(self):
        ch = ChamberGeometry(volume=1.0, diameter=0.5, area=0.2, length=1.0, wall_thickness=0.3)
        assert ch.diameter_in == pytest.approx(6.0)
        assert ch.wall_thickness_ft == pytest.approx(0.025)

    def test_larger_contraction_shorter_chamber(self):
        at, dt = 1.7e-3, 0.0468
        short = size_chamber(at, dt, 60.0, 4.0, 500.0)
        long = size_chamber(at, dt, 60.0, 2.0, 500.0)
        assert short.length < long.length
