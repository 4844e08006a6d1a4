"""
tests/unit/test_performance.py - Tests for speed prediction, planing and
bow/stern factors.
"""

import math

import pytest

from hullscope.core import HullParams
from hullscope.physics.performance import (
    calculate_effective_lwl,
    calculate_froude_number,
    calculate_hull_speed,
    calculate_pitching_factor,
    calculate_speed_length_ratio,
    calculate_spray_deflection,
    calculate_wave_resistance_factor,
    can_plane,
    estimate_max_speed,
    planing_threshold,
)


class TestHullSpeed:
    """Test displacement-mode speed limit."""

    def test_hull_speed_7m(self):
        assert abs(calculate_hull_speed(7.0) - 6.42) < 0.01

    def test_hull_speed_monotone_in_length(self):
        speeds = [calculate_hull_speed(l / 10.0) for l in range(50, 101)]
        assert all(a < b for a, b in zip(speeds, speeds[1:]))

    @pytest.mark.parametrize("lwl", [5.0, 7.0, 10.0])
    def test_froude_at_hull_speed_is_constant(self, lwl):
        fn = calculate_froude_number(calculate_hull_speed(lwl), lwl)
        assert fn == pytest.approx(0.3987, abs=1e-3)

    def test_speed_length_ratio(self):
        lwl_ft = 7.0 * 3.28084
        assert calculate_speed_length_ratio(10.0, 7.0) == pytest.approx(10.0 / math.sqrt(lwl_ft))


class TestMaxSpeed:
    """Test Crouch estimate and its caps."""

    def test_capped_at_hull_speed_multiple(self, default_params):
        hull_speed = calculate_hull_speed(7.0)
        assert estimate_max_speed(default_params, 512.5, hull_speed) == pytest.approx(1.5 * hull_speed)

    def test_crouch_governs_when_underpowered(self):
        params = HullParams(engine_hp=10, crew_weight=400, cargo_weight=500)
        displacement = 1172.5
        crouch = 150.0 * math.sqrt(10 / (displacement * 2.20462))
        hull_speed = calculate_hull_speed(params.lwl)
        assert crouch < 1.5 * hull_speed
        assert estimate_max_speed(params, displacement, hull_speed) == pytest.approx(crouch)

    def test_absolute_cap(self):
        params = HullParams(engine_hp=60)
        assert estimate_max_speed(params, 400.0, hull_speed=20.0) == 15.0

    def test_more_power_never_slower(self, default_params):
        hull_speed = calculate_hull_speed(default_params.lwl)
        speeds = [
            estimate_max_speed(default_params.replace(engine_hp=hp), 700.0, hull_speed)
            for hp in range(10, 61, 5)
        ]
        assert all(a <= b for a, b in zip(speeds, speeds[1:]))


class TestPlaning:
    """Test planing assessment."""

    def test_threshold_by_hull_type(self):
        assert planing_threshold(HullParams(hull_type="flat-bottom")) == pytest.approx(2.25)
        assert planing_threshold(HullParams(hull_type="single-chine")) == pytest.approx(2.5)
        assert planing_threshold(HullParams(hull_type="round-bilge")) == pytest.approx(3.0)

    def test_canoe_stern_raises_threshold(self):
        assert planing_threshold(HullParams(stern_type="canoe")) == pytest.approx(2.5 / 0.3)

    def test_fast_short_hull_planes(self):
        assert can_plane(15.0, HullParams(lwl=5.0))

    def test_canoe_stern_prevents_planing(self):
        assert not can_plane(15.0, HullParams(lwl=5.0, stern_type="canoe"))

    def test_displacement_speed_does_not_plane(self, default_params):
        assert not can_plane(calculate_hull_speed(7.0), default_params)


class TestBowSternEffects:
    """Test dimensionless bow/stern factors."""

    def test_effective_lwl_plumb(self, default_params):
        assert calculate_effective_lwl(default_params) == 7.0

    def test_effective_lwl_raked(self):
        params = HullParams(bow_type="raked", bow_rake=10)
        assert calculate_effective_lwl(params) == pytest.approx(6.3)

    def test_effective_lwl_reverse(self):
        assert calculate_effective_lwl(HullParams(bow_type="reverse")) == pytest.approx(7.14)

    def test_wave_resistance_factor(self, default_params):
        assert calculate_wave_resistance_factor(default_params) == 1.0
        params = HullParams(bow_type="reverse", stern_type="canoe")
        assert calculate_wave_resistance_factor(params) == pytest.approx(0.595)

    def test_pitching_factor(self, default_params):
        # 1.1 × (1 + (1 - 0.8) × 0.2)
        assert calculate_pitching_factor(default_params) == pytest.approx(1.144)

    def test_spray_deflection_reduced_by_flare(self, default_params):
        assert calculate_spray_deflection(default_params) == pytest.approx(0.56)
        flared = default_params.replace(bow_flare=25.0)
        assert calculate_spray_deflection(flared) < calculate_spray_deflection(default_params)
