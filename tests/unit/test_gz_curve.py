"""
tests/unit/test_gz_curve.py - Tests for righting arm curves.
"""

import math

import pytest

from hullscope.stability import (
    RightingPoint,
    calculate_gz,
    calculate_righting_curve,
    summarize_righting_curve,
)

# Reference design: KB, BM, KG, GM
KB, BM, KG = 0.0351, 6.804, 0.3303
GM = KB + BM - KG


class TestCalculateGZ:
    """Test single-angle righting arm."""

    def test_zero_heel(self):
        assert calculate_gz(0.0, GM, BM, KB, KG) == 0.0

    def test_small_angle_formula(self):
        assert calculate_gz(10.0, GM, BM, KB, KG) == pytest.approx(GM * math.sin(math.radians(10)))

    def test_large_angle_formula(self):
        theta = math.radians(30)
        expected = (BM * math.sin(theta) - (KG - KB) * math.sin(theta)) * math.cos(theta)
        assert calculate_gz(30.0, GM, BM, KB, KG) == pytest.approx(expected)

    def test_negative_gm_capsizes(self):
        assert calculate_gz(5.0, -0.1, 0.2, 0.1, 0.4) < 0


class TestRightingCurve:
    """Test full curve generation."""

    def setup_method(self):
        self.curve = calculate_righting_curve(GM, BM, KB, KG)

    def test_curve_extent(self):
        assert len(self.curve) == 46
        assert self.curve[0].heel_angle == 0.0
        assert self.curve[-1].heel_angle == 45.0

    def test_curve_starts_at_zero(self):
        assert self.curve[0].gz == 0.0

    def test_one_degree_steps(self):
        angles = [p.heel_angle for p in self.curve]
        assert angles == [float(a) for a in range(46)]

    def test_zero_gz_at_zero_heel_for_any_design(self):
        for gm, bm, kb, kg in [(0.2, 0.5, 0.1, 0.4), (-0.3, 0.1, 0.05, 0.45), (3.0, 3.2, 0.1, 0.3)]:
            assert calculate_righting_curve(gm, bm, kb, kg)[0].gz == 0.0

    def test_point_to_dict(self):
        data = RightingPoint(heel_angle=12.0, gz=0.123456).to_dict()
        assert data == {"heel_angle": 12.0, "gz": 0.1235}


class TestRightingSummary:
    """Test curve characteristics."""

    def test_summary_of_reference_curve(self):
        summary = summarize_righting_curve(calculate_righting_curve(GM, BM, KB, KG))
        assert summary.angle_gz_max_deg == 45.0
        assert summary.gz_30_m == pytest.approx(calculate_gz(30.0, GM, BM, KB, KG))
        assert 0 < summary.area_0_30_m_rad < summary.area_0_40_m_rad

    def test_area_of_linear_curve(self):
        # GZ = θ (deg) × 0.01: area to 30° = ½ × 0.3 × radians(30)
        curve = [RightingPoint(float(a), a * 0.01) for a in range(0, 46)]
        summary = summarize_righting_curve(curve)
        assert summary.area_0_30_m_rad == pytest.approx(0.5 * 0.3 * math.radians(30))

    def test_interpolates_between_points(self):
        curve = [RightingPoint(0.0, 0.0), RightingPoint(20.0, 0.2), RightingPoint(40.0, 0.6)]
        assert summarize_righting_curve(curve).gz_30_m == pytest.approx(0.4)

    def test_too_short_rejected(self):
        with pytest.raises(ValueError):
            summarize_righting_curve([RightingPoint(0.0, 0.0)])
