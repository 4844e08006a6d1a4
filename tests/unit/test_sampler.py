"""
tests/unit/test_sampler.py - Tests for the parameter-space sweep and
feature encoding.
"""

import numpy as np
import pytest

from hullscope.core import BallastType, HullParams, HullType
from hullscope.physics import compute_physics
from hullscope.surrogate import (
    INPUT_DIM,
    OUTPUT_DIM,
    SweepConfig,
    SweepRange,
    TrainingDataset,
    encode_hull_type,
    encode_inputs,
    encode_outputs,
    generate_training_data,
    iter_sweep_params,
)


class TestSweepRange:
    """Test inclusive index-based sweeps."""

    def test_inclusive_end(self):
        assert SweepRange(150.0, 500.0, 70.0).values() == (150.0, 220.0, 290.0, 360.0, 430.0, 500.0)

    def test_fractional_step_count(self):
        values = SweepRange(6.0, 7.5, 0.15).values()
        assert len(values) == 11
        assert values[0] == 6.0
        assert values[-1] == pytest.approx(7.5)

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError):
            SweepRange(0.0, 1.0, 0.0).values()

    def test_default_sample_count(self):
        # 11 lwl × 11 beam × 5 depth × 4 hull types × 6 loads × 3 hp
        assert SweepConfig().sample_count == 43_560


class TestEncoding:
    """Test input/output feature vectors."""

    @pytest.mark.parametrize("hull_type,code", [
        (HullType.FLAT_BOTTOM, 0.0),
        (HullType.SINGLE_CHINE, 1.0 / 3.0),
        (HullType.MULTI_CHINE, 2.0 / 3.0),
        (HullType.ROUND_BILGE, 1.0),
    ])
    def test_hull_type_codes(self, hull_type, code):
        assert encode_hull_type(hull_type) == pytest.approx(code)

    def test_encode_inputs(self):
        params = HullParams(crew_weight=160, cargo_weight=50, ballast_weight=20)
        assert encode_inputs(params) == pytest.approx([7.0, 1.8, 0.85, 1.0 / 3.0, 15.0, 230.0, 25.0])
        assert len(encode_inputs(params)) == INPUT_DIM

    def test_encode_outputs(self, default_params):
        results = compute_physics(default_params)
        outputs = encode_outputs(results)
        assert outputs == [results.gm, results.hull_speed, results.max_speed, results.draft]
        assert len(outputs) == OUTPUT_DIM


class TestSweep:
    """Test sweep enumeration."""

    def test_sweep_size(self, small_sweep):
        assert sum(1 for _ in iter_sweep_params(small_sweep)) == small_sweep.sample_count == 576

    def test_sweep_order_lwl_outermost(self, small_sweep):
        designs = list(iter_sweep_params(small_sweep))
        assert designs[0].lwl == 6.0
        assert designs[-1].lwl == 7.5
        # Innermost axis is engine hp
        assert designs[0].engine_hp == 15.0
        assert designs[1].engine_hp == 25.0

    def test_load_split(self, small_sweep):
        for params in iter_sweep_params(small_sweep):
            crew = min(params.total_load * 0.6, 240.0)
            assert params.crew_weight == pytest.approx(crew)
            assert params.ballast_weight == 0.0
            assert params.ballast_type == BallastType.NONE
            assert params.deadrise == 12.0

    def test_heavy_load_caps_crew(self, small_sweep):
        heaviest = max(iter_sweep_params(small_sweep), key=lambda p: p.total_load)
        assert heaviest.total_load == pytest.approx(500.0)
        assert heaviest.crew_weight == 240.0
        assert heaviest.cargo_weight == pytest.approx(260.0)

    def test_all_hull_types_swept(self, small_sweep):
        assert {p.hull_type for p in iter_sweep_params(small_sweep)} == set(HullType)


class TestGenerateTrainingData:
    """Test labelled dataset generation."""

    def setup_method(self):
        self.config = SweepConfig(
            lwl=SweepRange(6.0, 7.0, 1.0),
            beam=SweepRange(1.4, 1.8, 0.4),
            depth=SweepRange(0.8, 0.8, 0.1),
            total_load=SweepRange(200.0, 200.0, 50.0),
            engine_hp=SweepRange(20.0, 20.0, 5.0),
            hull_types=(HullType.FLAT_BOTTOM, HullType.ROUND_BILGE),
        )

    def test_shapes(self):
        data = generate_training_data(self.config)
        assert isinstance(data, TrainingDataset)
        assert data.inputs.shape == (8, INPUT_DIM)
        assert data.outputs.shape == (8, OUTPUT_DIM)
        assert len(data) == 8

    def test_rows_match_physics(self):
        data = generate_training_data(self.config)
        designs = list(iter_sweep_params(self.config))
        for row, params in enumerate(designs):
            np.testing.assert_allclose(data.inputs[row], encode_inputs(params))
            np.testing.assert_allclose(data.outputs[row], encode_outputs(compute_physics(params)))

    def test_deterministic(self):
        first = generate_training_data(self.config)
        second = generate_training_data(self.config)
        np.testing.assert_array_equal(first.inputs, second.inputs)
        np.testing.assert_array_equal(first.outputs, second.outputs)

    def test_mismatched_dataset_rejected(self):
        with pytest.raises(ValueError):
            TrainingDataset(inputs=np.zeros((3, 7)), outputs=np.zeros((2, 4)))

    def test_slices_rejoin_to_full_sweep(self):
        full = generate_training_data(self.config)
        parts = [
            generate_training_data(self.config, start=start, stop=start + 3)
            for start in range(0, 8, 3)
        ]
        assert [len(p) for p in parts] == [3, 3, 2]

        joined = TrainingDataset.concatenate(parts)
        np.testing.assert_array_equal(joined.inputs, full.inputs)
        np.testing.assert_array_equal(joined.outputs, full.outputs)

    def test_slice_past_end_is_empty(self):
        data = generate_training_data(self.config, start=20, stop=30)
        assert len(data) == 0
        assert data.inputs.shape == (0, INPUT_DIM)

    def test_concatenate_nothing(self):
        assert len(TrainingDataset.concatenate([])) == 0
