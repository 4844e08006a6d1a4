"""
tests/unit/test_normalizer.py - Tests for z-score normalization.
"""

import numpy as np
import pytest

from hullscope.surrogate import (
    NormalizationStats,
    compute_normalization_stats,
    compute_stats,
    denormalize,
    normalize,
)


class TestComputeStats:
    """Test column statistics."""

    def test_mean_and_population_std(self):
        data = np.array([[1.0, 10.0], [3.0, 30.0]])
        mean, std = compute_stats(data)
        np.testing.assert_allclose(mean, [2.0, 20.0])
        np.testing.assert_allclose(std, [1.0, 10.0])

    def test_zero_std_replaced_by_one(self):
        data = np.array([[12.0, 1.0], [12.0, 2.0], [12.0, 3.0]])
        mean, std = compute_stats(data)
        assert mean[0] == 12.0
        assert std[0] == 1.0

    def test_single_row(self):
        mean, std = compute_stats(np.array([[4.0, 5.0]]))
        np.testing.assert_allclose(mean, [4.0, 5.0])
        np.testing.assert_allclose(std, [1.0, 1.0])

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            compute_stats(np.zeros((0, 3)))


class TestNormalize:
    """Test normalize/denormalize."""

    def setup_method(self):
        rng = np.random.default_rng(3)
        self.data = rng.normal(loc=[5.0, -2.0, 300.0], scale=[1.0, 0.1, 50.0], size=(200, 3))
        self.mean, self.std = compute_stats(self.data)

    def test_normalized_columns_standardized(self):
        z = normalize(self.data, self.mean, self.std)
        np.testing.assert_allclose(z.mean(axis=0), 0.0, atol=1e-9)
        np.testing.assert_allclose(z.std(axis=0), 1.0, atol=1e-9)

    def test_round_trip_batch(self):
        z = normalize(self.data, self.mean, self.std)
        np.testing.assert_allclose(denormalize(z, self.mean, self.std), self.data)

    def test_round_trip_vector(self):
        row = self.data[17]
        restored = denormalize(normalize(row, self.mean, self.std), self.mean, self.std)
        np.testing.assert_allclose(restored, row)

    def test_constant_column_centred(self):
        data = np.array([[12.0], [12.0]])
        mean, std = compute_stats(data)
        np.testing.assert_array_equal(normalize(data, mean, std), [[0.0], [0.0]])


class TestNormalizationStats:
    """Test frozen statistics bundle."""

    def setup_method(self):
        inputs = np.array([[1.0, 2.0], [3.0, 6.0]])
        outputs = np.array([[10.0], [20.0]])
        self.stats = compute_normalization_stats(inputs, outputs)

    def test_values(self):
        np.testing.assert_allclose(self.stats.input_mean, [2.0, 4.0])
        np.testing.assert_allclose(self.stats.input_std, [1.0, 2.0])
        np.testing.assert_allclose(self.stats.output_mean, [15.0])
        np.testing.assert_allclose(self.stats.output_std, [5.0])

    def test_arrays_read_only(self):
        with pytest.raises(ValueError):
            self.stats.input_mean[0] = 99.0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            self.stats.input_mean = np.zeros(2)

    def test_output_round_trip(self):
        outputs = np.array([[12.0], [18.0]])
        restored = self.stats.denormalize_outputs(self.stats.normalize_outputs(outputs))
        np.testing.assert_allclose(restored, outputs)

    def test_dict_round_trip(self):
        restored = NormalizationStats.from_dict(self.stats.to_dict())
        np.testing.assert_array_equal(restored.input_std, self.stats.input_std)
        np.testing.assert_array_equal(restored.output_mean, self.stats.output_mean)

    def test_shape_mismatch_rejected(self):
        with pytest.raises(ValueError):
            NormalizationStats([0.0, 0.0], [1.0], [0.0], [1.0])

    def test_equal_when_built_from_same_data(self):
        inputs = np.array([[1.0, 2.0], [3.0, 6.0]])
        outputs = np.array([[10.0], [20.0]])
        assert compute_normalization_stats(inputs, outputs) == self.stats
        assert NormalizationStats.from_dict(self.stats.to_dict()) == self.stats

    def test_not_equal_when_data_differs(self):
        other = compute_normalization_stats(
            np.array([[1.0, 2.0], [5.0, 6.0]]),
            np.array([[10.0], [20.0]]),
        )
        assert other != self.stats
        assert self.stats != "stats"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(self.stats)
