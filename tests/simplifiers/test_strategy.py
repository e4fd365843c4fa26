"""Tests for the Douglas-Peucker strategy and the Simplifier front-end."""

import logging

import numpy as np
import pytest

from polyline_simplify.simplifiers import DouglasPeuckerStrategy, Simplifier


class TestDouglasPeuckerStrategy:
    """Tests for DouglasPeuckerStrategy."""

    def test_default_epsilon(self):
        """Test that epsilon defaults to zero."""
        strategy = DouglasPeuckerStrategy({})
        assert strategy.epsilon == 0.0
        assert strategy.name == "DouglasPeuckerStrategy"

    def test_name_from_config(self):
        """Test that the config can name the strategy."""
        assert DouglasPeuckerStrategy({"name": "dp"}).name == "dp"

    def test_payload_columns_preserved(self, payload_array):
        """Test that extra columns travel with their rows."""
        strategy = DouglasPeuckerStrategy({"epsilon": 0.5})
        result = strategy.simplify_polyline(payload_array)
        np.testing.assert_array_equal(result, payload_array[[0, 2, 4]])

    def test_integer_dtype_preserved(self):
        """Test that integer polylines stay integer."""
        polyline = np.array([[435, 1577], [441, 1577], [449, 1578], [476, 1578]])
        result = DouglasPeuckerStrategy({"epsilon": 21.68}).simplify_polyline(polyline)
        assert result.dtype == polyline.dtype
        np.testing.assert_array_equal(result, [[435, 1577], [476, 1578]])

    def test_accepts_lists(self, closed_square):
        """Test that array-likes are converted."""
        result = DouglasPeuckerStrategy({"epsilon": 1.0}).simplify_polyline(closed_square)
        np.testing.assert_array_equal(result, [[0, 0], [2, 0], [2, 2], [0, 2], [0, 0]])

    def test_epsilon_override(self, zigzag):
        """Test that a per-call epsilon wins over the configured one."""
        strategy = DouglasPeuckerStrategy({"epsilon": 0.5})
        assert len(strategy.simplify_polyline(zigzag)) == 3
        assert len(strategy.simplify_polyline(zigzag, epsilon=0.1)) == 4

    def test_return_mask(self, zigzag):
        """Test returning a boolean mask."""
        mask = DouglasPeuckerStrategy({"epsilon": 0.5}).simplify_polyline(zigzag, return_mask=True)
        assert mask.tolist() == [True, False, True, True]

    def test_empty_polyline(self):
        """Test an empty polyline."""
        result = DouglasPeuckerStrategy({}).simplify_polyline([])
        assert result.shape == (0, 2)

    @pytest.mark.parametrize("shape", [(3,), (3, 1), (2, 3, 2)])
    def test_invalid_shape(self, shape):
        """Test that malformed arrays are rejected."""
        with pytest.raises(ValueError, match="Invalid polyline data shape"):
            DouglasPeuckerStrategy({}).simplify_polyline(np.zeros(shape))

    def test_negative_epsilon_warns(self, caplog, zigzag):
        """Test that a negative epsilon is accepted with a warning."""
        with caplog.at_level(logging.WARNING):
            strategy = DouglasPeuckerStrategy({"epsilon": -1.0})
        assert "Negative epsilon" in caplog.text
        assert len(strategy.simplify_polyline(zigzag)) == len(zigzag)


class TestSimplifier:
    """Tests for the Simplifier batch front-end."""

    def test_simplify_one(self, closed_square):
        """Test simplifying a single polyline."""
        simplifier = Simplifier(DouglasPeuckerStrategy({"epsilon": 1.0}))
        assert len(simplifier.simplify(closed_square)) == 5

    def test_simplify_many(self, zigzag, closed_square, complex_curve):
        """Test a batch of polylines with different lengths."""
        simplifier = Simplifier(DouglasPeuckerStrategy({"epsilon": 5.0}))
        results = simplifier.simplify_many([zigzag, closed_square, complex_curve])
        assert [len(r) for r in results] == [2, 2, 5]

    def test_simplify_many_passes_kwargs(self, zigzag):
        """Test that keyword arguments reach the strategy."""
        simplifier = Simplifier(DouglasPeuckerStrategy({"epsilon": 5.0}))
        results = simplifier.simplify_many([zigzag], epsilon=0.1)
        assert len(results[0]) == 4

    def test_simplify_many_logs_summary(self, caplog, closed_square):
        """Test the batch summary log line."""
        simplifier = Simplifier(DouglasPeuckerStrategy({"epsilon": 1.0}))
        with caplog.at_level(logging.INFO):
            simplifier.simplify_many([closed_square, closed_square])
        assert "Simplified 2 polylines" in caplog.text
        assert "18 -> 10 points" in caplog.text

    def test_mask_results_count_kept_points(self, caplog, closed_square):
        """Test that mask results are summarized by their kept points."""
        simplifier = Simplifier(DouglasPeuckerStrategy({"epsilon": 1.0}))
        with caplog.at_level(logging.DEBUG):
            results = simplifier.simplify_many([closed_square], return_mask=True)
        assert results[0].sum() == 5
        assert "9 -> 5 points" in caplog.text
        assert "9 -> 9 points" not in caplog.text
