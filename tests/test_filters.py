"""
Tests for peak attraction and mirroring.
"""

import pytest
import numpy as np

from grid_generator import Axis, InvalidArgumentError, allocate, mirror, pull_to_peaks


@pytest.fixture
def grid_3x3():
    """3x3 grid with unique values, laid out as grid[y, x]."""
    return np.array([
        [0.1, 0.2, 0.3],
        [0.4, 0.5, 0.6],
        [0.7, 0.8, 0.9],
    ], dtype=np.float32)


class TestPullToPeaks:
    """Test the peak attraction filter."""

    def test_values_are_pulled_toward_point(self):
        grid = allocate(5, 5)
        grid[:] = 0.4

        pull_to_peaks(grid, [0.5], 0.2, 0.5)

        np.testing.assert_allclose(grid, 0.45, rtol=1e-6)
        assert np.all((grid > 0.4) & (grid < 0.5))

    def test_values_out_of_range_are_untouched(self):
        grid = np.array([[0.0, 0.4, 1.0]], dtype=np.float32)

        pull_to_peaks(grid, [0.5], 0.2, 0.5)

        np.testing.assert_allclose(grid, [[0.0, 0.45, 1.0]], rtol=1e-6)

    def test_points_apply_cumulatively_in_order(self):
        forward = np.full((2, 2), 0.4, dtype=np.float32)
        backward = forward.copy()

        # 0.62 is out of range of 0.4, but in range of 0.45 after the first pull.
        pull_to_peaks(forward, [0.5, 0.62], 0.18, 0.5)
        pull_to_peaks(backward, [0.62, 0.5], 0.18, 0.5)

        np.testing.assert_allclose(forward, 0.535, rtol=1e-5)
        np.testing.assert_allclose(backward, 0.45, rtol=1e-5)

    def test_full_strength_snaps_to_point(self):
        grid = np.full((3, 2), 0.4, dtype=np.float32)

        pull_to_peaks(grid, [0.5], 0.2, 1.0)

        np.testing.assert_allclose(grid, 0.5, rtol=1e-6)

    def test_zero_strength_and_empty_points_leave_grid_unchanged(self):
        grid = np.full((3, 2), 0.4, dtype=np.float32)
        original = grid.copy()

        pull_to_peaks(grid, [0.5], 0.2, 0.0)
        pull_to_peaks(grid, [], 0.2, 0.5)

        np.testing.assert_array_equal(grid, original)

    def test_results_are_not_clamped(self):
        grid = np.full((1, 1), 0.9, dtype=np.float32)

        pull_to_peaks(grid, [1.5], 1.0, 1.0)

        assert grid[0, 0] == pytest.approx(1.5)

    @pytest.mark.parametrize("strength", [1.5, -0.1, float("nan"), True, "0.5", None])
    def test_invalid_strength_raises_without_mutation(self, strength):
        grid = np.full((5, 5), 0.4, dtype=np.float32)
        original = grid.copy()

        with pytest.raises(InvalidArgumentError):
            pull_to_peaks(grid, [0.5], 0.2, strength)

        np.testing.assert_array_equal(grid, original)

    @pytest.mark.parametrize("value_range", [None, "0.2", True])
    def test_invalid_value_range_raises_without_mutation(self, value_range):
        grid = np.full((5, 5), 0.4, dtype=np.float32)
        original = grid.copy()

        with pytest.raises(InvalidArgumentError):
            pull_to_peaks(grid, [0.5], value_range, 0.5)

        np.testing.assert_array_equal(grid, original)

    def test_non_numeric_points_raise(self):
        grid = np.full((2, 2), 0.4, dtype=np.float32)

        with pytest.raises(InvalidArgumentError):
            pull_to_peaks(grid, ["a"], 0.2, 0.5)

        np.testing.assert_array_equal(grid, 0.4)

    def test_nested_points_raise(self):
        grid = allocate(2, 2)

        with pytest.raises(InvalidArgumentError):
            pull_to_peaks(grid, [[0.5]], 0.2, 0.5)


class TestMirror:
    """Test grid mirroring."""

    def test_horizontal_reverses_rows(self, grid_3x3):
        original = grid_3x3.copy()

        mirror(grid_3x3, Axis.HORIZONTAL)

        np.testing.assert_array_equal(grid_3x3[0], original[2])
        np.testing.assert_array_equal(grid_3x3[2], original[0])
        np.testing.assert_array_equal(grid_3x3[1], original[1])

    def test_vertical_reverses_columns(self, grid_3x3):
        original = grid_3x3.copy()

        mirror(grid_3x3, Axis.VERTICAL)

        np.testing.assert_array_equal(grid_3x3[:, 0], original[:, 2])
        np.testing.assert_array_equal(grid_3x3[:, 2], original[:, 0])

    def test_both_is_point_reflection(self, grid_3x3):
        original = grid_3x3.copy()

        mirror(grid_3x3, Axis.BOTH)

        for y in range(3):
            for x in range(3):
                assert grid_3x3[y, x] == original[2 - y, 2 - x]

    def test_plain_integers_are_accepted(self, grid_3x3):
        original = grid_3x3.copy()

        mirror(grid_3x3, 0)

        np.testing.assert_array_equal(grid_3x3[0], original[2])

    def test_non_square_grid(self):
        grid = np.arange(6, dtype=np.float32).reshape(2, 3)

        mirror(grid, Axis.HORIZONTAL)
        np.testing.assert_array_equal(grid, [[3, 4, 5], [0, 1, 2]])

        mirror(grid, Axis.VERTICAL)
        np.testing.assert_array_equal(grid, [[5, 4, 3], [2, 1, 0]])

    @pytest.mark.parametrize("axis", list(Axis))
    def test_mirroring_twice_restores_grid(self, grid_3x3, axis):
        original = grid_3x3.copy()

        mirror(grid_3x3, axis)
        mirror(grid_3x3, axis)

        np.testing.assert_array_equal(grid_3x3, original)

    @pytest.mark.parametrize("axis", [3, -1, 1.0, "horizontal", None])
    def test_invalid_axis_raises_without_mutation(self, grid_3x3, axis):
        original = grid_3x3.copy()

        with pytest.raises(InvalidArgumentError):
            mirror(grid_3x3, axis)

        np.testing.assert_array_equal(grid_3x3, original)
