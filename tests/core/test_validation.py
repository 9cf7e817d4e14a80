"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_2d: dimensionality checks
    - check_square: square and non-empty
"""

import numpy as np
import pytest

from cachematrix.core.exceptions import DimensionError, ValidationError
from cachematrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_ndim,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_nested_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_float32_preserved(self):
        arr = np.eye(2, dtype=np.float32)
        assert check_array(arr, "A").dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="A: non-numeric"):
            check_array([["a", "b"], ["c", "d"]], "A")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="A:"):
            check_array([[1.0, 2.0], [3.0]], "A")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.eye(2) * 1j, "A")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.eye(3), "A")

    def test_nan_and_inf_counted(self):
        arr = np.array([[np.nan, 1.0], [np.inf, np.nan]])
        with pytest.raises(ValidationError, match=r"2 NaN, 1 Inf"):
            check_finite(arr, "A")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "A")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(4), "A")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_ndim(np.zeros((2, 2, 2)), 2, "A")


# ═══════════════════════════════════════════════════════════════════════
# check_square
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSquare:

    def test_square_passes(self):
        check_square(np.eye(4), "A")

    def test_rectangular_rejected(self):
        with pytest.raises(DimensionError, match=r"expected square matrix, got shape \(2, 3\)"):
            check_square(np.zeros((2, 3)), "A")

    def test_empty_rejected(self):
        with pytest.raises(DimensionError, match="empty"):
            check_square(np.empty((0, 0)), "A")
