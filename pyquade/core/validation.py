"""
Input validation utilities for PyQuade.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyquade.core.exceptions import ValidationError, DimensionError


_TRUE_STRINGS = ('true', 'on', 'yes')
_FALSE_STRINGS = ('false', 'off', 'no')


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a real floating-point numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data),
    booleans, strings and complex numbers.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of rows.

    Args:
        array: Array to check
        min_samples: Minimum required rows (first dimension)
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has fewer than min_samples rows
    """
    n = array.shape[0]
    if n < min_samples:
        raise DimensionError(
            f"{name}: requires at least {min_samples} rows, got {n}"
        )


def check_min_columns(array: NDArray[np.floating[Any]], min_columns: int, name: str) -> None:
    """
    Verify a 2D array has at least the minimum number of columns.

    Args:
        array: 2D array to check
        min_columns: Minimum required columns (second dimension)
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has fewer than min_columns columns
    """
    p = array.shape[1]
    if p < min_columns:
        raise DimensionError(
            f"{name}: requires at least {min_columns} columns, got {p}"
        )


def check_alpha(alpha: Any, name: str = "alpha") -> float:
    """
    Validate a significance level.

    Args:
        alpha: Candidate significance level
        name: Parameter name for error messages

    Returns:
        alpha as a Python float

    Raises:
        ValidationError: If alpha is not a real scalar strictly inside (0, 1)
    """
    if isinstance(alpha, (bool, np.bool_)) or not isinstance(
        alpha, (int, float, np.integer, np.floating)
    ):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(alpha).__name__}"
        )

    value = float(alpha)
    if not np.isfinite(value) or not 0.0 < value < 1.0:
        raise ValidationError(
            f"{name}: must be strictly between 0 and 1, got {value!r}"
        )
    return value


def check_logical_like(value: Any, name: str) -> bool:
    """
    Normalize a logical-like flag to a strict bool.

    Accepts bool, numpy bool, real numeric scalars (nonzero is True, NaN
    rejected) and the case-insensitive strings 'true'/'false', 'on'/'off',
    'yes'/'no'.
    Intended for API boundaries only; the computational core takes bools.

    Args:
        value: Flag value to normalize
        name: Parameter name for error messages

    Returns:
        True or False

    Raises:
        ValidationError: If value is not logical-like
    """
    if isinstance(value, (bool, np.bool_)):
        return bool(value)

    if isinstance(value, (int, float, np.integer, np.floating)):
        if isinstance(value, (float, np.floating)) and np.isnan(value):
            raise ValidationError(f"{name}: logical-like option cannot be NaN")
        return bool(value != 0)

    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
        raise ValidationError(
            f"{name}: invalid logical-like value {value!r}, expected one of "
            f"{_TRUE_STRINGS + _FALSE_STRINGS}"
        )

    raise ValidationError(
        f"{name}: invalid type {type(value).__name__} for logical-like option"
    )
