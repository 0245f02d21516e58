"""
Input validation utilities for pydiagnostics.

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

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydiagnostics.core.exceptions import (
    DimensionError,
    EmptySeriesError,
    InsufficientDataError,
    InvalidConfigurationError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or a
    non-numeric dtype (strings, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # An empty list arrives as float64, so only non-empty input needs this
    if result.size and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=True)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        EmptySeriesError: If array has no elements
    """
    if array.size == 0:
        raise EmptySeriesError(f"{name}: series is empty")


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify a series has at least the minimum number of observations.

    Args:
        n: Number of observations available
        min_samples: Minimum required
        name: Statistic or parameter name for error messages

    Raises:
        InsufficientDataError: If n < min_samples
    """
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} observations, got {n}",
            required=min_samples,
            actual=n,
        )


def check_alpha(alpha: float, name: str = 'alpha') -> float:
    """
    Verify a significance level lies strictly inside (0, 1).

    Raises:
        InvalidConfigurationError: If alpha is not a real number in (0, 1)
    """
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise InvalidConfigurationError(
            f"{name} must be a real number, got {alpha!r}",
            parameter=name, value=alpha,
        )
    if not (0.0 < alpha < 1.0):
        raise InvalidConfigurationError(
            f"{name} must be in (0, 1), got {alpha}",
            parameter=name, value=alpha,
        )
    return float(alpha)


def check_int(value: Any, name: str, *, minimum: int) -> int:
    """
    Verify an integer tuning parameter is at least `minimum`.

    Raises:
        InvalidConfigurationError: If value is not an integer or too small
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {value!r}",
            parameter=name, value=value,
        )
    if value < minimum:
        raise InvalidConfigurationError(
            f"{name} must be >= {minimum}, got {value}",
            parameter=name, value=value,
        )
    return int(value)
