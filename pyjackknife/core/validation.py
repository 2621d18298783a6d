"""
Input validation utilities for pyjackknife.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyjackknife.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

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


def check_ndim_range(
    array: NDArray[np.floating[Any]],
    min_ndim: int,
    max_ndim: int,
    name: str,
) -> None:
    """
    Verify array dimensionality lies in [min_ndim, max_ndim].

    Raises:
        DimensionError: If array.ndim is outside the range
    """
    if not (min_ndim <= array.ndim <= max_ndim):
        raise DimensionError(
            f"{name}: expected {min_ndim}D to {max_ndim}D array, "
            f"got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InvalidInputError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidInputError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n_observations=n,
            min_observations=min_samples,
        )


def check_choice(value: Any, choices: tuple[Any, ...], name: str) -> None:
    """
    Verify an option value is one of the allowed choices.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ValidationError(f"{name} must be one of {allowed}, got {value!r}")
