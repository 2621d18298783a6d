"""
Estimator invocation and row validation.

Every call to the user's estimator goes through call_estimator(), which
classifies numeric failures and checks the returned row before it is
written into the pseudo-estimate table. Failures carry the omitted index
so they can be diagnosed without re-running the loop by hand.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyjackknife.core.exceptions import (
    ContractViolationError,
    EstimatorError,
    NumericDomainError,
)


# ValueError and OverflowError cover the math module ("math domain error",
# "math range error").
_NUMERIC_FAILURES = (ZeroDivisionError, FloatingPointError, ValueError, OverflowError)


def _where(omitted_index: int | None) -> str:
    if omitted_index is None:
        return "the full sample"
    return f"the sub-sample omitting index {omitted_index}"


def leave_one_out(data: NDArray, omitted_index: int, n: int) -> NDArray:
    """Return data without row `omitted_index`, as a new read-only array."""
    keep = np.concatenate([np.arange(omitted_index), np.arange(omitted_index + 1, n)])
    sub = data[keep]
    sub.setflags(write=False)
    return sub


def call_estimator(
    estimator: Callable[[NDArray], ArrayLike],
    sample: NDArray,
    omitted_index: int | None,
) -> NDArray[np.floating[Any]]:
    """
    Apply the estimator and return its output as a flat float64 row.

    numpy division by zero and invalid operations are turned into
    FloatingPointError for the duration of the call.

    Raises:
        NumericDomainError: The estimator left its domain, or returned
            NaN/Inf.
        ContractViolationError: The output is not a flat numeric vector.
        EstimatorError: Any other exception from the estimator.
    """
    try:
        with np.errstate(divide='raise', invalid='raise'):
            raw = estimator(sample)
    except NumericDomainError as e:
        raise NumericDomainError(
            f"estimator failed on {_where(omitted_index)}: {e}",
            omitted_index=omitted_index,
            column=e.column,
        ) from e
    except _NUMERIC_FAILURES as e:
        raise NumericDomainError(
            f"estimator hit an undefined operation on {_where(omitted_index)}: "
            f"{type(e).__name__}: {e}",
            omitted_index=omitted_index,
        ) from e
    except Exception as e:
        raise EstimatorError(
            f"estimator raised on {_where(omitted_index)}: "
            f"{type(e).__name__}: {e}",
            omitted_index=omitted_index,
        ) from e

    return as_row(raw, omitted_index)


def as_row(raw: ArrayLike, omitted_index: int | None) -> NDArray[np.floating[Any]]:
    """
    Convert one estimator output to a 1-D float64 row.

    Raises:
        ContractViolationError: Non-numeric, empty or multi-dimensional output.
        NumericDomainError: NaN or Inf in the output.
    """
    try:
        row = np.asarray(raw)
    except (ValueError, TypeError) as e:
        raise ContractViolationError(
            f"estimator output on {_where(omitted_index)} cannot be "
            f"converted to an array: {e}",
            omitted_index=omitted_index,
        ) from e

    if (
        row.dtype == object
        or not np.issubdtype(row.dtype, np.number)
        or np.issubdtype(row.dtype, np.complexfloating)
    ):
        raise ContractViolationError(
            f"estimator output on {_where(omitted_index)} has non-numeric "
            f"dtype {row.dtype}; expected a vector of reals",
            omitted_index=omitted_index,
            actual_shape=tuple(row.shape),
        )

    row = np.atleast_1d(row).astype(np.float64)
    if row.ndim != 1:
        raise ContractViolationError(
            f"estimator output on {_where(omitted_index)} has shape "
            f"{row.shape}; expected a 1-D vector",
            omitted_index=omitted_index,
            actual_shape=tuple(row.shape),
        )
    if row.size == 0:
        raise ContractViolationError(
            f"estimator output on {_where(omitted_index)} is empty; "
            f"expected at least one parameter estimate",
            omitted_index=omitted_index,
            actual_shape=tuple(row.shape),
        )

    bad = np.flatnonzero(~np.isfinite(row))
    if bad.size:
        column = int(bad[0])
        raise NumericDomainError(
            f"estimator returned {row[column]} for parameter column {column} "
            f"on {_where(omitted_index)}",
            omitted_index=omitted_index,
            column=column,
        )

    return row


def check_row_shape(
    row: NDArray,
    expected_shape: tuple[int, ...],
    omitted_index: int,
) -> None:
    """
    Verify a pseudo-estimate row matches the full-sample estimate's shape.

    Raises:
        ContractViolationError: Shape mismatch, naming the omitted index.
    """
    if row.shape != expected_shape:
        raise ContractViolationError(
            f"estimator returned shape {row.shape} on "
            f"{_where(omitted_index)}, expected {expected_shape} "
            f"(the shape returned on the full sample)",
            omitted_index=omitted_index,
            expected_shape=expected_shape,
            actual_shape=tuple(row.shape),
        )
