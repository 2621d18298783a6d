"""
Jackknife variance and standard errors.

The column variance of the pseudo-estimates is inflated by (n-1)^2/n:
leave-one-out estimates share n-2 observations pairwise, so they vary
far less than independent replicates would.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyjackknife.core.exceptions import NumericDomainError


def jackknife_variance(t: NDArray, n: int) -> NDArray[np.floating[Any]]:
    """
    Scaled jackknife variance per column.

    Args:
        t: Pseudo-estimate table, shape (n, k).
        n: Number of observations (rows of t).

    Returns:
        (n-1)^2/n * var(t[:, j], ddof=1), shape (k,).
    """
    var = np.var(t, axis=0, ddof=1)
    # Identical rows have exactly zero variance, whatever the mean rounds to.
    var[np.all(t == t[0], axis=0)] = 0.0
    return ((n - 1) ** 2 / n) * var


def standard_errors(
    scaled_var: NDArray,
    policy: str,
) -> tuple[NDArray[np.floating[Any]], list[str]]:
    """
    Square root of the scaled variances under a negative-value policy.

    Policies:
        'raise': NumericDomainError naming the first negative column.
        'clamp': negative values are set to 0 before the square root.
        'nan':   negative columns become NaN and a RuntimeWarning is issued.

    Returns:
        (se, warnings) where warnings lists the non-fatal messages.
    """
    scaled_var = np.asarray(scaled_var, dtype=np.float64)
    negative = np.flatnonzero(scaled_var < 0)
    messages: list[str] = []

    if negative.size == 0:
        return np.sqrt(scaled_var), messages

    cols = negative.tolist()

    if policy == 'raise':
        column = cols[0]
        raise NumericDomainError(
            f"jackknife variance for parameter column {column} is negative "
            f"({scaled_var[column]:.6g}); cannot take its square root",
            column=column,
        )

    se = scaled_var.copy()
    if policy == 'clamp':
        se[negative] = 0.0
        messages.append(
            f"negative jackknife variance clamped to zero in columns {cols}"
        )
    elif policy == 'nan':
        se[negative] = np.nan
        msg = f"negative jackknife variance in columns {cols}; standard error set to NaN"
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        messages.append(msg)
    else:
        raise ValueError(f"Unknown negative_variance policy: {policy!r}")

    return np.sqrt(se), messages
