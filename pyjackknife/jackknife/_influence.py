"""
Jackknife bias and influence values.

Uses the standard delete-1 jackknife:
    L_i  = (n-1) * (theta_bar - theta_{-i})
    bias = (n-1) * (theta_bar - theta_hat)

where theta_{-i} is the estimate with observation i removed and
theta_bar is the mean of all leave-one-out estimates.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def jackknife_bias(t0: NDArray, t: NDArray, n: int) -> NDArray[np.floating[Any]]:
    """Jackknife bias estimate per column, shape (k,)."""
    return (n - 1) * (np.mean(t, axis=0) - t0)


def influence_values(t: NDArray, n: int) -> NDArray[np.floating[Any]]:
    """Jackknife influence values, shape (n, k). Columns sum to zero."""
    return (n - 1) * (np.mean(t, axis=0) - t)
