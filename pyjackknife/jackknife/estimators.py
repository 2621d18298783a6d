"""
Plug-in estimators for jackknife().

Each takes a 1-D sample and returns a vector of parameter estimates.
They raise NumericDomainError instead of returning inf/NaN when the
sample leaves their domain.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyjackknife.core.exceptions import NumericDomainError


def gamma_moments(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Method-of-moments fit of a gamma distribution.

    Equates the sample mean m and variance v (n-1 denominator) to the
    gamma moments shape*scale and shape*scale^2:

        scale = v / m
        shape = m / scale = m^2 / v

    Returns:
        array([shape, scale])

    Raises:
        NumericDomainError: fewer than 2 points, zero mean or zero variance.
    """
    x = np.asarray(x, dtype=np.float64).ravel()
    if x.size < 2:
        raise NumericDomainError(
            f"gamma_moments: variance needs at least 2 points, got {x.size}"
        )

    m = np.mean(x)
    v = np.var(x, ddof=1)
    if m == 0:
        raise NumericDomainError("gamma_moments: sample mean is zero")
    if v == 0:
        raise NumericDomainError("gamma_moments: sample variance is zero")

    scale = v / m
    shape = m / scale
    return np.array([shape, scale])


def sample_mean(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """Sample mean as a length-1 vector (column means for 2-D input)."""
    x = np.asarray(x, dtype=np.float64)
    if x.shape[0] == 0:
        raise NumericDomainError("sample_mean: empty sample")
    return np.atleast_1d(np.mean(x, axis=0))
