"""
Solver dispatch for the jackknife.

Provides jackknife() as the entry point and jackknife_ci() for
Student-t intervals built from a finished jackknife.
"""

from __future__ import annotations

from typing import Any, Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pyjackknife.core.exceptions import ValidationError
from pyjackknife.jackknife.design import JackknifeDesign, NegativeVariancePolicy
from pyjackknife.jackknife.solution import JackknifeSolution
from pyjackknife.jackknife.backends.cpu import (
    CPUJackknifeBackend,
    ThreadedJackknifeBackend,
)


BackendChoice = Literal['auto', 'cpu', 'threaded']


def _get_backend(backend: BackendChoice, n_jobs: int | None):
    """Select backend based on preference."""
    if n_jobs is not None and (isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs < 1):
        raise ValidationError(f"n_jobs must be a positive integer or None, got {n_jobs!r}")

    if backend == 'cpu':
        return CPUJackknifeBackend()

    if backend == 'threaded':
        return ThreadedJackknifeBackend(n_jobs=n_jobs)

    if backend == 'auto':
        if n_jobs is not None and n_jobs > 1:
            return ThreadedJackknifeBackend(n_jobs=n_jobs)
        return CPUJackknifeBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


def jackknife(
    data: ArrayLike | JackknifeDesign,
    estimator: Callable[[NDArray], ArrayLike] | None = None,
    *,
    negative_variance: NegativeVariancePolicy = 'raise',
    backend: BackendChoice = 'auto',
    n_jobs: int | None = None,
) -> JackknifeSolution:
    """
    Delete-1 jackknife standard errors for an arbitrary estimator.

    For each observation i, the estimator is applied to the sample with
    row i removed; the column variance of these n pseudo-estimates,
    scaled by (n-1)^2/n, is the jackknife variance.

    Parameters
    ----------
    data : array-like or JackknifeDesign
        Sample of n >= 2 observations, 1D or 2D (rows are observations).
    estimator : callable
        fn(sub_sample) -> vector of k reals. Must return the same length
        on every call. Required unless data is a JackknifeDesign.
    negative_variance : str
        'raise' (default), 'clamp' or 'nan'. Applied if a scaled variance
        is negative before the square root.
    backend : str
        'auto', 'cpu', 'threaded'. 'auto' uses the thread pool only when
        n_jobs > 1.
    n_jobs : int, optional
        Worker threads for the threaded backend.

    Returns
    -------
    JackknifeSolution

    Raises
    ------
    InvalidInputError
        Fewer than 2 observations.
    ContractViolationError
        Estimator output of inconsistent shape, with the omitted index.
    NumericDomainError
        Undefined operation inside the estimator, with the omitted index,
        or a negative scaled variance under the 'raise' policy.
    EstimatorError
        Any other exception raised by the estimator, with the omitted index.
    """
    if isinstance(data, JackknifeDesign):
        if estimator is not None:
            raise ValidationError(
                "estimator must not be given together with a JackknifeDesign"
            )
        if negative_variance != 'raise':
            raise ValidationError(
                "negative_variance must not be given together with a "
                "JackknifeDesign; set it in JackknifeDesign.for_jackknife"
            )
        design = data
    else:
        if estimator is None:
            raise ValidationError("estimator is required")
        design = JackknifeDesign.for_jackknife(
            data, estimator, negative_variance=negative_variance,
        )

    be = _get_backend(backend, n_jobs)
    result = be.solve(design)

    return JackknifeSolution(_result=result, _design=design)


def jackknife_ci(
    jack_out: JackknifeSolution,
    conf_level: float = 0.95,
    *,
    bias_correct: bool = True,
) -> NDArray[np.floating[Any]]:
    """
    Student-t confidence intervals from a jackknife.

    centre +/- t_{1-alpha/2, n-1} * se, where centre is the bias-corrected
    estimate (default) or the full-sample estimate.

    Parameters
    ----------
    jack_out : JackknifeSolution
        Result of jackknife().
    conf_level : float
        Confidence level in (0, 1).
    bias_correct : bool
        Centre on t0 - bias instead of t0.

    Returns
    -------
    NDArray of shape (k, 2): lower and upper bounds per parameter.
    """
    if not (0.0 < conf_level < 1.0):
        raise ValidationError(f"conf_level must be in (0, 1), got {conf_level}")

    centre = jack_out.bias_corrected if bias_correct else jack_out.t0
    alpha = 1.0 - conf_level
    q = sp_stats.t.ppf(1.0 - alpha / 2.0, df=jack_out.n - 1)
    half = q * jack_out.se

    return np.column_stack([centre - half, centre + half])
