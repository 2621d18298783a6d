"""
pyjackknife: delete-1 jackknife standard errors for Python.

Given a sample and an estimator function, recomputes the estimator on
every leave-one-out sub-sample and turns the spread of those
pseudo-estimates into per-parameter standard errors, bias estimates and
influence values.

Submodules:
    jackknife: Resampler, estimators, confidence intervals
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from pyjackknife.jackknife import jackknife, jackknife_ci

__all__ = [
    "__version__",
    "jackknife",
    "jackknife_ci",
]
