"""
pyjackknife delete-1 jackknife.

Recomputes an estimator on every leave-one-out sub-sample and reports
standard errors, bias and influence values, matching R's
bootstrap::jackknife.

Usage:
    from pyjackknife.jackknife import jackknife, jackknife_ci
    from pyjackknife.jackknife.estimators import gamma_moments

    result = jackknife(data, gamma_moments)
    result.se                       # shape and scale standard errors
    ci = jackknife_ci(result, 0.95)
"""

from pyjackknife.jackknife.design import JackknifeDesign
from pyjackknife.jackknife._common import JackknifeParams
from pyjackknife.jackknife.solution import JackknifeSolution
from pyjackknife.jackknife.solvers import jackknife, jackknife_ci

__all__ = [
    "jackknife",
    "jackknife_ci",
    "JackknifeDesign",
    "JackknifeParams",
    "JackknifeSolution",
]
