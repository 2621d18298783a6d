"""
Solution wrapper for jackknife results.

JackknifeSolution wraps Result[JackknifeParams] and provides convenient
accessors and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyjackknife.core.result import Result
from pyjackknife.jackknife._common import JackknifeParams

if TYPE_CHECKING:
    from pyjackknife.jackknife.design import JackknifeDesign


@dataclass
class JackknifeSolution:
    """
    User-facing jackknife results.

    Matches R's bootstrap::jackknife output: jack.se, jack.bias and
    jack.values, plus the full-sample estimate and influence values.
    summary() produces a print.boot-style table.
    """
    _result: Result[JackknifeParams]
    _design: 'JackknifeDesign'

    # --- Core fields ---

    @property
    def se(self) -> NDArray[np.floating[Any]]:
        """Jackknife standard errors, shape (k,)."""
        return self._result.params.se

    @property
    def bias(self) -> NDArray[np.floating[Any]]:
        """Jackknife bias estimates, shape (k,)."""
        return self._result.params.bias

    @property
    def t0(self) -> NDArray[np.floating[Any]]:
        """Estimate on the full sample, shape (k,)."""
        return self._result.params.t0

    @property
    def t(self) -> NDArray[np.floating[Any]]:
        """Pseudo-estimates, shape (n, k); row i omits observation i."""
        return self._result.params.t

    @property
    def influence(self) -> NDArray[np.floating[Any]]:
        """Jackknife influence values, shape (n, k)."""
        return self._result.params.influence

    @property
    def bias_corrected(self) -> NDArray[np.floating[Any]]:
        """t0 - bias, shape (k,)."""
        return self.t0 - self.bias

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def k(self) -> int:
        """Number of estimated parameters."""
        return self._result.params.k

    # --- Metadata ---

    @property
    def data(self) -> NDArray:
        """Original sample."""
        return self._design.data

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Display ---

    def summary(self) -> str:
        """
        R-style jackknife output.

        Produces:
            JACKKNIFE (DELETE-1) ESTIMATES

            n = 5, k = 1, backend = cpu_jackknife

                     original           bias     std. error
                  t1  3.00000        0.00000        0.70711
        """
        lines = ["\nJACKKNIFE (DELETE-1) ESTIMATES\n"]
        lines.append(
            f"n = {self.n}, k = {self.k}, backend = {self.backend_name}"
        )
        lines.append("")

        header = f"{'':>8s} {'original':>14s} {'bias':>14s} {'std. error':>14s}"
        lines.append(header)
        for i in range(self.k):
            label = f"t{i+1}"
            lines.append(
                f"{label:>8s} {self.t0[i]:14.5f} {self.bias[i]:14.5f} "
                f"{self.se[i]:14.5f}"
            )

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"JackknifeSolution(n={self.n}, k={self.k}, "
            f"backend={self.backend_name!r})"
        )
