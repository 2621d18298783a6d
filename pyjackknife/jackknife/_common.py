"""
Common data structures for the jackknife.

JackknifeParams is the parameter payload wrapped by Result[P] and
exposed through JackknifeSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class JackknifeParams:
    """
    Parameter payload for jackknife results.

    Matches the quantities R's bootstrap::jackknife reports:
    - t0: estimate on the full sample
    - t: pseudo-estimate table, row i computed with observation i removed
    - se: sqrt((n-1)^2/n * var(t[:, j]))
    - bias: (n-1) * (mean(t[:, j]) - t0[j])
    - influence: (n-1) * (mean(t[:, j]) - t[i, j])
    """
    t0: NDArray[np.floating[Any]]              # shape (k,)
    t: NDArray[np.floating[Any]]               # shape (n, k)
    n: int
    k: int
    se: NDArray[np.floating[Any]]              # shape (k,)
    bias: NDArray[np.floating[Any]]            # shape (k,)
    influence: NDArray[np.floating[Any]]       # shape (n, k)
