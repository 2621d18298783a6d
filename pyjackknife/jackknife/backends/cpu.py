"""
CPU backends for the delete-1 jackknife.

CPUJackknifeBackend: Sequential leave-one-out loop.
ThreadedJackknifeBackend: Leave-one-out calls fanned out to a thread pool.

Both write into a pre-sized (n, k) table indexed by omitted observation,
so they produce identical tables for a deterministic estimator.
"""

from __future__ import annotations

import os
from collections import deque
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import NDArray

from pyjackknife.core.result import Result
from pyjackknife.core.compute.timing import Timer
from pyjackknife.jackknife._common import JackknifeParams
from pyjackknife.jackknife._influence import influence_values, jackknife_bias
from pyjackknife.jackknife._rows import (
    call_estimator,
    check_row_shape,
    leave_one_out,
)
from pyjackknife.jackknife._variance import jackknife_variance, standard_errors
from pyjackknife.jackknife.design import JackknifeDesign


def _default_workers() -> int:
    """Same default as ThreadPoolExecutor."""
    return min(32, (os.cpu_count() or 1) + 4)


class CPUJackknifeBackend:
    """
    CPU backend for the jackknife, one estimator call at a time.
    """

    @property
    def name(self) -> str:
        return 'cpu_jackknife'

    def solve(self, design: JackknifeDesign) -> Result[JackknifeParams]:
        """Run the jackknife and return Result[JackknifeParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        estimator = design.estimator
        n = design.n_observations

        with timer.section('observed_estimate'):
            t0 = call_estimator(estimator, data, None)

        k = t0.shape[0]
        t = np.empty((n, k), dtype=np.float64)

        with timer.section('leave_one_out'):
            self._fill_table(data, estimator, n, t0.shape, t)

        with timer.section('summary_statistics'):
            scaled_var = jackknife_variance(t, n)
            se, warnings_list = standard_errors(scaled_var, design.negative_variance)
            bias = jackknife_bias(t0, t, n)
            influence = influence_values(t, n)

        timer.stop()

        params = JackknifeParams(
            t0=t0,
            t=t,
            n=n,
            k=k,
            se=se,
            bias=bias,
            influence=influence,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'k': k,
                'negative_variance': design.negative_variance,
                'variance_scale': (n - 1) ** 2 / n,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _fill_table(
        self,
        data: NDArray,
        estimator,
        n: int,
        expected_shape: tuple[int, ...],
        t: NDArray,
    ) -> None:
        """Row i of t <- estimator(data without row i)."""
        for i in range(n):
            row = call_estimator(estimator, leave_one_out(data, i, n), i)
            check_row_shape(row, expected_shape, i)
            t[i] = row


class ThreadedJackknifeBackend(CPUJackknifeBackend):
    """
    CPU backend running leave-one-out estimator calls in a thread pool.

    Each task builds its own leave-one-out sub-sample, and at most
    2 * n_jobs tasks are in flight, so memory stays O(n_jobs * n).
    Futures are consumed in omitted-index order, so the error reported is
    always the one for the lowest failing index, as in the sequential loop.
    """

    def __init__(self, n_jobs: int | None = None):
        self._n_jobs = n_jobs

    @property
    def name(self) -> str:
        return 'threaded_jackknife'

    def _fill_table(
        self,
        data: NDArray,
        estimator,
        n: int,
        expected_shape: tuple[int, ...],
        t: NDArray,
    ) -> None:
        workers = self._n_jobs or _default_workers()
        window = 2 * workers

        def row_for(i: int) -> NDArray:
            return call_estimator(estimator, leave_one_out(data, i, n), i)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            pending: deque = deque()
            next_i = 0
            try:
                for i in range(n):
                    while next_i < n and len(pending) < window:
                        pending.append(executor.submit(row_for, next_i))
                        next_i += 1
                    row = pending.popleft().result()
                    check_row_shape(row, expected_shape, i)
                    t[i] = row
            finally:
                for future in pending:
                    future.cancel()
