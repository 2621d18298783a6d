"""
Design class for the delete-1 jackknife.

JackknifeDesign encapsulates all inputs needed by backends to run the
leave-one-out loop. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyjackknife.core.exceptions import ValidationError
from pyjackknife.core.validation import (
    check_array,
    check_choice,
    check_finite,
    check_min_samples,
    check_ndim_range,
)


NegativeVariancePolicy = Literal['raise', 'clamp', 'nan']

NEGATIVE_VARIANCE_POLICIES: tuple[str, ...] = ('raise', 'clamp', 'nan')


@dataclass(frozen=True)
class JackknifeDesign:
    """
    Frozen design for jackknife resampling.

    Attributes:
        data: Sample, shape (n,) or (n, p). Rows are omitted one at a time.
        estimator: fn(sub_sample) -> (k,). Called once on the full data and
            once per leave-one-out sub-sample.
        negative_variance: What to do when a scaled column variance is
            negative before the square root: 'raise', 'clamp' or 'nan'.
    """
    data: NDArray[np.floating[Any]]
    estimator: Callable[[NDArray], ArrayLike]
    negative_variance: NegativeVariancePolicy

    @property
    def n_observations(self) -> int:
        return int(self.data.shape[0])

    @classmethod
    def for_jackknife(
        cls,
        data: ArrayLike,
        estimator: Callable[[NDArray], ArrayLike],
        *,
        negative_variance: NegativeVariancePolicy = 'raise',
    ) -> JackknifeDesign:
        """
        Create a jackknife design with validation.

        Args:
            data: Input sample, 1D or 2D array-like.
            estimator: Function mapping a sub-sample to a vector of k
                parameter estimates.
            negative_variance: Square-root policy, see class docstring.

        Returns:
            Validated JackknifeDesign.

        Raises:
            ValidationError: Non-numeric or non-finite data, bad option.
            DimensionError: data is a scalar or has more than 2 dimensions.
            InvalidInputError: Fewer than 2 observations.
        """
        data_arr = check_array(data, "data")
        check_ndim_range(data_arr, 1, 2, "data")
        check_min_samples(data_arr, 2, "data")
        check_finite(data_arr, "data")

        if not callable(estimator):
            raise ValidationError(
                f"estimator must be callable, got {type(estimator).__name__}"
            )

        check_choice(negative_variance, NEGATIVE_VARIANCE_POLICIES, "negative_variance")

        data_arr = data_arr.astype(np.float64, copy=True)
        data_arr.setflags(write=False)

        return cls(
            data=data_arr,
            estimator=estimator,
            negative_variance=negative_variance,
        )
