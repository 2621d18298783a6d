"""
Exception hierarchy for pyjackknife.

All exceptions inherit from PyJackknifeError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the failing component, the omitted index and
      the parameter column where they apply
    - Never catch and re-raise with less information
"""


class PyJackknifeError(Exception):
    """Base exception for all pyjackknife errors."""
    pass


class ValidationError(PyJackknifeError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the sample is a scalar or has more than two dimensions.
    """
    pass


class InvalidInputError(ValidationError):
    """
    Sample is too short for a jackknife.

    The delete-1 jackknife variance is undefined for n < 2.

    Attributes:
        n_observations: Number of observations supplied
        min_observations: Minimum number required
    """

    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        min_observations: int = 2,
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.min_observations = min_observations


class ContractViolationError(PyJackknifeError):
    """
    Estimator broke its output contract.

    Raised when the estimator returns something that is not a flat numeric
    vector, or a vector whose length differs from the one it returned on
    the full sample.

    Attributes:
        omitted_index: Index of the observation left out when the bad row
            was produced, or None for the full-sample call
        expected_shape: Shape of the full-sample estimate
        actual_shape: Shape actually returned
    """

    def __init__(
        self,
        message: str,
        omitted_index: int | None = None,
        expected_shape: tuple[int, ...] | None = None,
        actual_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.omitted_index = omitted_index
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape


class NumericalError(PyJackknifeError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NumericDomainError(NumericalError):
    """
    A mathematically undefined operation was hit.

    Raised when an estimator divides by zero (or otherwise leaves its
    domain) on a leave-one-out sub-sample, when it returns NaN/Inf, or
    when a scaled jackknife variance is negative before the square root.

    Attributes:
        omitted_index: Index of the omitted observation, or None when the
            failure is not tied to a single sub-sample
        column: Parameter column involved, if known
    """

    def __init__(
        self,
        message: str,
        omitted_index: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.omitted_index = omitted_index
        self.column = column


class EstimatorError(PyJackknifeError):
    """
    Estimator raised an exception that is not a numeric domain failure.

    The original exception is chained as __cause__.

    Attributes:
        omitted_index: Index of the omitted observation, or None for the
            full-sample call
    """

    def __init__(self, message: str, omitted_index: int | None = None):
        super().__init__(message)
        self.omitted_index = omitted_index
