"""
Core infrastructure for pyjackknife.

Shared abstractions used by the jackknife module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pyjackknife.core.result import Result
from pyjackknife.core.exceptions import (
    PyJackknifeError,
    ValidationError,
    DimensionError,
    InvalidInputError,
    ContractViolationError,
    EstimatorError,
    NumericalError,
    NumericDomainError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyJackknifeError",
    "ValidationError",
    "DimensionError",
    "InvalidInputError",
    "ContractViolationError",
    "EstimatorError",
    "NumericalError",
    "NumericDomainError",
]
