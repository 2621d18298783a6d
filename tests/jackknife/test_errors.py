"""
Tests for jackknife failure reporting.

Every error must name the failing sub-sample (omitted index) and, where
it applies, the parameter column.
"""

import math

import numpy as np
import pytest

from pyjackknife import jackknife
from pyjackknife.core.exceptions import (
    ContractViolationError,
    DimensionError,
    EstimatorError,
    InvalidInputError,
    NumericDomainError,
    PyJackknifeError,
    ValidationError,
)
from pyjackknife.jackknife import JackknifeDesign
from pyjackknife.jackknife.estimators import gamma_moments, sample_mean


# ═══════════════════════════════════════════════════════════════════════
# Input validation
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidInput:

    def test_single_observation(self):
        with pytest.raises(InvalidInputError) as exc_info:
            jackknife([4.2], sample_mean)
        assert exc_info.value.n_observations == 1

    def test_empty_sample(self):
        with pytest.raises(InvalidInputError):
            jackknife([], sample_mean)

    def test_scalar_sample(self):
        with pytest.raises(DimensionError):
            jackknife(3.0, sample_mean)

    def test_three_dimensional_sample(self):
        with pytest.raises(DimensionError):
            jackknife(np.zeros((3, 2, 2)), sample_mean)

    def test_string_sample(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            jackknife(["asdf", "sdf"], sample_mean)

    def test_nan_in_sample(self):
        with pytest.raises(ValidationError, match="non-finite"):
            jackknife([1.0, np.nan, 3.0], sample_mean)

    def test_estimator_not_callable(self):
        with pytest.raises(ValidationError, match="callable"):
            jackknife([1.0, 2.0], "mean")

    def test_estimator_missing(self):
        with pytest.raises(ValidationError, match="estimator is required"):
            jackknife([1.0, 2.0])

    def test_unknown_policy(self):
        with pytest.raises(ValidationError, match="negative_variance"):
            jackknife([1.0, 2.0], sample_mean, negative_variance='ignore')

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            jackknife([1.0, 2.0], sample_mean, backend='gpu')

    def test_bad_n_jobs(self):
        with pytest.raises(ValidationError, match="n_jobs"):
            jackknife([1.0, 2.0], sample_mean, backend='threaded', n_jobs=0)

    def test_policy_with_prebuilt_design(self):
        design = JackknifeDesign.for_jackknife([1.0, 2.0, 3.0], sample_mean)
        with pytest.raises(ValidationError, match="negative_variance"):
            jackknife(design, negative_variance='clamp')

    def test_estimator_with_prebuilt_design(self):
        design = JackknifeDesign.for_jackknife([1.0, 2.0, 3.0], sample_mean)
        with pytest.raises(ValidationError, match="estimator must not be given"):
            jackknife(design, sample_mean)


# ═══════════════════════════════════════════════════════════════════════
# Estimator contract
# ═══════════════════════════════════════════════════════════════════════


class TestContractViolation:
    """Rows are checked against the full-sample shape before insertion."""

    def test_shorter_row_names_omitted_index(self):
        data = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

        def flaky(x):
            # Drops a parameter only when 4.0 (index 3) is left out.
            if len(x) == 5 and 4.0 not in x:
                return np.array([np.mean(x)])
            return np.array([np.mean(x), np.var(x)])

        with pytest.raises(ContractViolationError, match="omitting index 3") as exc_info:
            jackknife(data, flaky)

        err = exc_info.value
        assert err.omitted_index == 3
        assert err.expected_shape == (2,)
        assert err.actual_shape == (1,)

    def test_non_numeric_output(self):
        with pytest.raises(ContractViolationError, match="non-numeric") as exc_info:
            jackknife([1.0, 2.0, 3.0], lambda x: "bob")
        assert exc_info.value.omitted_index is None

    def test_ragged_output(self):
        with pytest.raises(ContractViolationError):
            jackknife([1.0, 2.0, 3.0], lambda x: [[1.0], [1.0, 2.0]])

    def test_empty_output(self):
        with pytest.raises(ContractViolationError, match="empty") as exc_info:
            jackknife([1.0, 2.0, 3.0], lambda x: np.array([]))
        assert exc_info.value.omitted_index is None
        assert exc_info.value.actual_shape == (0,)

    def test_empty_output_on_one_sub_sample(self):
        def shrinking(x):
            return np.array([]) if 2.0 not in x else np.array([np.mean(x)])

        with pytest.raises(ContractViolationError, match="empty") as exc_info:
            jackknife([1.0, 2.0, 3.0], shrinking)
        assert exc_info.value.omitted_index == 1

    def test_matrix_output(self):
        with pytest.raises(ContractViolationError, match="1-D") as exc_info:
            jackknife([1.0, 2.0, 3.0], lambda x: np.ones((2, 2)))
        assert exc_info.value.actual_shape == (2, 2)

    def test_catchable_as_base_error(self):
        with pytest.raises(PyJackknifeError):
            jackknife([1.0, 2.0, 3.0], lambda x: "bob")


# ═══════════════════════════════════════════════════════════════════════
# Numeric domain failures
# ═══════════════════════════════════════════════════════════════════════


class TestNumericDomain:

    def test_numpy_division_by_zero_mean(self):
        """Leaving out 5.0 (index 2) leaves [1, -1] with mean zero."""
        data = [1.0, -1.0, 5.0]

        with pytest.raises(NumericDomainError, match="omitting index 2") as exc_info:
            jackknife(data, lambda x: np.array([1.0 / np.mean(x)]))

        assert exc_info.value.omitted_index == 2
        assert isinstance(exc_info.value.__cause__, FloatingPointError)

    def test_python_division_by_zero_mean(self):
        data = [1.0, -1.0, 5.0]

        with pytest.raises(NumericDomainError) as exc_info:
            jackknife(data, lambda x: [1.0 / float(np.mean(x))])

        assert exc_info.value.omitted_index == 2
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_gamma_zero_mean_sub_sample(self):
        data = [2.0, -2.0, 3.0]

        with pytest.raises(NumericDomainError, match="sample mean is zero") as exc_info:
            jackknife(data, gamma_moments)

        assert exc_info.value.omitted_index == 2
        assert isinstance(exc_info.value.__cause__, NumericDomainError)

    def test_gamma_needs_two_points_per_sub_sample(self):
        """n = 2 leaves one point per sub-sample: variance undefined."""
        with pytest.raises(NumericDomainError, match="at least 2 points") as exc_info:
            jackknife([1.0, 2.0], gamma_moments)
        assert exc_info.value.omitted_index == 0

    def test_failure_on_full_sample(self):
        """Full-sample failure carries no omitted index."""
        with pytest.raises(NumericDomainError) as exc_info:
            jackknife([1.0, -1.0, 2.0, -2.0], lambda x: np.array([1.0 / np.mean(x)]))
        assert exc_info.value.omitted_index is None

    def test_nan_row_names_column(self):
        data = np.array([1.0, 2.0, 3.0, 4.0])

        def estimator(x):
            # Second parameter undefined when index 0 is left out.
            return np.array([np.mean(x), np.nan if x[0] == 2.0 else 1.0])

        with pytest.raises(NumericDomainError, match="column 1") as exc_info:
            jackknife(data, estimator)

        assert exc_info.value.omitted_index == 0
        assert exc_info.value.column == 1

    def test_inf_row(self):
        with pytest.raises(NumericDomainError) as exc_info:
            jackknife([1.0, 2.0, 3.0], lambda x: np.array([np.inf]))
        assert exc_info.value.column == 0

    def test_math_domain_error(self):
        data = [1.0, 2.0, 3.0, 4.0]

        def sqrt_when_three_missing(x):
            # Leaving out 3.0 (index 2) takes math.sqrt out of its domain.
            return [math.sqrt(-1.0 if 3.0 not in x else np.mean(x))]

        with pytest.raises(NumericDomainError, match="omitting index 2") as exc_info:
            jackknife(data, sqrt_when_three_missing)

        assert exc_info.value.omitted_index == 2
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_math_log_zero(self):
        data = [1.0, -1.0, 5.0]

        with pytest.raises(NumericDomainError) as exc_info:
            jackknife(data, lambda x: [math.log(abs(float(np.mean(x))))])
        assert exc_info.value.omitted_index == 2

    def test_math_range_error(self):
        data = [1.0, 2.0, 800.0]

        with pytest.raises(NumericDomainError) as exc_info:
            jackknife(data, lambda x: [math.exp(float(np.max(x)))])
        assert exc_info.value.omitted_index is None
        assert isinstance(exc_info.value.__cause__, OverflowError)


class TestEstimatorError:
    """Any other estimator exception is wrapped with the omitted index."""

    def test_wrapped_with_index(self):
        data = np.array([1.0, 2.0, 3.0, 4.0])

        def broken(x):
            if 3.0 not in x:
                raise KeyError("missing column")
            return np.array([np.mean(x)])

        with pytest.raises(EstimatorError, match="omitting index 2") as exc_info:
            jackknife(data, broken)

        assert exc_info.value.omitted_index == 2
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_catchable_as_base_error(self):
        def broken(x):
            raise TypeError("unsupported operand")

        with pytest.raises(PyJackknifeError) as exc_info:
            jackknife([1.0, 2.0, 3.0], broken)
        assert exc_info.value.omitted_index is None

    def test_threaded_backend_wraps_too(self):
        def broken(x):
            if 1.0 not in x:
                raise RuntimeError("boom")
            return np.array([np.mean(x)])

        with pytest.raises(EstimatorError) as exc_info:
            jackknife([1.0, 2.0, 3.0, 4.0], broken, backend='threaded', n_jobs=2)
        assert exc_info.value.omitted_index == 0
