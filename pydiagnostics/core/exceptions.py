"""
Exception hierarchy for pydiagnostics.

All exceptions inherit from PyDiagnosticsError so callers can catch any
library-specific failure in one place. Domain errors hang off the two
broad families below:

    ValidationError   the input cannot be analysed as given
    NumericalError    the input is valid but the statistic is undefined

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDiagnosticsError(Exception):
    """Base exception for all pydiagnostics errors."""
    pass


class ValidationError(PyDiagnosticsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    A series must be one-dimensional.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested statistic.

    Attributes:
        required: Minimum number of observations the statistic needs
        actual: Number of observations supplied
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class EmptySeriesError(InsufficientDataError):
    """The series has no observations at all."""

    def __init__(self, message: str = "series is empty"):
        super().__init__(message, required=1, actual=0)


class InvalidGroupCountError(ValidationError):
    """
    Number of groups is unusable for a grouped test.

    Attributes:
        n_groups: Requested number of groups
        n_observations: Length of the series being partitioned
    """

    def __init__(
        self,
        message: str,
        n_groups: int | None = None,
        n_observations: int | None = None,
    ):
        super().__init__(message)
        self.n_groups = n_groups
        self.n_observations = n_observations


class InvalidConfigurationError(ValidationError):
    """
    A tuning parameter is outside its admissible range.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(self, message: str, parameter: str | None = None, value=None):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(PyDiagnosticsError):
    """
    Numerical computation failed.

    Base class for errors arising from the data rather than the call.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    The data has no variation where the statistic needs some.

    Raised for constant series in autocorrelation, one-sided sign
    sequences in the runs test, and zero within-group spread in the
    Levene test.
    """
    pass


class DiagnosticStageError(PyDiagnosticsError):
    """
    A pipeline stage failed.

    The original exception is chained as __cause__ and kept on .error.

    Attributes:
        stage: Name of the stage that failed (e.g. 'levene')
        error: The exception raised by that stage
    """

    def __init__(self, stage: str, error: Exception):
        super().__init__(f"stage '{stage}' failed: {type(error).__name__}: {error}")
        self.stage = stage
        self.error = error
