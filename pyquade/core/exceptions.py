"""
Exception hierarchy for PyQuade.

All exceptions inherit from PyQuadeError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyQuadeError(Exception):
    """Base exception for all PyQuade errors."""
    pass


class ValidationError(PyQuadeError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, before any
    computation takes place.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when the observation matrix is not 2D or has too few
    blocks (rows) or treatments (columns).
    """
    pass


class NumericalError(PyQuadeError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class UndefinedStatisticError(NumericalError):
    """
    The Quade statistic is undefined for this data.

    Raised when the denominator term T4 is zero: every block carries the
    same within-block rank pattern (or has no spread at all), so the
    weighted ranks have no residual variability and W = k*T3/T4 is 0/0
    or x/0.

    Attributes:
        t3: Treatment term T3 = sum(Ti^2) / r
        t4: Denominator term T4 = sum(rij^2) - T3
    """

    def __init__(
        self,
        message: str,
        t3: float | None = None,
        t4: float | None = None,
    ):
        super().__init__(message)
        self.t3 = t3
        self.t4 = t4


class ComparatorPreconditionError(NumericalError):
    """
    Post-hoc comparator cannot compute a critical value.

    Raised when the LSD comparator is handed non-positive denominator
    degrees of freedom or a non-positive T4. Unreachable through
    quade_test(), which fails earlier with UndefinedStatisticError.

    Attributes:
        df_denom: Denominator degrees of freedom supplied
        t4: Denominator term supplied
    """

    def __init__(
        self,
        message: str,
        df_denom: float | None = None,
        t4: float | None = None,
    ):
        super().__init__(message)
        self.df_denom = df_denom
        self.t4 = t4
