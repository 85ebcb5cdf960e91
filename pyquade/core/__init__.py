"""
Core infrastructure for PyQuade.

This module provides shared abstractions and utilities used by the
Quade test implementation.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from pyquade.core.result import Result
from pyquade.core.exceptions import (
    PyQuadeError,
    ValidationError,
    DimensionError,
    NumericalError,
    UndefinedStatisticError,
    ComparatorPreconditionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyQuadeError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "UndefinedStatisticError",
    "ComparatorPreconditionError",
]
