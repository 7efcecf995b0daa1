"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
primitives and by every domain-specific submodule.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance configuration, timing
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    DegenerateInputError,
    NumericalError,
    InvariantViolationError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DegenerateInputError",
    "NumericalError",
    "InvariantViolationError",
]
