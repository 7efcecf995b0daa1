"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or when the
    equations of a system do not share the same number of unknowns.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Binary operation between containers of incompatible shape.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class DegenerateInputError(ValidationError):
    """
    Input is structurally valid but degenerate for the requested operation.

    Raised for an empty equation system, or a zero vector passed where a
    nonzero one is required (normalize, angle, projection, base point).
    """
    pass


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class InvariantViolationError(NumericalError):
    """
    An internal invariant of the elimination algorithm was broken.

    Raised when a pivot entry reads as zero (within tolerance) at the moment
    it is scaled to one, although pivot selection claimed it was nonzero.
    This is a defect in the tolerance handling or the algorithm, never a
    consequence of user input.

    Attributes:
        row: Row index of the offending pivot
        variable: Column (variable) index of the offending pivot
        value: The pivot value that was read
        tolerance: Tolerance in force when the pivot was read
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        variable: int | None = None,
        value: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.variable = variable
        self.value = value
        self.tolerance = tolerance
