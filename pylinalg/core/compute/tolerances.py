"""
Tolerance tiers for floating-point comparison.

Every numeric container carries one tolerance, fixed at construction.
All "is this value zero / equal to that value" tests in the library compare
within +/- tolerance of that single configured value:

- DEFAULT (1e-9): hand-entered systems, the library default
- STRICT (1e-12): well-scaled systems where small pivots are meaningful
- RELAXED (1e-6): data carried over from noisy or single-precision sources

Used by the primitives, the elimination engine and the test suite.
"""

from dataclasses import dataclass
import math

from pylinalg.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Named absolute tolerance for numerical comparison."""
    value: float
    name: str
    description: str


DEFAULT_TOLERANCE = 1e-9

DEFAULT = ToleranceTier(
    value=DEFAULT_TOLERANCE,
    name='default',
    description='Absolute tolerance for hand-entered dense systems',
)

STRICT = ToleranceTier(
    value=1e-12,
    name='strict',
    description='Near machine precision, for well-scaled systems',
)

RELAXED = ToleranceTier(
    value=1e-6,
    name='relaxed',
    description='Loose comparison for noisy or single-precision input',
)

TIERS = {tier.name: tier for tier in (DEFAULT, STRICT, RELAXED)}

# Pivots smaller than this multiple of the tolerance are reported as
# near-degenerate: their classification depends on the chosen tolerance.
NEAR_ZERO_FACTOR = 1e3


def resolve_tolerance(tolerance: 'float | ToleranceTier | str | None') -> float:
    """
    Resolve a tolerance argument to the float used in comparisons.

    Args:
        tolerance: None (library default), a positive finite float,
            a ToleranceTier, or the name of a tier ('default', 'strict',
            'relaxed').

    Returns:
        The absolute tolerance as a float

    Raises:
        ValidationError: If the argument is unknown, non-finite or
            not strictly positive
    """
    if tolerance is None:
        return DEFAULT_TOLERANCE
    if isinstance(tolerance, ToleranceTier):
        return tolerance.value
    if isinstance(tolerance, str):
        try:
            return TIERS[tolerance].value
        except KeyError:
            raise ValidationError(
                f"Unknown tolerance tier {tolerance!r}, expected one of {sorted(TIERS)}"
            ) from None
    if isinstance(tolerance, bool):
        raise ValidationError(f"tolerance: expected a number, got {tolerance!r}")
    try:
        value = float(tolerance)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"tolerance: cannot convert {tolerance!r} to float") from e
    if not math.isfinite(value) or value <= 0.0:
        raise ValidationError(
            f"tolerance: must be positive and finite, got {value}"
        )
    return value


def is_zero(value: float, tolerance: float) -> bool:
    """True if value lies strictly within +/- tolerance of zero."""
    return -tolerance < value < tolerance


def is_close(value: float, target: float, tolerance: float) -> bool:
    """True if value lies strictly within +/- tolerance of target."""
    return target - tolerance < value < target + tolerance
