"""
Shared compute infrastructure for PyLinalg.

This module provides tolerance configuration and timing utilities that are
shared across all domain-specific backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    tolerances: Tolerance tiers and comparison helpers
    timing: Execution timing utilities
"""

from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    DEFAULT_TOLERANCE,
    resolve_tolerance,
    is_zero,
    is_close,
)
from pylinalg.core.compute.timing import Timer, timed

__all__ = [
    # Tolerances
    "ToleranceTier",
    "DEFAULT_TOLERANCE",
    "resolve_tolerance",
    "is_zero",
    "is_close",
    # Timing
    "Timer",
    "timed",
]
