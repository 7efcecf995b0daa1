"""
Result envelope shared by every solver backend.

A backend returns Result[P]: its own payload P plus the metadata every
solve has in common (info dict, timing breakdown, backend name and
non-fatal warnings). User-facing wrappers such as SystemSolution read
from it and never mutate it.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable output of one backend call.

    Attributes:
        params: Backend payload, e.g. SystemParams
        info: Flat metadata such as method, rank and pivots
        timing: Seconds per section plus 'total_seconds', or None
        backend_name: Name of the producing backend, e.g. 'cpu_gauss_jordan'
        warnings: Messages about conditions that did not stop the solve

    Example:
        >>> Result(
        ...     params=payload,
        ...     info={'method': 'gauss_jordan', 'rank': 2},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss_jordan',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some warning message contains `substring`."""
        return any(substring in message for message in self.warnings)
