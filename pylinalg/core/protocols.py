"""
Structural interface for solver backends.

A backend satisfies Backend by exposing `name` and `solve`; it does not
subclass anything. solve() dispatch is typed against this protocol.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pylinalg.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Turns a validated design D into Result[P].

    Backends hold no configuration; the tolerance travels with the design.
    """

    @property
    def name(self) -> str:
        """'{device}_{algorithm}', e.g. 'cpu_gauss_jordan'."""
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Run the computation.

        Raises:
            NumericalError: If an internal numerical invariant breaks
        """
        ...
