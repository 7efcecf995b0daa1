"""
Textual display of systems and parametric solutions.

Pure functions over numpy arrays; the solution types call into these.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray


def _num(x: float, precision: int) -> str:
    # -0.0 prints as 0
    return f"{x + 0.0:.{precision}g}"


def format_augmented(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    precision: int = 6,
) -> str:
    """
    Augmented matrix [A | b], one equation per line.

    Example:
        1   1 |  3
        1  -1 |  1
    """
    left = [[_num(x, precision) for x in row] for row in A]
    right = [_num(x, precision) for x in b]
    width = max(len(c) for row in left for c in row)
    rwidth = max(len(c) for c in right)
    lines = [
        " ".join(c.rjust(width) for c in row) + " | " + r.rjust(rwidth)
        for row, r in zip(left, right)
    ]
    return "\n".join(lines)


def format_parametric(
    base_point: NDArray[np.floating[Any]],
    direction_vectors: Sequence[NDArray[np.floating[Any]]],
    tolerance: float,
    *,
    symbol: str = 'v',
    parameter: str = 't',
    precision: int = 6,
) -> list[str]:
    """
    One equation per coordinate of the general solution.

    Coordinate i reads base_point[i] followed by one term per direction
    vector with a nonzero component at i; parameter k is named
    f'{parameter}{k + 1}'. Unit coefficients are written without a number.

    Example (x + y + z = 1):
        v1 = 1 - t1 - t2
        v2 = t1
        v3 = t2
    """
    lines: list[str] = []
    for i, base in enumerate(base_point):
        terms: list[str] = []
        if abs(base) >= tolerance:
            terms.append(_num(base, precision))
        for k, direction in enumerate(direction_vectors):
            c = float(direction[i])
            if abs(c) < tolerance:
                continue
            name = f"{parameter}{k + 1}"
            magnitude = abs(c)
            coef = "" if abs(magnitude - 1.0) < tolerance else _num(magnitude, precision)
            if terms:
                terms.append(f"{'-' if c < 0 else '+'} {coef}{name}")
            else:
                terms.append(f"{'-' if c < 0 else ''}{coef}{name}")
        rhs = " ".join(terms) if terms else "0"
        lines.append(f"{symbol}{i + 1} = {rhs}")
    return lines


def format_as_vectors(
    base_point: NDArray[np.floating[Any]],
    direction_vectors: Sequence[NDArray[np.floating[Any]]],
    free_variables: Sequence[int],
    *,
    symbol: str = 'v',
    decimals: int = 6,
) -> str:
    """
    Column layout: base point plus one scaled column per free variable.

    The '=' sign and the free-variable labels sit on the middle row:

        |v1|   |1.000000|          |-1.000000|          |-1.000000|
        |v2| = |0.000000| + v2 *   | 1.000000| + v3 *   | 0.000000|
        |v3|   |0.000000|          | 0.000000|          | 1.000000|
    """
    d = len(base_point)
    middle = (d - 1) // 2
    label_width = len(f"{symbol}{d}")
    columns = [np.asarray(base_point)] + [np.asarray(v) for v in direction_vectors]
    cell_width = max(
        len(f"{x + 0.0:.{decimals}f}") for column in columns for x in column
    )
    tags = [f"{symbol}{n}" for n in free_variables]
    tag_width = max((len(t) for t in tags), default=0)

    lines = []
    for i in range(d):
        mid = i == middle
        name = f"{symbol}{i + 1}".ljust(label_width)
        parts = [f"|{name}|", "=" if mid else " ", f"|{base_point[i] + 0.0:{cell_width}.{decimals}f}|"]
        for tag, direction in zip(tags, direction_vectors):
            lead = f"+ {tag.rjust(tag_width)} *" if mid else " " * (tag_width + 4)
            parts.append(lead)
            parts.append(f"|{direction[i] + 0.0:{cell_width}.{decimals}f}|")
        lines.append(" ".join(parts))
    return "\n".join(lines)
