"""
Input checks for matrices, vectors and systems.

Every public constructor funnels its raw input through these helpers, so
the arithmetic and the solver can assume float64 arrays of the right
shape. Each helper tests one property and raises on the first failure;
nothing is repaired silently. The `name` argument is the user-facing name
of the argument and prefixes every message.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    DegenerateInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Copy an array-like into a fresh float64 array.

    Integers and booleans are widened to float. Ragged nesting, strings,
    objects and complex numbers are refused.

    Raises:
        ValidationError: If the input is not real numeric data
    """
    try:
        arr = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    kind = arr.dtype.kind
    if kind == 'O':
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if kind == 'c':
        raise ValidationError(f"{name}: complex values are not supported")
    if kind not in 'biuf':
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
        )
    return arr.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise ValidationError if any entry is NaN or infinite."""
    n_nan = int(np.count_nonzero(np.isnan(array)))
    n_inf = int(np.count_nonzero(np.isinf(array)))
    if n_nan or n_inf:
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """Raise DimensionError unless array.ndim == ndim."""
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise DegenerateInputError if some axis has length zero."""
    if array.size == 0:
        raise DegenerateInputError(f"{name}: empty array with shape {array.shape}")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Require every array to have the same number of rows.

    Used to pair a coefficient matrix with its offsets.

    Raises:
        ValueError: If names and arrays differ in number (caller bug)
        DimensionError: If the row counts disagree
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{n}={length}" for n, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_index(index: int, size: int, name: str) -> int:
    """
    Return index as int if 0 <= index < size.

    Negative indices are refused, not wrapped; bool is not an integer here.

    Raises:
        ValidationError: If index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer index, got {type(index).__name__}")
    if not 0 <= index < size:
        raise ValidationError(f"{name}: index {index} out of range for size {size}")
    return int(index)
