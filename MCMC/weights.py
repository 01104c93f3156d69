"""
Steady-state weights and the Metropolis acceptance rule.

Only ratios of weights enter the acceptance probability, so neither variant
has to be normalised. Both return 0 for cells off the grid, which is what
rejects proposals across the boundary.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from numba import njit

from .grid import State


@njit(cache=True, nogil=True, inline='always')
def _inside(row: int, col: int, grid_size: int) -> bool:
    return 0 <= row < grid_size and 0 <= col < grid_size


@njit(cache=True, nogil=True)
def _uniform_weight(row: int, col: int, grid_size: int) -> float:
    if not _inside(row, col, grid_size):
        return 0.0
    # Evaluates left to right to 1.0 rather than 1 / grid_size**2. The value
    # is the same for every cell, so acceptance ratios are unaffected.
    return 1.0 / grid_size * grid_size


@njit(cache=True, nogil=True)
def _table_weight(row: int, col: int, grid_size: int, table: NDArray[np.float64]) -> float:
    if not _inside(row, col, grid_size):
        return 0.0
    return table[row * grid_size + col]


@njit(cache=True, nogil=True)
def _weight(
    row: int,
    col: int,
    grid_size: int,
    table: NDArray[np.float64],
    use_table: bool,
) -> float:
    if use_table:
        return _table_weight(row, col, grid_size, table)
    return _uniform_weight(row, col, grid_size)


@njit(cache=True, nogil=True)
def _acceptance(weight_new: float, weight_current: float) -> float:
    """min(1, new/current); a zero-weight current state never moves."""
    if weight_current <= 0.0:
        return 0.0
    ratio = weight_new / weight_current
    if ratio < 1.0:
        return ratio
    return 1.0


def as_weight_table(
    ssprob: Sequence[float] | NDArray[np.float64],
    grid_size: int,
) -> NDArray[np.float64]:
    """Validate a per-cell steady-state table and return it as float64."""
    table = np.ascontiguousarray(ssprob, dtype=np.float64).reshape(-1)
    if table.shape[0] != grid_size * grid_size:
        raise ValueError(
            f"steady-state table must have {grid_size * grid_size} entries, got {table.shape[0]}"
        )
    if np.any(table < 0.0) or not np.all(np.isfinite(table)):
        raise ValueError("steady-state table entries must be finite and non-negative.")
    return table


def uniform_weight(state: State, grid_size: int) -> float:
    return _uniform_weight(state.row, state.col, grid_size)


def table_weight(
    state: State,
    grid_size: int,
    table: Sequence[float] | NDArray[np.float64],
) -> float:
    """Weight of `state` looked up by its 1-based index; 0 off the grid."""
    if not state.inside(grid_size):
        return 0.0
    return float(table[state.index - 1])


def acceptance_probability(weight_new: float, weight_current: float) -> float:
    return _acceptance(float(weight_new), float(weight_current))


__all__ = [
    "uniform_weight",
    "table_weight",
    "acceptance_probability",
    "as_weight_table",
]
