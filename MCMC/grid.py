"""
Square grid geometry for the discrete-time random walk.

States are addressed either by a 1-based row-major index or by (row, col)
coordinates. Neighbours are produced without boundary clipping, so a candidate
state may lie outside the grid; the weight functions use that to reject moves
across the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .errors import InvalidDirectionError, InvalidStateError

# Side of the only grid for which index lookup is defined
INDEX_GRID_SIZE = 3


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    WEST = 2
    SOUTH = 3


# Proposal order, also used when summing over neighbours
DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.WEST, Direction.SOUTH)

# Coordinate deltas indexed by Direction value (read by the jitted kernels)
DIRECTION_DROW = np.array([-1, 0, 0, 1], dtype=np.int64)
DIRECTION_DCOL = np.array([0, 1, -1, 0], dtype=np.int64)


@dataclass(frozen=True)
class State:
    """A cell (or candidate cell) on the grid."""
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int, grid_size: int) -> "State":
        row, col = to_coordinate(index, grid_size)
        return cls(row, col)

    @property
    def index(self) -> int:
        return to_index(self.row, self.col)

    def inside(self, grid_size: int) -> bool:
        return 0 <= self.row < grid_size and 0 <= self.col < grid_size


def to_coordinate(index: int, grid_size: int) -> tuple[int, int]:
    """Map a 1-based row-major index onto (row, col)."""
    return (index - 1) // grid_size, (index - 1) % grid_size


def to_index(row: int, col: int) -> int:
    """Inverse of `to_coordinate` on the 3x3 grid."""
    if not (0 <= row < INDEX_GRID_SIZE and 0 <= col < INDEX_GRID_SIZE):
        raise InvalidStateError(f"No state index for cell ({row}, {col})")
    return row * INDEX_GRID_SIZE + col + 1


def adjacent_state(state: State, direction: Direction) -> State:
    """Candidate state one step away from `state`; may lie off the grid."""
    try:
        d = Direction(direction)
    except ValueError:
        raise InvalidDirectionError(f"Unknown direction: {direction!r}") from None
    return State(
        state.row + int(DIRECTION_DROW[d]),
        state.col + int(DIRECTION_DCOL[d]),
    )


def are_adjacent(a: State, b: State) -> bool:
    return any(b == adjacent_state(a, d) for d in DIRECTIONS)


def direction_of_movement(current: State, new: State) -> Direction:
    """Direction leading from `current` to the neighbouring state `new`."""
    for d in DIRECTIONS:
        if adjacent_state(current, d) == new:
            return d
    raise InvalidStateError(f"{new} is not adjacent to {current}")


def grid_size_for(num_states: int) -> int:
    """Side of the square grid holding `num_states` cells (floor of the root)."""
    if num_states < 1:
        raise ValueError("num_states must be a positive integer.")
    return int(np.sqrt(num_states))


def check_state_index(index: int, grid_size: int) -> None:
    if not 1 <= index <= grid_size * grid_size:
        raise InvalidStateError(
            f"State {index} is outside the {grid_size}x{grid_size} grid"
        )


__all__ = [
    "Direction",
    "DIRECTIONS",
    "State",
    "to_coordinate",
    "to_index",
    "adjacent_state",
    "are_adjacent",
    "direction_of_movement",
    "grid_size_for",
    "check_state_index",
]
