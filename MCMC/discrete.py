"""
Discrete-time random walk on a square grid.

The walker proposes one of the four neighbours with equal probability and
accepts the move with the Metropolis rule min(1, w(new) / w(current)), where
w is either the uniform weight or a user supplied steady-state table. The
estimators run many independent walks of a fixed number of proposals and
report the fraction that end in the requested cell. The transition
probability calculators evaluate the same rule analytically.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from numba import njit

from .grid import (
    DIRECTIONS,
    DIRECTION_DCOL,
    DIRECTION_DROW,
    INDEX_GRID_SIZE,
    Direction,
    State,
    adjacent_state,
    are_adjacent,
    check_state_index,
    direction_of_movement,
    grid_size_for,
)
from .trials import ITERATIONS, run_trials
from .weights import _acceptance, _weight, as_weight_table

# Symmetric proposal: each direction is tried with probability 1/4
PROPOSE_PROBABILITY = 1.0 / len(DIRECTIONS)

_NO_TABLE = np.empty(0, dtype=np.float64)


# ============================================================================
# Sampler kernel
# ============================================================================


@njit(cache=True, nogil=True)
def _metropolis_trials(
    start_row: int,
    start_col: int,
    grid_size: int,
    n_steps: int,
    trials: int,
    table: NDArray[np.float64],
    use_table: bool,
    seed: int,
) -> NDArray[np.int64]:
    """Run `trials` walks of `n_steps` proposals; count the landing cells."""
    if seed >= 0:
        np.random.seed(seed)
    counts = np.zeros((grid_size, grid_size), dtype=np.int64)
    n_directions = DIRECTION_DROW.shape[0]
    for _ in range(trials):
        row = start_row
        col = start_col
        w_current = _weight(row, col, grid_size, table, use_table)
        for _ in range(n_steps):
            d = np.random.randint(0, n_directions)
            new_row = row + DIRECTION_DROW[d]
            new_col = col + DIRECTION_DCOL[d]
            w_new = _weight(new_row, new_col, grid_size, table, use_table)
            if np.random.random() < _acceptance(w_new, w_current):
                row = new_row
                col = new_col
                w_current = w_new
        counts[row, col] += 1
    return counts


def metropolis_occupancy(
    start: State,
    grid_size: int,
    num_steps: int,
    *,
    ssprob: Sequence[float] | NDArray[np.float64] | None = None,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> NDArray[np.int64]:
    """
    Landing-cell counts of independent Metropolis walks.

    Every trial starts at `start`, makes `num_steps` proposals and adds one
    to the cell it ends in. Uses uniform weights unless `ssprob` is given.

    Returns:
        (grid_size, grid_size) int64 counts summing to `iterations`.
    """
    if not start.inside(grid_size):
        raise ValueError(f"start state {start} lies outside the {grid_size}x{grid_size} grid")
    if num_steps < 0:
        raise ValueError("num_steps must be a non-negative integer.")
    if ssprob is None:
        table, use_table = _NO_TABLE, False
    else:
        table, use_table = as_weight_table(ssprob, grid_size), True

    def kernel(trials: int, kernel_seed: int) -> NDArray[np.int64]:
        return _metropolis_trials(
            int(start.row), int(start.col), int(grid_size), int(num_steps),
            trials, table, use_table, kernel_seed,
        )

    return run_trials(kernel, iterations, seed=seed, n_jobs=n_jobs, verbose=verbose)


# ============================================================================
# Analytic one-step probabilities
# ============================================================================


def directional_transition_probabilities(
    state: State,
    grid_size: int,
    ssprob: Sequence[float] | NDArray[np.float64] | None = None,
) -> dict[Direction, float]:
    """Probability of proposing and accepting a move in each direction."""
    if ssprob is None:
        table, use_table = _NO_TABLE, False
    else:
        table, use_table = as_weight_table(ssprob, grid_size), True
    w_current = _weight(state.row, state.col, grid_size, table, use_table)
    probabilities = {}
    for d in DIRECTIONS:
        new = adjacent_state(state, d)
        w_new = _weight(new.row, new.col, grid_size, table, use_table)
        probabilities[d] = _acceptance(w_new, w_current) * PROPOSE_PROBABILITY
    return probabilities


def get_transition_probability(s1: int, s2: int, n: int) -> float:
    """
    One-step probability from s1 to s2 with uniform steady-state weights.

    For s1 != s2 this returns the largest of the four directional
    probabilities rather than the one pointing at s2. With uniform weights
    every move that stays on the grid is accepted, so the two agree for
    adjacent states.
    """
    grid_size = grid_size_for(n)
    check_state_index(s1, grid_size)
    check_state_index(s2, grid_size)
    current = State.from_index(s1, grid_size)
    target = State.from_index(s2, grid_size)

    if s1 != s2 and not are_adjacent(current, target):
        return 0.0

    probabilities = directional_transition_probabilities(current, grid_size)
    if s1 == s2:
        return 1.0 - sum(probabilities.values())
    return max(probabilities.values())


def get_bias_transition_probability(
    s1: int,
    s2: int,
    ssprob: Sequence[float] | NDArray[np.float64],
) -> float:
    """One-step probability from s1 to s2 on the 3x3 grid with given weights."""
    grid_size = INDEX_GRID_SIZE
    table = as_weight_table(ssprob, grid_size)
    check_state_index(s1, grid_size)
    check_state_index(s2, grid_size)
    current = State.from_index(s1, grid_size)
    target = State.from_index(s2, grid_size)

    if s1 != s2 and not are_adjacent(current, target):
        return 0.0

    probabilities = directional_transition_probabilities(current, grid_size, table)
    if s1 == s2:
        return 1.0 - sum(probabilities.values())
    return probabilities[direction_of_movement(current, target)]


# ============================================================================
# Monte-Carlo estimates
# ============================================================================


def estimated_distribution(
    s1: int,
    n: int,
    num_steps: int,
    *,
    ssprob: Sequence[float] | NDArray[np.float64] | None = None,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> NDArray[np.float64]:
    """Empirical distribution over the grid after `num_steps` proposals from s1."""
    grid_size = grid_size_for(n)
    check_state_index(s1, grid_size)
    counts = metropolis_occupancy(
        State.from_index(s1, grid_size),
        grid_size,
        num_steps,
        ssprob=ssprob,
        iterations=iterations,
        seed=seed,
        n_jobs=n_jobs,
        verbose=verbose,
    )
    return counts / float(iterations)


def get_estimated_probability(
    s1: int,
    s2: int,
    n: int,
    num_steps: int,
    *,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> float:
    """Estimated probability of being in s2 after `num_steps` proposals from s1."""
    grid_size = grid_size_for(n)
    check_state_index(s2, grid_size)
    distribution = estimated_distribution(
        s1, n, num_steps,
        iterations=iterations, seed=seed, n_jobs=n_jobs, verbose=verbose,
    )
    target = State.from_index(s2, grid_size)
    return float(distribution[target.row, target.col])


def get_bias_estimated_probability(
    s1: int,
    s2: int,
    ssprob: Sequence[float] | NDArray[np.float64],
    num_steps: int,
    *,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> float:
    """Same as `get_estimated_probability` on the 3x3 grid with given weights."""
    grid_size = INDEX_GRID_SIZE
    check_state_index(s2, grid_size)
    distribution = estimated_distribution(
        s1, grid_size * grid_size, num_steps,
        ssprob=ssprob, iterations=iterations, seed=seed, n_jobs=n_jobs, verbose=verbose,
    )
    target = State.from_index(s2, grid_size)
    return float(distribution[target.row, target.col])


__all__ = [
    "PROPOSE_PROBABILITY",
    "metropolis_occupancy",
    "directional_transition_probabilities",
    "get_transition_probability",
    "get_bias_transition_probability",
    "estimated_distribution",
    "get_estimated_probability",
    "get_bias_estimated_probability",
]
