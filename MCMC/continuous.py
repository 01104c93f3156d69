"""
Three-state continuous-time Markov chain simulated with the Gillespie method.

Rates are given as a flat table in the fixed order
[1->2, 1->3, 2->1, 2->3, 3->1, 3->2]. A trial starts in s1 at time 0 and
repeatedly draws an exponential holding time from the propensity of the
current state, then jumps to one of the two other states with probability
proportional to its rate. The jump that carries the clock past the target
time is still applied, so the recorded state is the state entered by the
first jump after the target time.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from numba import njit

from .errors import UndefinedTransitionError
from .trials import ITERATIONS, run_trials

NUM_STATES = 3

# Position in the rate table of each (from, to) pair, -1 on the diagonal
RATE_INDEX = np.array(
    [
        [-1, 0, 1],
        [2, -1, 3],
        [4, 5, -1],
    ],
    dtype=np.int64,
)


# ============================================================================
# Helper Functions (JIT compiled)
# ============================================================================


@njit(cache=True, nogil=True, inline='always')
def _propensity(state: int, rates: NDArray[np.float64]) -> float:
    """Total exit rate of a 1-based state."""
    return rates[state * 2 - 1] + rates[state * 2 - 2]


@njit(cache=True, nogil=True)
def _transition_probability(s1: int, s2: int, rates: NDArray[np.float64]) -> float:
    idx = RATE_INDEX[s1 - 1, s2 - 1]
    if idx < 0:
        return 0.0
    propensity = _propensity(s1, rates)
    if propensity <= 0.0:
        return 0.0
    return rates[idx] / propensity


@njit(cache=True, nogil=True)
def _ctmc_trials(
    s1: int,
    rates: NDArray[np.float64],
    target_time: float,
    trials: int,
    seed: int,
) -> NDArray[np.int64]:
    """Run `trials` trajectories up to `target_time`; count final states."""
    if seed >= 0:
        np.random.seed(seed)
    counts = np.zeros(3, dtype=np.int64)
    for _ in range(trials):
        state = s1
        time = 0.0
        while time < target_time:
            propensity = _propensity(state, rates)
            if propensity <= 0.0:
                # absorbing
                break
            r = 1.0 - np.random.random()
            time += -(1.0 / propensity) * math.log(r)

            # Tower sampling between the two other states, lower one first
            first = 2 if state == 1 else 1
            second = 6 - state - first
            if np.random.random() < _transition_probability(state, first, rates):
                state = first
            else:
                state = second
        counts[state - 1] += 1
    return counts


# ============================================================================
# Public API
# ============================================================================


def as_rate_table(rates: Sequence[float] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Validate a 6-entry rate table and return it as float64."""
    table = np.ascontiguousarray(rates, dtype=np.float64).reshape(-1)
    if table.shape[0] != 2 * NUM_STATES:
        raise ValueError(f"rate table must have {2 * NUM_STATES} entries, got {table.shape[0]}")
    if np.any(table < 0.0) or not np.all(np.isfinite(table)):
        raise ValueError("rates must be finite and non-negative.")
    return table


def _check_state(state: int) -> int:
    if state not in (1, 2, 3):
        raise UndefinedTransitionError(
            f"State {state} is not one of the {NUM_STATES} chain states"
        )
    return int(state)


def get_propensity(state: int, rates: Sequence[float] | NDArray[np.float64]) -> float:
    state = _check_state(state)
    return float(_propensity(state, as_rate_table(rates)))


def get_continuous_transition_probability(
    s1: int,
    s2: int,
    rates: Sequence[float] | NDArray[np.float64],
) -> float:
    """
    Jump probability from s1 to s2 in the embedded chain.

    Equals rate(s1 -> s2) / propensity(s1). There are no self jumps, so
    s1 == s2 gives 0, as does every pair leaving an absorbing state.
    """
    s1 = _check_state(s1)
    s2 = _check_state(s2)
    return float(_transition_probability(s1, s2, as_rate_table(rates)))


def continuous_occupancy(
    s1: int,
    rates: Sequence[float] | NDArray[np.float64],
    target_time: float,
    *,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> NDArray[np.int64]:
    """
    Final-state counts of independent trajectories started in s1.

    Returns:
        Length-3 int64 counts (index = state - 1) summing to `iterations`.
    """
    s1 = _check_state(s1)
    table = as_rate_table(rates)
    target = float(target_time)
    if not target >= 0.0 or math.isinf(target):
        raise ValueError("target_time must be a finite non-negative number.")

    def kernel(trials: int, kernel_seed: int) -> NDArray[np.int64]:
        return _ctmc_trials(s1, table, target, trials, kernel_seed)

    return run_trials(kernel, iterations, seed=seed, n_jobs=n_jobs, verbose=verbose)


def continuous_estimated_distribution(
    s1: int,
    rates: Sequence[float] | NDArray[np.float64],
    target_time: float,
    **kwargs,
) -> NDArray[np.float64]:
    counts = continuous_occupancy(s1, rates, target_time, **kwargs)
    return counts / float(counts.sum())


def get_continuous_estimated_probability(
    s1: int,
    s2: int,
    rates: Sequence[float] | NDArray[np.float64],
    target_time: float,
    *,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> float:
    """Estimated probability that a chain started in s1 is in s2 at `target_time`."""
    s2 = _check_state(s2)
    distribution = continuous_estimated_distribution(
        s1, rates, target_time,
        iterations=iterations, seed=seed, n_jobs=n_jobs, verbose=verbose,
    )
    return float(distribution[s2 - 1])


__all__ = [
    "NUM_STATES",
    "as_rate_table",
    "get_propensity",
    "get_continuous_transition_probability",
    "continuous_occupancy",
    "continuous_estimated_distribution",
    "get_continuous_estimated_probability",
]
