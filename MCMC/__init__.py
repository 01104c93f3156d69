"""
MCMC - Monte-Carlo estimation of Markov chain probabilities

This package estimates transition and occupancy probabilities for two chain
families:
- A discrete-time random walk on a square grid, sampled with the
  Metropolis-Hastings acceptance rule (uniform or given steady-state weights)
- A three-state continuous-time Markov chain, simulated with the Gillespie
  Stochastic Simulation Algorithm (SSA)

Features:
- Analytic one-step transition probabilities for both families
- Seeded, Numba JIT compiled sampling kernels
- Optional multi-threaded trials with order-independent merged counts
"""

from .errors import (
    MarkovError,
    InvalidStateError,
    InvalidDirectionError,
    UndefinedTransitionError,
)
from .grid import (
    Direction,
    DIRECTIONS,
    State,
    to_coordinate,
    to_index,
    adjacent_state,
    are_adjacent,
    direction_of_movement,
)
from .weights import (
    uniform_weight,
    table_weight,
    acceptance_probability,
)
from .trials import ITERATIONS
from .discrete import (
    metropolis_occupancy,
    directional_transition_probabilities,
    get_transition_probability,
    get_bias_transition_probability,
    estimated_distribution,
    get_estimated_probability,
    get_bias_estimated_probability,
)
from .continuous import (
    get_propensity,
    get_continuous_transition_probability,
    continuous_occupancy,
    continuous_estimated_distribution,
    get_continuous_estimated_probability,
)

__all__ = [
    "MarkovError",
    "InvalidStateError",
    "InvalidDirectionError",
    "UndefinedTransitionError",
    "Direction",
    "DIRECTIONS",
    "State",
    "to_coordinate",
    "to_index",
    "adjacent_state",
    "are_adjacent",
    "direction_of_movement",
    "uniform_weight",
    "table_weight",
    "acceptance_probability",
    "ITERATIONS",
    "metropolis_occupancy",
    "directional_transition_probabilities",
    "get_transition_probability",
    "get_bias_transition_probability",
    "estimated_distribution",
    "get_estimated_probability",
    "get_bias_estimated_probability",
    "get_propensity",
    "get_continuous_transition_probability",
    "continuous_occupancy",
    "continuous_estimated_distribution",
    "get_continuous_estimated_probability",
]

__version__ = "1.0.0"
