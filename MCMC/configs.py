"""
Example scenarios for the command line runner.

- REFERENCE: the five reference questions at full size (10,000,000 trials)
- QUICK: same inputs with 100,000 trials, for smoke runs
- LONG_RUN: long walks and long times, where the estimates approach the
  stationary distributions
"""
from __future__ import annotations
from dataclasses import dataclass

from .trials import ITERATIONS


@dataclass
class ExampleConfig:
    """Inputs for one evaluation of the five operations."""
    name: str = "reference"

    # Discrete-time walk, uniform weights
    num_states: int = 9
    transition_pair: tuple = (1, 2)     # A1
    estimate_pair: tuple = (1, 2)       # A2
    num_steps: int = 3                  # Proposals per walk

    # Discrete-time walk, given weights (3x3 grid)
    ssprob: tuple = (0.1, 0.1, 0.1, 0.2, 0.1, 0.2, 0.05, 0.05, 0.1)
    bias_pair: tuple = (1, 2)           # A3

    # Continuous-time chain
    rates: tuple = (10.0, 20.0, 10.0, 1.0, 1.0, 1.0)
    continuous_pair: tuple = (1, 2)     # A4
    continuous_estimate_pair: tuple = (1, 3)  # A5
    target_time: float = 0.07

    # Sampling
    iterations: int = ITERATIONS
    seed: int | None = None
    n_jobs: int = 1


def reference_config() -> ExampleConfig:
    return ExampleConfig()


def quick_config() -> ExampleConfig:
    """Reference inputs with 100x fewer trials."""
    return ExampleConfig(name="quick", iterations=ITERATIONS // 100, seed=42)


def long_run_config() -> ExampleConfig:
    """Long walks (uniform 1/9 limit) and long CTMC times."""
    return ExampleConfig(
        name="long_run",
        num_steps=100,
        target_time=5.0,
        iterations=ITERATIONS // 10,
    )


# Dictionary of all available configs
CONFIGS = {
    "reference": reference_config,
    "quick": quick_config,
    "long_run": long_run_config,
}


def get_config(name: str) -> ExampleConfig:
    """Get configuration by name."""
    if name not in CONFIGS:
        raise ValueError(f"Unknown config: {name}. Available: {list(CONFIGS.keys())}")
    return CONFIGS[name]()


def list_configs() -> list[str]:
    """List available configuration names."""
    return list(CONFIGS.keys())
