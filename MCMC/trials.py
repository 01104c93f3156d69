"""
Splitting independent trials across workers.

Each chunk runs a jitted kernel with its own seed and returns a count array;
the merged counts are the elementwise sum, so the result does not depend on
the order in which chunks finish.
"""

from __future__ import annotations

import os
from typing import Callable

import numpy as np
from numpy.typing import NDArray
from joblib import Parallel, delayed
from tqdm import tqdm

# Trials per estimate used by the reference answers
ITERATIONS = 10_000_000

# Chunks per worker, so slow chunks do not leave workers idle
CHUNKS_PER_JOB = 4


def check_iterations(iterations: int) -> int:
    if not isinstance(iterations, (int, np.integer)) or iterations <= 0:
        raise ValueError("iterations must be a positive integer.")
    return int(iterations)


def kernel_seed(seed: int | None) -> int:
    """Seed argument for a kernel; -1 leaves the stream unseeded."""
    if seed is None:
        return -1
    if not 0 <= seed < 2**32:
        raise ValueError("seed must be an integer in [0, 2**32).")
    return int(seed)


def resolve_jobs(n_jobs: int) -> int:
    if n_jobs == 0:
        raise ValueError("n_jobs must be non-zero.")
    if n_jobs < 0:
        return max(1, (os.cpu_count() or 1) + 1 + n_jobs)
    return n_jobs


def split_trials(iterations: int, n_chunks: int) -> list[int]:
    """Near-equal positive chunk sizes summing to `iterations`."""
    n_chunks = max(1, min(n_chunks, iterations))
    base, extra = divmod(iterations, n_chunks)
    return [base + (1 if i < extra else 0) for i in range(n_chunks)]


def chunk_seeds(seed: int | None, n_chunks: int) -> list[int]:
    if seed is None:
        return [-1] * n_chunks
    state = np.random.SeedSequence(kernel_seed(seed)).generate_state(n_chunks, dtype=np.uint32)
    return [int(s) for s in state]


def run_trials(
    kernel: Callable[[int, int], NDArray[np.int64]],
    iterations: int,
    *,
    seed: int | None = None,
    n_jobs: int = 1,
    verbose: bool = False,
) -> NDArray[np.int64]:
    """
    Run `iterations` trials through `kernel(trials, seed)` and merge the counts.

    Args:
        kernel: Callable running a number of trials with a kernel seed and
            returning an occupancy count array.
        iterations: Total number of trials.
        seed: Base seed; None for an unseeded run.
        n_jobs: Number of worker threads (-1 = all cores). With 1, the
            trials run in the calling thread as a single stream.
        verbose: Print a progress bar over chunks.

    Returns:
        Occupancy counts summing to `iterations`.
    """
    iterations = check_iterations(iterations)
    jobs = resolve_jobs(n_jobs)
    if jobs == 1:
        return kernel(iterations, kernel_seed(seed))

    sizes = split_trials(iterations, jobs * CHUNKS_PER_JOB)
    seeds = chunk_seeds(seed, len(sizes))
    if verbose:
        print(f"Running {iterations} trials in {len(sizes)} chunks on {jobs} threads")

    partial_counts = Parallel(n_jobs=jobs, prefer="threads")(
        delayed(kernel)(size, chunk_seed)
        for size, chunk_seed in tqdm(
            list(zip(sizes, seeds)), desc="Simulating", disable=not verbose
        )
    )
    counts = partial_counts[0].copy()
    for part in partial_counts[1:]:
        counts += part
    return counts


__all__ = [
    "ITERATIONS",
    "check_iterations",
    "kernel_seed",
    "split_trials",
    "chunk_seeds",
    "run_trials",
]
