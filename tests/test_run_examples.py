import numpy as np
import pytest

from MCMC.configs import ExampleConfig, get_config, list_configs
from MCMC.run_examples import compute_answers, main
from MCMC.trials import ITERATIONS, chunk_seeds, run_trials, split_trials


def test_config_registry():
    assert list_configs() == ["reference", "quick", "long_run"]
    reference = get_config("reference")
    assert reference.iterations == ITERATIONS == 10_000_000
    assert reference.num_states == 9
    assert reference.rates == (10.0, 20.0, 10.0, 1.0, 1.0, 1.0)
    assert get_config("quick").iterations == 100_000
    with pytest.raises(ValueError, match="Unknown config"):
        get_config("missing")


def test_split_trials():
    assert split_trials(10, 4) == [3, 3, 2, 2]
    assert split_trials(3, 8) == [1, 1, 1]
    assert sum(split_trials(10_000_001, 16)) == 10_000_001


def test_chunk_seeds():
    assert chunk_seeds(None, 3) == [-1, -1, -1]
    seeds = chunk_seeds(7, 5)
    assert seeds == chunk_seeds(7, 5)
    assert len(set(seeds)) == 5
    assert all(0 <= s < 2**32 for s in seeds)


def test_run_trials_merges_chunks():
    def kernel(trials, seed):
        return np.array([trials, 2 * trials], dtype=np.int64)

    assert np.array_equal(run_trials(kernel, 1_000, n_jobs=1), [1_000, 2_000])
    assert np.array_equal(run_trials(kernel, 1_001, seed=3, n_jobs=3), [1_001, 2_002])
    assert np.array_equal(run_trials(kernel, 5, n_jobs=-1), [5, 10])


@pytest.mark.parametrize("iterations,seed,n_jobs", [(0, None, 1), (10, -1, 1), (10, 2**32, 1), (10, None, 0)])
def test_run_trials_rejects_bad_arguments(iterations, seed, n_jobs):
    def kernel(trials, kernel_seed):
        return np.zeros(1, dtype=np.int64)

    with pytest.raises(ValueError):
        run_trials(kernel, iterations, seed=seed, n_jobs=n_jobs)


def test_compute_answers_small_run():
    config = ExampleConfig(name="test", iterations=20_000, seed=3)
    answers = compute_answers(config)
    assert list(answers) == ["A1", "A2", "A3", "A4", "A5"]
    assert answers["A1"] == pytest.approx(0.25)
    assert answers["A3"] == pytest.approx(0.25)
    assert answers["A4"] == pytest.approx(1.0 / 3.0)
    assert 0.0 <= answers["A2"] <= 1.0
    assert 0.0 <= answers["A5"] <= 1.0


def test_main_prints_answers(capsys):
    answers = main(["--config", "quick", "--iterations", "5000", "--seed", "11", "--jobs", "2"])
    out = capsys.readouterr().out
    assert "MARKOV CHAIN ESTIMATES: quick" in out
    assert "Trials per estimate: 5000" in out
    for key in ("A1", "A2", "A3", "A4", "A5"):
        assert key in out
    assert "Total execution time was" in out
    assert answers["A4"] == pytest.approx(1.0 / 3.0)
