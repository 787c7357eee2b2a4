# tests/conftest.py
import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

# Corner vowel targets (F1, F2) in Hz
CORNER_TARGETS = {
    "i": (300.0, 2200.0),
    "ae": (600.0, 1700.0),
    "a": (600.0, 1000.0),
    "u": (300.0, 900.0),
}

SQUARE_F1 = [300.0, 600.0, 600.0, 300.0]
SQUARE_F2 = [2200.0, 1700.0, 1000.0, 900.0]


def vowel_cloud(n_per_vowel=50, seed=123, sd_f1=30.0, sd_f2=60.0, targets=None):
    """Gaussian clusters of (F1, F2) around each corner vowel."""
    rng = np.random.default_rng(seed)
    targets = targets or CORNER_TARGETS
    f1, f2 = [], []
    for t1, t2 in targets.values():
        f1.append(rng.normal(t1, sd_f1, n_per_vowel))
        f2.append(rng.normal(t2, sd_f2, n_per_vowel))
    return np.concatenate(f1), np.concatenate(f2)


@pytest.fixture
def cloud():
    return vowel_cloud()


@pytest.fixture
def square():
    return np.array(SQUARE_F1), np.array(SQUARE_F2)
