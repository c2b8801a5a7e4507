import numpy as np
import pytest


@pytest.fixture
def points():
    """Five points A..E; each row holds its own index twice so identity is recoverable."""
    return np.array([[i, 10 * i] for i in range(5)], dtype=float)


@pytest.fixture
def letter_labels():
    return np.array(["a", "b", "c", "d", "e"])


@pytest.fixture
def Xy():
    rng = np.random.default_rng(7)
    n = 40
    X = np.column_stack([np.arange(n, dtype=float), rng.normal(size=n)])
    y = np.arange(n) % 3
    return X, y
