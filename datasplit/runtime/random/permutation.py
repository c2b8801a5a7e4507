from __future__ import annotations

from typing import Union

import numpy as np

from datasplit.core.errors import ConfigurationError
from datasplit.runtime.random.rng import make_generator

__all__ = ["generate_permutation"]


def generate_permutation(
    n: int,
    rng: Union[None, int, np.random.Generator] = None,
) -> np.ndarray:
    """
    Return a uniformly random permutation of ``range(n)``.

    Parameters
    ----------
    n : int
        Number of points. ``n == 0`` yields an empty permutation.
    rng : None | int | numpy.random.Generator, optional
        Random generator or seed.
        - If Generator: it will be used directly (and advanced).
        - If int: a new Generator is created with that seed (0 means unset).
        - If None: a fresh, non-reproducible Generator is created.

    Returns
    -------
    np.ndarray of shape (n,), dtype int64
        Every index in ``0..n-1`` appears exactly once.

    Raises
    ------
    ConfigurationError
        If ``n`` is negative.
    """
    n = int(n)
    if n < 0:
        raise ConfigurationError(f"Permutation size must be non-negative; got {n}.")

    gen = rng if isinstance(rng, np.random.Generator) else make_generator(rng)

    return np.asarray(gen.permutation(n), dtype=np.int64)
