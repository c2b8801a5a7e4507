from __future__ import annotations

"""Splitter return contract.

A split always comes back as one named payload rather than a 2- or 4-tuple,
so callers never have to guess which position holds the labels.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class SplitResult:
    """A single shuffled train/test split.

    Notes
    -----
    - All arrays are newly allocated; the inputs are never modified.
    - ``train_labels`` / ``test_labels`` are None when no labels were given.
    - ``train_indices`` / ``test_indices`` are row indices into the *original*
      X, in output order: ``train[j]`` is ``X[train_indices[j]]``.
    - ``seed`` is the resolved seed when the split drew its own permutation.
    """

    train: np.ndarray
    test: np.ndarray
    train_labels: Optional[np.ndarray]
    test_labels: Optional[np.ndarray]
    train_indices: np.ndarray
    test_indices: np.ndarray
    seed: Optional[int] = None

    @property
    def n_train(self) -> int:
        return int(self.train.shape[0])

    @property
    def n_test(self) -> int:
        return int(self.test.shape[0])

    @property
    def has_labels(self) -> bool:
        return self.train_labels is not None
