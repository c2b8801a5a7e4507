from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Optional

import numpy as np

from datasplit.core.errors import ConfigurationError, ShapeMismatchError
from datasplit.core.shapes import coerce_dataset, ensure_labels_match
from datasplit.runtime.random.permutation import generate_permutation
from datasplit.runtime.random.rng import RngManager
from datasplit.components.splitters.types import SplitResult

# Added before flooring ratio * n: 0.29 * 100 == 28.999999999999996 counts as 29.
_RATIO_TOL = 1e-9


def validate_test_ratio(test_ratio: Any) -> float:
    """Return ``test_ratio`` as a float in [0, 1] or raise ConfigurationError."""
    try:
        ratio = float(test_ratio)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"test_ratio must be a number; got {test_ratio!r}.") from e

    if not math.isfinite(ratio) or ratio < 0.0 or ratio > 1.0:
        raise ConfigurationError(
            "Invalid parameter for test_ratio; test_ratio must be between 0.0 and 1.0 "
            f"(got {test_ratio!r})."
        )
    return ratio


def compute_test_count(n_points: int, test_ratio: float) -> int:
    """Number of points that go to the test set.

    The count is ``floor(test_ratio * n_points + 1e-9)``: fractional points
    always stay in the training set. For n_points=5, ratio=0.5 -> 2;
    ratio=0.33 -> 1.

    This is not plain truncation of the float product. A product that lands
    just below an integer through representation error is rounded up to it,
    so n_points=100, ratio=0.29 gives 29 where ``int(0.29 * 100)`` gives 28.
    """
    ratio = validate_test_ratio(test_ratio)
    n_points = int(n_points)
    return min(n_points, int(math.floor(ratio * n_points + _RATIO_TOL)))


def _check_permutation(permutation: Any, n_points: int) -> np.ndarray:
    perm = np.asarray(permutation)
    if perm.ndim != 1 or perm.shape[0] != n_points:
        raise ShapeMismatchError(
            f"Permutation must have one entry per point: expected ({n_points},), got {perm.shape}."
        )
    if n_points == 0:
        return np.empty(0, dtype=np.int64)
    if not np.issubdtype(perm.dtype, np.integer):
        raise ConfigurationError(f"Permutation must contain integers; got dtype={perm.dtype}.")
    if perm.min() < 0 or perm.max() >= n_points:
        raise ConfigurationError(f"Permutation entries must lie in [0, {n_points - 1}].")

    seen = np.zeros(n_points, dtype=bool)
    seen[perm] = True
    if not seen.all():
        raise ConfigurationError("Permutation repeats some indices and omits others.")

    return perm.astype(np.int64, copy=False)


def partition(
    X: Any,
    test_ratio: float,
    permutation: Any,
    y: Optional[Any] = None,
) -> SplitResult:
    """
    Reorder the points of X (and y) by ``permutation`` and cut them in two.

    ``shuffled[k] = X[permutation[k]]``; the first ``n - test_count`` shuffled
    points form the training set and the rest form the test set. Labels go
    through the identical mapping and the identical cut.

    All preconditions are checked before anything is allocated.

    Raises
    ------
    ConfigurationError
        test_ratio outside [0, 1], or permutation is not a bijection.
    ShapeMismatchError
        len(y) or len(permutation) differs from the number of points.
    """
    ratio = validate_test_ratio(test_ratio)
    X = coerce_dataset(X)
    X, y = ensure_labels_match(X, y)

    n_points = X.shape[0]
    perm = _check_permutation(permutation, n_points)

    n_train = n_points - compute_test_count(n_points, ratio)
    idx_tr = perm[:n_train].copy()
    idx_te = perm[n_train:].copy()

    # fancy indexing always copies, so outputs never alias X / y
    return SplitResult(
        train=X[idx_tr],
        test=X[idx_te],
        train_labels=None if y is None else y[idx_tr],
        test_labels=None if y is None else y[idx_te],
        train_indices=idx_tr,
        test_indices=idx_te,
    )


def split_dataset(
    X: Any,
    y: Optional[Any] = None,
    *,
    test_ratio: float = 0.2,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> SplitResult:
    """
    Shuffle (X, y) and split into training and test sets.

    Parameters
    ----------
    X : array-like of shape (n_points, n_features)
    y : array-like of shape (n_points,), optional
    test_ratio : float in [0, 1]
        Fraction of points that go to the test set (rounded down).
    seed : int, optional
        None or 0 draws a fresh seed; the seed actually used is returned in
        ``SplitResult.seed``. Ignored when ``rng`` is given.
    rng : numpy.random.Generator, optional
        Generator to draw the permutation from (advanced in place).
    """
    ratio = validate_test_ratio(test_ratio)
    X = coerce_dataset(X)
    X, y = ensure_labels_match(X, y)

    used_seed: Optional[int] = None
    if rng is None:
        rngm = RngManager(seed)
        rng = rngm.generator()
        used_seed = rngm.seed

    perm = generate_permutation(X.shape[0], rng)
    return replace(partition(X, ratio, perm, y), seed=used_seed)
