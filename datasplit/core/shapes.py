from __future__ import annotations

"""Shape/orientation utilities for split inputs.

Conventions
-----------
- X is 2D: (n_points, n_features). Shuffling and splitting act on rows.
- y is 1D: (n_points,)

Unlike model-training inputs, an empty dataset (zero points) is legal here.
"""

from typing import Any, Optional, Tuple

import numpy as np

from datasplit.core.errors import ShapeMismatchError


def coerce_dataset(X: Any, *, points_as_columns: bool = False) -> np.ndarray:
    """Return X as a 2D array with one point per row.

    - 1D input is treated as n points with a single feature.
    - ``points_as_columns=True`` accepts (n_features, n_points) input and transposes.
    """

    X = np.asarray(X)
    if X.ndim == 0:
        raise ShapeMismatchError("X must be 1D or 2D; got a scalar.")
    if X.ndim == 1:
        X = X[:, None]
    elif X.ndim == 2 and points_as_columns:
        X = X.T

    if X.ndim != 2:
        raise ShapeMismatchError(f"X must be 2D (n_points, n_features); got {X.shape}")

    return X


def coerce_labels(y: Any) -> np.ndarray:
    """Flatten a label vector given as (n,), (1, n) or (n, 1)."""

    y = np.asarray(y)
    if y.ndim == 2 and 1 in y.shape:
        y = y.ravel()
    if y.ndim != 1:
        raise ShapeMismatchError(f"y must be 1D (n_points,); got {y.shape}")
    return y


def ensure_labels_match(X: np.ndarray, y: Optional[Any]) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Strict alignment check: no transposition, no truncation."""

    if y is None:
        return X, None

    y = coerce_labels(y)
    if X.shape[0] != y.shape[0]:
        raise ShapeMismatchError(
            f"Labels must have one entry per point: X has {X.shape[0]} points "
            f"but y has {y.shape[0]} labels."
        )
    return X, y

