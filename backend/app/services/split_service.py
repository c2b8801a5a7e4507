# backend/app/services/split_service.py
from typing import Any, Dict, List

import numpy as np

from datasplit.api import split_dataset, validate_test_ratio
from datasplit.contracts.split_configs import DEFAULT_TEST_RATIO
from datasplit.core.errors import ShapeMismatchError

from ..models.v1.split_models import SplitRequest


def _rows(arr: np.ndarray) -> List[List[float]]:
    return np.asarray(arr, dtype=float).tolist()


def _as_matrix(rows: List[List[float]]) -> np.ndarray:
    n_features = len(rows[0]) if rows else 0
    for i, row in enumerate(rows):
        if len(row) != n_features:
            raise ShapeMismatchError(
                f"X must be a rectangular matrix: row 0 has {n_features} features, "
                f"row {i} has {len(row)}."
            )
    return np.asarray(rows, dtype=float).reshape(len(rows), n_features)


def split_inline(req: SplitRequest) -> Dict[str, Any]:
    """Split an inline dataset; every request draws from its own generator."""
    notes: List[str] = []
    ratio = req.test_ratio
    if ratio is None:
        ratio = DEFAULT_TEST_RATIO
        notes.append(f"test_ratio not given; using default {DEFAULT_TEST_RATIO}.")
    ratio = validate_test_ratio(ratio)

    X = _as_matrix(req.X)

    result = split_dataset(X, req.y, test_ratio=ratio, seed=req.seed)

    return {
        "train": _rows(result.train),
        "test": _rows(result.test),
        "train_labels": None if result.train_labels is None else result.train_labels.tolist(),
        "test_labels": None if result.test_labels is None else result.test_labels.tolist(),
        "train_indices": result.train_indices.tolist(),
        "test_indices": result.test_indices.tolist(),
        "n_train": result.n_train,
        "n_test": result.n_test,
        "test_ratio": ratio,
        "seed": int(result.seed),
        "notes": notes,
    }
