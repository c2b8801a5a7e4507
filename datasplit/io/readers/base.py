from __future__ import annotations

"""Reader base contracts and shared helpers."""

from pathlib import Path
from typing import Protocol, Union

import numpy as np

from datasplit.core.shapes import coerce_labels


class Reader(Protocol):
    """Protocol for parsing adapters: one file in, one numeric array out."""

    def read(self, path: Union[str, Path], **kwargs) -> np.ndarray: ...


def coerce_numeric_matrix(arr: np.ndarray, *, context: str) -> np.ndarray:
    """Ensure a numeric, contiguous float array.

    - Coerces object dtype to float where possible
    - Rejects NaNs and non-numeric data
    - Empty arrays are allowed (a dataset may have zero points)
    """

    arr = np.asarray(arr)
    if arr.dtype == object:
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{context}: could not convert to float; found non-numeric values.") from e

    if not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"{context}: expected numeric data; got dtype={arr.dtype}")

    arr = np.asarray(arr, dtype=float)
    if np.isnan(arr).any():
        raise ValueError(f"{context}: contains NaN after parsing; check missing/invalid values.")

    return np.ascontiguousarray(arr)


def coerce_label_vector(arr: np.ndarray, *, context: str) -> np.ndarray:
    """Labels are class ids: a flat vector of non-negative integers."""

    y = coerce_numeric_matrix(coerce_labels(arr), context=context)
    if y.size and ((y < 0).any() or (y != np.floor(y)).any()):
        raise ValueError(f"{context}: labels must be non-negative integers.")
    return y.astype(np.int64)
