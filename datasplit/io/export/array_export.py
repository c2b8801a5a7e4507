from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable, Sequence, Union

import numpy as np
from scipy.io import savemat

PathLike = Union[str, Path]

_DELIMITERS = {".csv": ",", ".tsv": "\t", ".txt": " "}


def _to_rows(arr: np.ndarray, *, labels_as_row: bool) -> Iterable[Sequence[Any]]:
    """Rows for csv.writer; a 1D label vector becomes one column, or one row."""
    if arr.ndim == 1:
        arr = arr.reshape(1, -1) if labels_as_row else arr.reshape(-1, 1)
    return (arr[i, :].tolist() for i in range(arr.shape[0]))


def save_array(
    data: Any,
    dest: PathLike,
    *,
    points_as_columns: bool = False,
    key: str = "X",
) -> Path:
    """
    Write a data matrix or label vector to ``dest``; the format follows the extension.

    Supported: .npy, .npz (stored under ``key``), .mat (variable ``key``),
    .csv / .tsv / .txt (no header; integers written without decimals).
    Parent directories are created. Returns the written path.
    """
    arr = np.asarray(data)
    path = Path(dest)
    suf = path.suffix.lower()

    if suf not in {".npy", ".npz", ".mat"} and suf not in _DELIMITERS:
        raise ValueError(
            f"Unsupported output extension '{path.suffix}' for path: {path}. "
            "Supported: .npy, .npz, .mat, .csv/.tsv/.txt"
        )

    if points_as_columns and arr.ndim == 2:
        arr = arr.T

    path.parent.mkdir(parents=True, exist_ok=True)

    if suf == ".npy":
        np.save(path.as_posix(), arr)
    elif suf == ".npz":
        np.savez(path.as_posix(), **{key: arr})
    elif suf == ".mat":
        savemat(path.as_posix(), {key: arr})
    else:
        rows = _to_rows(arr, labels_as_row=points_as_columns)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter=_DELIMITERS[suf])
            for row in rows:
                writer.writerow(row)

    return path
