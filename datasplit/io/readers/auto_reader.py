from __future__ import annotations

"""Extension-dispatching reader + DataModel convenience loader."""

from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

from datasplit.contracts.run_config import DataModel
from datasplit.core.shapes import coerce_dataset, ensure_labels_match

from .base import Reader, coerce_label_vector
from .mat_reader import MatReader
from .numpy_reader import NumpyReader
from .tabular_reader import TabularReader

TABULAR_SUFFIXES = (".csv", ".tsv", ".txt")


def read_array_auto(
    path: Union[str, Path],
    *,
    # NPZ / MAT variable name
    key: Optional[str] = None,
    # tabular
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    encoding: Optional[str] = None,
) -> np.ndarray:
    """Read a numeric array from ``path`` based on file extension."""

    p = Path(path)
    suf = p.suffix.lower()

    reader: Reader
    if suf in {".npy", ".npz"}:
        reader = NumpyReader(key=key)
    elif suf in TABULAR_SUFFIXES:
        reader = TabularReader(delimiter=delimiter, has_header=has_header, encoding=encoding)
    elif suf == ".mat":
        reader = MatReader(key=key)
    else:
        raise ValueError(
            f"Unsupported file extension '{p.suffix}' for path: {p}. "
            "Supported: .npy, .npz, .csv/.tsv/.txt, .mat"
        )
    return reader.read(p)


def _read_labels(path: str, cfg: DataModel) -> np.ndarray:
    if path.lower().endswith(".npz") and not cfg.y_key:
        raise ValueError("NPZ labels require y_key")

    # y usually has no header; do not force has_header=True onto y.
    has_header = None if cfg.has_header is True else cfg.has_header
    arr = read_array_auto(
        path,
        key=cfg.y_key,
        delimiter=cfg.delimiter,
        has_header=has_header,
        encoding=cfg.encoding,
    )
    return coerce_label_vector(arr, context=f"labels '{Path(path).name}'")


def load_from_data_model(cfg: DataModel) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Load X and optional y using a :class:`~datasplit.contracts.run_config.DataModel`.

    X is only transposed when ``cfg.points_as_columns`` says so; a label count
    that matches neither orientation's rows is a ShapeMismatchError.

    Returns
    -------
    X : np.ndarray (2D, one point per row)
    y : np.ndarray | None (1D, non-negative integers)
    """

    x_path = cfg.npz_path or cfg.x_path
    if not x_path:
        raise ValueError("DataModel requires x_path (or npz_path)")

    X = read_array_auto(
        x_path,
        key=cfg.x_key,
        delimiter=cfg.delimiter,
        has_header=cfg.has_header,
        encoding=cfg.encoding,
    )
    X = coerce_dataset(X, points_as_columns=cfg.points_as_columns)

    if not cfg.has_labels:
        return X, None

    # y from its own file, or from the same bundle when only y_key is given
    y = _read_labels(cfg.y_path or x_path, cfg)
    return ensure_labels_match(X, y)
