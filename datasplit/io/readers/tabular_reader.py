from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT).

Tables hold numbers only. An optional first header row is skipped; column
names carry no meaning for a split and are not kept.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from .base import coerce_numeric_matrix

# tried in order; runs of whitespace otherwise
_SEPARATORS = ("\t", ",", ";")


def _sniff_separator(path: Path, encoding: str) -> str:
    with path.open("r", encoding=encoding, errors="replace") as f:
        for line in f:
            if line.strip():
                return next((sep for sep in _SEPARATORS if sep in line), r"\s+")
    raise ValueError(f"{path.name}: file is empty.")


def _is_header(row: pd.Series) -> bool:
    return bool(pd.to_numeric(row, errors="coerce").isna().any())


def load_delimited_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    encoding: Optional[str] = None,
) -> np.ndarray:
    """Load a numeric table from CSV/TSV/TXT.

    - ``delimiter=None`` picks tab, comma or semicolon from the first line,
      falling back to whitespace. ``"\\t"`` may be passed literally.
    - ``has_header=None`` treats the first row as a header when any of its
      cells is not a number.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    enc = encoding or "utf-8"
    sep = _sniff_separator(path, enc) if delimiter is None else delimiter.replace("\\t", "\t")

    # read everything as text so a header row cannot change column dtypes
    df = pd.read_csv(path.as_posix(), sep=sep, header=None, dtype=str, encoding=enc, engine="python")

    if has_header is None:
        has_header = _is_header(df.iloc[0])
    if has_header:
        df = df.iloc[1:]

    values = df.apply(pd.to_numeric, errors="coerce")
    n_bad = int(values.isna().to_numpy().sum())
    if n_bad:
        raise ValueError(
            f"{path.name}: found {n_bad} non-numeric/missing cells after parsing. "
            "Clean the file or export as purely numeric values."
        )

    return coerce_numeric_matrix(values.to_numpy(dtype=float), context=f"Table '{path.name}'")


@dataclass
class TabularReader:
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> np.ndarray:
        return load_delimited_table(
            path,
            delimiter=kwargs.get("delimiter", self.delimiter),
            has_header=kwargs.get("has_header", self.has_header),
            encoding=kwargs.get("encoding", self.encoding),
        )
