from __future__ import annotations

"""NumPy .npy / .npz reader."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .base import coerce_numeric_matrix

DEFAULT_NPZ_KEY = "X"


def load_numpy_array(file_path: Union[str, Path], *, key: Optional[str] = None) -> np.ndarray:
    """Load a numeric array from a .npy file, or the ``key`` entry of a .npz bundle.

    Pickled object arrays are refused in both formats.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"NumPy file not found: {path}")

    if path.suffix.lower() != ".npz":
        return coerce_numeric_matrix(
            np.load(path.as_posix(), allow_pickle=False),
            context=f"NPY '{path.name}'",
        )

    name = key or DEFAULT_NPZ_KEY
    with np.load(path.as_posix(), allow_pickle=False) as bundle:
        if name not in bundle.files:
            raise KeyError(f"Key '{name}' not found in {path.name}. Available: {list(bundle.files)}")
        return coerce_numeric_matrix(bundle[name], context=f"NPZ '{path.name}' [{name}]")


@dataclass
class NumpyReader:
    # only used for .npz bundles
    key: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> np.ndarray:
        return load_numpy_array(path, key=kwargs.get("key", self.key))
