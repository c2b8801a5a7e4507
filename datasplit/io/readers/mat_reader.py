from __future__ import annotations

"""MATLAB .mat reader."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from scipy.io import loadmat as scipy_loadmat

from .base import coerce_numeric_matrix


def load_mat_variable(file_path: Union[str, Path], *, key: Union[str, None] = None) -> np.ndarray:
    """Load one numeric variable from a MATLAB .mat file (v7 or earlier).

    Without ``key`` the file must hold exactly one variable.
    """

    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"MAT-file not found: {file_path}")

    try:
        mat = scipy_loadmat(file_path.as_posix(), struct_as_record=False)
    except NotImplementedError as e:
        raise RuntimeError(
            "This MAT-file appears to be MATLAB v7.3 (HDF5). Re-save it as v7 or earlier."
        ) from e

    keys = [k for k in mat.keys() if not k.startswith("__")]
    if key is not None:
        if key not in keys:
            raise KeyError(f"Variable '{key}' not found in {file_path.name}. Available: {keys}")
        name = key
    elif len(keys) == 0:
        raise ValueError("No user variables found in MAT-file.")
    elif len(keys) > 1:
        raise ValueError(
            f"Expected exactly one variable, found {len(keys)}: {keys}. "
            "Please save a MAT file with a single variable or pass a key."
        )
    else:
        name = keys[0]

    arr = np.asarray(mat[name])
    if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
        raise TypeError(
            f"Variable '{name}' is not a plain numeric array (dtype={arr.dtype}). "
            "Structs/cells/tables are not supported; save the underlying numeric array."
        )

    return coerce_numeric_matrix(arr, context=f"MAT '{file_path.name}' [{name}]")


@dataclass
class MatReader:
    key: Union[str, None] = None

    def read(self, path: Union[str, Path], **kwargs) -> np.ndarray:
        return load_mat_variable(path, key=kwargs.get("key", self.key))
