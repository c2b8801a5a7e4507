"""Parsing adapters (readers).

Readers are responsible for *format parsing* only (NPY/NPZ/CSV/TSV/TXT/MAT)
and return plain numeric arrays. Orientation/shape checks live in
:mod:`datasplit.core.shapes`.

"""

from .base import Reader, coerce_label_vector, coerce_numeric_matrix

from .mat_reader import MatReader, load_mat_variable
from .numpy_reader import NumpyReader, load_numpy_array
from .tabular_reader import TabularReader, load_delimited_table
from .auto_reader import read_array_auto, load_from_data_model

__all__ = [
    "Reader",
    "coerce_label_vector",
    "coerce_numeric_matrix",
    "MatReader",
    "load_mat_variable",
    "NumpyReader",
    "load_numpy_array",
    "TabularReader",
    "load_delimited_table",
    "read_array_auto",
    "load_from_data_model",
]
