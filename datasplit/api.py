"""Public API.

This module is the **stable public surface** of datasplit:

    from datasplit.api import split_dataset, run_split

The backend, the CLI and scripts may depend on this module.
"""

from __future__ import annotations

from datasplit.components.splitters import (
    HoldOutSplitter,
    SplitResult,
    compute_test_count,
    partition,
    split_dataset,
    validate_test_ratio,
)
from datasplit.core.errors import ConfigurationError, ShapeMismatchError, SplitError
from datasplit.runtime.random import UNSET_SEED, generate_permutation, make_generator, resolve_seed
from datasplit.use_cases.split_run import run_split

__all__ = [
    "split_dataset",
    "partition",
    "compute_test_count",
    "validate_test_ratio",
    "generate_permutation",
    "make_generator",
    "resolve_seed",
    "UNSET_SEED",
    "HoldOutSplitter",
    "SplitResult",
    "run_split",
    "SplitError",
    "ConfigurationError",
    "ShapeMismatchError",
]
