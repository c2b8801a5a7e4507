from .types import SplitResult
from .holdout import compute_test_count, partition, split_dataset, validate_test_ratio
from .splitters import HoldOutSplitter

__all__ = [
    "SplitResult",
    "compute_test_count",
    "partition",
    "split_dataset",
    "validate_test_ratio",
    "HoldOutSplitter",
]
