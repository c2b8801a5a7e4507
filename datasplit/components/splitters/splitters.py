from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from datasplit.contracts.split_configs import SplitModel
from datasplit.components.splitters.holdout import split_dataset
from datasplit.components.splitters.types import SplitResult
from ..interfaces import Splitter


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitModel

    def split(self, X: np.ndarray, y: Optional[Any] = None) -> SplitResult:
        return split_dataset(
            X,
            y,
            test_ratio=self.cfg.effective_test_ratio,
            seed=self.cfg.seed,
        )
