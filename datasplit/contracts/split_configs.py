from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel

DEFAULT_TEST_RATIO = 0.2

class SplitModel(BaseModel):
    mode: Literal["holdout"] = "holdout"
    # None means "not given"; the use-case falls back to DEFAULT_TEST_RATIO and notes it
    test_ratio: Optional[float] = None
    # None or 0 -> fresh seed from OS entropy
    seed: Optional[int] = None

    @property
    def effective_test_ratio(self) -> float:
        return DEFAULT_TEST_RATIO if self.test_ratio is None else float(self.test_ratio)
