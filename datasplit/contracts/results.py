from __future__ import annotations

"""Result contract for the split use-case.

JSON-friendly field types only; callers serialize via ``model_dump()``.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class SplitRunResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    n_points: int
    n_features: int
    n_train: int
    n_test: int
    test_ratio: float
    seed: int
    has_labels: bool

    # output name ("training", "test", ...) -> path written
    written: Dict[str, str] = Field(default_factory=dict)
    notes: List[str] = Field(default_factory=list)
