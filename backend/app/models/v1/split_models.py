from typing import List, Optional
from pydantic import BaseModel, Field

class SplitRequest(BaseModel):
    # one point per row
    X: List[List[float]]
    y: Optional[List[int]] = None
    test_ratio: Optional[float] = None
    seed: Optional[int] = None

class SplitResponse(BaseModel):
    train: List[List[float]]
    test: List[List[float]]
    train_labels: Optional[List[int]] = None
    test_labels: Optional[List[int]] = None
    train_indices: List[int]
    test_indices: List[int]

    n_train: int
    n_test: int
    test_ratio: float
    seed: int
    notes: List[str] = Field(default_factory=list)
