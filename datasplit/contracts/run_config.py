from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from .split_configs import SplitModel

class DataModel(BaseModel):
    x_path: Optional[str] = None
    y_path: Optional[str] = None
    npz_path: Optional[str] = None
    x_key: Optional[str] = None
    y_key: Optional[str] = None

    # tabular options
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: Optional[str] = None

    # input stores one point per column (n_features, n_points)
    points_as_columns: bool = False

    @property
    def has_labels(self) -> bool:
        if self.y_path:
            return True
        # labels stored next to X in the same bundle
        src = self.npz_path or self.x_path or ""
        return bool(self.y_key) and src.lower().endswith((".npz", ".mat"))

class OutputModel(BaseModel):
    training: Optional[str] = None
    test: Optional[str] = None
    training_labels: Optional[str] = None
    test_labels: Optional[str] = None

    # write matrices back as (n_features, n_points)
    points_as_columns: bool = False

class RunConfig(BaseModel):
    data: DataModel
    split: SplitModel = Field(default_factory=SplitModel)
    output: OutputModel = Field(default_factory=OutputModel)
