from __future__ import annotations

from datasplit.contracts.split_configs import SplitModel
from datasplit.components.interfaces import Splitter
from datasplit.components.splitters.splitters import HoldOutSplitter


def make_splitter(cfg: SplitModel) -> Splitter:
    mode = str(getattr(cfg, "mode", "holdout")).lower()
    if mode == "holdout":
        return HoldOutSplitter(cfg=cfg)
    raise ValueError(f"Unknown split mode: {mode!r}")
