from __future__ import annotations
from typing import Any, Optional, Protocol

import numpy as np

from datasplit.components.splitters.types import SplitResult


class Splitter(Protocol):
    def split(
        self,
        X: np.ndarray,
        y: Optional[Any] = None,
    ) -> SplitResult:
        """Shuffle and split (X, y) once.

        Implementations must return :class:`datasplit.components.splitters.types.SplitResult`.
        """
        ...
