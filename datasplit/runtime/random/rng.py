from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.random import Generator

from datasplit.core.errors import ConfigurationError

# Seed value that requests a fresh, non-reproducible seed.
UNSET_SEED = 0

_SEED_MAX = 0xFFFFFFFF


def resolve_seed(seed: Optional[int]) -> int:
    """
    Turn a user-facing seed into the concrete integer used for this run.

    - None or UNSET_SEED: draw a fresh seed from OS entropy.
    - 1 .. 2**32 - 1: used as-is.
    - Anything else (negative, or wider than 32 bits) is a ConfigurationError,
      so two different explicit seeds never share a stream.

    Passing the returned value back in reproduces the same generator.
    """
    if seed is None or int(seed) == UNSET_SEED:
        fresh = int(np.random.SeedSequence().entropy) & _SEED_MAX
        # 0 would mean "unset" when replayed
        return fresh or 1
    value = int(seed)
    if not 0 < value <= _SEED_MAX:
        raise ConfigurationError(
            f"seed must be between 1 and {_SEED_MAX} (0 for a fresh seed); got {value}."
        )
    return value


def make_generator(seed: Optional[int]) -> Generator:
    """Return an independent Generator; never touches np.random global state."""
    return np.random.default_rng(resolve_seed(seed))


class RngManager:
    """
    Single source of truth for randomness within one invocation.

    The root seed is resolved once and exposed as ``seed`` so callers can
    report it; ``generator()`` always restarts the stream from that seed.
    """
    def __init__(self, seed: Optional[int]):
        self._root = resolve_seed(seed)

    @property
    def seed(self) -> int:
        return self._root

    def generator(self) -> Generator:
        return np.random.default_rng(self._root)
