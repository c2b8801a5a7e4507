from .rng import UNSET_SEED, RngManager, make_generator, resolve_seed
from .permutation import generate_permutation

__all__ = [
    "UNSET_SEED",
    "RngManager",
    "make_generator",
    "resolve_seed",
    "generate_permutation",
]
