"""Public package surface for range-constrained random value generation."""

from .approx import approx_equals
from .errors import ConstrainedRandomError, InvalidRange, UnsupportedWidth
from .prng import PCG32, RandomSource
from .real_random import ConstrainedRealRandom, FloatFields
from .runner import GenerationConfig, run_generation
from .wide_int import WideRandomInt

__all__ = [
    "ConstrainedRandomError",
    "ConstrainedRealRandom",
    "FloatFields",
    "GenerationConfig",
    "InvalidRange",
    "PCG32",
    "RandomSource",
    "UnsupportedWidth",
    "WideRandomInt",
    "approx_equals",
    "run_generation",
]
