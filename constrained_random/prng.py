# Minimal PCG32 PRNG for deterministic stimulus (no external deps)
# Source: public domain style reference implementation, simplified
from dataclasses import dataclass
from typing import Protocol

from .errors import InvalidRange

U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1


class RandomSource(Protocol):
    """32-bit random capability consumed by the generators."""

    def draw_u32(self) -> int:
        ...

    def draw_u32_range(self, lo: int, hi: int) -> int:
        ...


@dataclass
class PCG32:
    state: int
    inc: int = 1442695040888963407  # default stream

    def seed(self, state: int) -> None:
        self.state = state

    def draw_u32(self) -> int:
        oldstate = self.state & _U64_MASK
        self.state = (oldstate * 6364136223846793005 + (self.inc | 1)) & _U64_MASK
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & U32_MASK
        rot = (oldstate >> 59) & 31
        return (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & U32_MASK)

    def draw_u32_range(self, lo: int, hi: int) -> int:
        # inclusive lo..hi
        if lo < 0 or hi > U32_MASK or lo > hi:
            raise InvalidRange(f"32-bit range [{lo}, {hi}] is empty or out of bounds")
        span = hi - lo + 1
        if span > U32_MASK:
            return self.draw_u32()
        return lo + ((self.draw_u32() * span) >> 32)
