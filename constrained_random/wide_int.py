"""Unsigned integers of arbitrary bit width composed from 32-bit draws."""

import logging
from typing import List, Tuple

from .errors import InvalidRange, UnsupportedWidth
from .prng import U32_MASK, RandomSource

logger = logging.getLogger(__name__)

CHUNK_BITS = 32


def chunk_layout(width: int) -> List[Tuple[int, int]]:
    """Return ``(shift, bits)`` pairs covering ``width`` bits, most significant first.

    The top chunk holds the ``width % 32`` leftover bits and is omitted when
    the width is a multiple of 32.
    """

    layout = []
    full_chunks, remainder = divmod(width, CHUNK_BITS)
    if remainder:
        layout.append((full_chunks * CHUNK_BITS, remainder))
    for index in range(full_chunks - 1, -1, -1):
        layout.append((index * CHUNK_BITS, CHUNK_BITS))
    return layout


class WideRandomInt:
    """Random unsigned integer generator for a fixed bit width.

    Native range draws only cover 32 bits, so a value is built chunk by chunk
    from the most significant end. By default each chunk stays bounded by the
    matching slice of ``min``/``max`` for as long as every chunk drawn above
    it sat exactly on that bound.

    With ``legacy_bounds=True`` the historical behaviour is reproduced: ``min``
    is ignored and every chunk below the first nonzero slice of ``max`` is
    drawn unconstrained, so results may exceed ``max``.
    """

    def __init__(self, width: int, rng: RandomSource, legacy_bounds: bool = False):
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise UnsupportedWidth(f"bit width must be a positive integer, got {width!r}")
        self.width = width
        self.rng = rng
        self.legacy_bounds = legacy_bounds
        self.limit = (1 << width) - 1
        self._layout = chunk_layout(width)
        logger.debug(
            "WideRandomInt width=%d chunks=%s legacy=%s",
            width,
            [bits for _, bits in self._layout],
            legacy_bounds,
        )

    def get_random(self, max: int, min: int = 0) -> int:
        """Draw a value no greater than ``max``.

        ``min`` is honoured unless the generator runs with legacy bounds.
        """

        if not 0 <= min <= max <= self.limit:
            raise InvalidRange(
                f"range [{min}, {max}] is empty or exceeds {self.width} bits"
            )
        if self.legacy_bounds:
            return self._legacy_draw(max)
        return self._bounded_draw(min, max)

    def generate(self, count: int, max: int, min: int = 0) -> List[int]:
        return [self.get_random(max, min) for _ in range(count)]

    def _draw_chunk(self, lo: int, hi: int) -> int:
        if lo == 0 and hi == U32_MASK:
            return self.rng.draw_u32()
        return self.rng.draw_u32_range(lo, hi)

    def _bounded_draw(self, min: int, max: int) -> int:
        result = 0
        tight_lo = True
        tight_hi = True
        for shift, bits in self._layout:
            mask = (1 << bits) - 1
            min_slice = (min >> shift) & mask
            max_slice = (max >> shift) & mask
            lo = min_slice if tight_lo else 0
            hi = max_slice if tight_hi else mask
            value = self._draw_chunk(lo, hi)
            tight_lo = tight_lo and value == min_slice
            tight_hi = tight_hi and value == max_slice
            result = (result << bits) | value
        return result

    def _legacy_draw(self, max: int) -> int:
        result = 0
        unconstrained = False
        for shift, bits in self._layout:
            mask = (1 << bits) - 1
            max_slice = (max >> shift) & mask
            if unconstrained:
                value = self._draw_chunk(0, mask)
            else:
                value = self._draw_chunk(0, max_slice)
                if max_slice:
                    unconstrained = True
            result = (result << bits) | value
        return result
