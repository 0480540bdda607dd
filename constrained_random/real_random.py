"""Range-constrained IEEE-754 binary64 generation built from bit fields."""

import logging
import struct
from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidRange
from .prng import RandomSource
from .wide_int import WideRandomInt

logger = logging.getLogger(__name__)

EXPONENT_BIAS = 1023
EXPONENT_MAX = 0x7FF
MANTISSA_BITS = 52
MANTISSA_MAX = (1 << MANTISSA_BITS) - 1
MIN_UNBIASED_EXPONENT = -EXPONENT_BIAS
MAX_UNBIASED_EXPONENT = EXPONENT_MAX - EXPONENT_BIAS


def float_to_bits(value: float) -> int:
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def bits_to_float(bits: int) -> float:
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


@dataclass(frozen=True)
class FloatFields:
    """Sign, biased exponent and mantissa of a binary64 value."""

    sign: int
    exponent: int
    mantissa: int

    @classmethod
    def from_float(cls, value: float) -> "FloatFields":
        bits = float_to_bits(value)
        return cls(
            sign=bits >> 63,
            exponent=(bits >> MANTISSA_BITS) & EXPONENT_MAX,
            mantissa=bits & MANTISSA_MAX,
        )

    def to_float(self) -> float:
        return bits_to_float(
            (self.sign << 63) | (self.exponent << MANTISSA_BITS) | self.mantissa
        )


_ZERO_BOUND = (0, 0)


class ConstrainedRealRandom:
    """Draws binary64 values inside ``[min, max]``.

    Sign, exponent and mantissa are chosen independently: the sign from the
    signs of the bounds, the exponent uniformly between the boundary
    exponents for that sign, and the mantissa from a 52-bit wide integer that
    is bounded only when the exponent lands on a boundary. Values are
    therefore spread evenly across binades, not across the real line.
    """

    def __init__(self, rng: RandomSource, legacy_bounds: bool = False):
        self.rng = rng
        self.legacy_bounds = legacy_bounds
        self.mantissa_source = WideRandomInt(MANTISSA_BITS, rng, legacy_bounds)

    def get_random(
        self,
        min: float,
        max: float,
        min_exponent: int = MIN_UNBIASED_EXPONENT,
    ) -> float:
        if not min <= max:
            raise InvalidRange(f"real range [{min!r}, {max!r}] is empty")
        if not MIN_UNBIASED_EXPONENT <= min_exponent <= MAX_UNBIASED_EXPONENT:
            raise InvalidRange(f"exponent floor {min_exponent} is not representable")

        low = FloatFields.from_float(min)
        high = FloatFields.from_float(max)
        floor = min_exponent + EXPONENT_BIAS
        feasible = {}
        for sign in self._allowed_signs(low, high):
            (min_exp, min_mant), (max_exp, max_mant) = self._magnitude_bounds(sign, low, high)
            if min_exp < floor:
                min_exp, min_mant = floor, 0
            if min_exp <= max_exp:
                feasible[sign] = (min_exp, min_mant, max_exp, max_mant)
        if not feasible:
            raise InvalidRange(
                f"exponent floor {min_exponent} excludes every value in [{min!r}, {max!r}]"
            )

        if len(feasible) == 2:
            sign = self.rng.draw_u32_range(0, 1)
        else:
            (sign,) = feasible
        min_exp, min_mant, max_exp, max_mant = feasible[sign]

        exponent = self.rng.draw_u32_range(min_exp, max_exp)
        mantissa = self._draw_mantissa(exponent, min_exp, min_mant, max_exp, max_mant)
        logger.debug(
            "sign=%d exponent=%d in [%d, %d] mantissa=%#x",
            sign,
            exponent,
            min_exp,
            max_exp,
            mantissa,
        )
        return FloatFields(sign, exponent, mantissa).to_float()

    def generate(
        self,
        count: int,
        min: float,
        max: float,
        min_exponent: int = MIN_UNBIASED_EXPONENT,
    ) -> List[float]:
        return [self.get_random(min, max, min_exponent) for _ in range(count)]

    @staticmethod
    def _allowed_signs(low: FloatFields, high: FloatFields) -> Tuple[int, ...]:
        if high.sign:
            return (1,)
        if not low.sign:
            return (0,)
        return (0, 1)

    @staticmethod
    def _magnitude_bounds(
        sign: int, low: FloatFields, high: FloatFields
    ) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        # Negative results grow in magnitude towards ``min``.
        if sign == 0:
            actual_min = _ZERO_BOUND if low.sign else (low.exponent, low.mantissa)
            return actual_min, (high.exponent, high.mantissa)
        actual_min = (high.exponent, high.mantissa) if high.sign else _ZERO_BOUND
        return actual_min, (low.exponent, low.mantissa)

    def _draw_mantissa(
        self, exponent: int, min_exp: int, min_mant: int, max_exp: int, max_mant: int
    ) -> int:
        source = self.mantissa_source
        if self.legacy_bounds:
            if exponent == max_exp:
                return source.get_random(max_mant)
            if exponent == min_exp:
                # min is ignored by the legacy wide generator
                return source.get_random(MANTISSA_MAX, min_mant)
            return source.get_random(MANTISSA_MAX)

        if exponent == max_exp and exponent == min_exp:
            return source.get_random(max_mant, min_mant)
        if exponent == max_exp:
            return source.get_random(max_mant)
        if exponent == min_exp:
            return source.get_random(MANTISSA_MAX, min_mant)
        return source.get_random(MANTISSA_MAX)
