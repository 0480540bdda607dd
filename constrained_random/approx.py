"""Epsilon comparison for generated reals."""

from typing import Tuple


def approx_equals(a: float, b: float, epsilon: float = 1e-5) -> Tuple[bool, float]:
    """Return ``(abs(a - b) < epsilon, abs(a - b))``.

    The comparison is strict, so values exactly ``epsilon`` apart are not
    equal. NaN and infinities are not special-cased: any NaN operand, or two
    infinities of the same sign (``inf - inf`` is NaN), yields ``(False, nan)``.
    """

    delta = abs(a - b)
    return delta < epsilon, delta
