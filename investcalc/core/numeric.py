"""Float helpers that return IEEE results (inf/nan) instead of raising.

Python's float ``**`` and ``/`` raise on overflow and on a zero divisor;
the projection math must keep producing numbers for any finite input.
"""

from __future__ import annotations

import math


def float_pow(base: float, exponent: float) -> float:
    try:
        result = float(base) ** exponent
    except OverflowError:
        odd_exponent = float(exponent).is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf
    except ZeroDivisionError:
        # 0.0 raised to a negative power
        return math.inf
    if isinstance(result, complex):
        # negative base with a fractional exponent
        return math.nan
    return result


def float_div(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
