"""Float power that saturates instead of raising."""

from __future__ import annotations

import math


def safe_pow(base: float, exponent: float) -> float:
    """
    base ** exponent with IEEE results in place of Python's exceptions:

      - a result beyond the float range is +/-inf rather than OverflowError
      - a negative base with a fractional exponent is nan rather than complex
      - zero to a negative power is inf rather than ZeroDivisionError
    """
    if base < 0 and not float(exponent).is_integer():
        return math.nan
    try:
        return base ** exponent
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        if base < 0 and float(exponent) % 2 == 1:
            return -math.inf
        return math.inf
