"""
units.py

Unit conversions and the fixed-precision rounding applied to every derived
quantity.
"""

import math

KNOTS_TO_MPS = 0.514444
KMH_TO_MPS = 1.0 / 3.6

EARTH_RADIUS_M = 6371000.0


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    Unlike :func:`round`, ties do not go to the even neighbour, so
    ``round_tenth(0.25) == 0.3``.
    """
    return math.copysign(math.floor(abs(value) * 10.0 + 0.5), value) / 10.0
