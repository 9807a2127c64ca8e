"""
nmea/coordinates.py

Conversion between NMEA ``DDDMM.MMMM`` coordinates and signed decimal degrees.

The number of degree digits is not fixed: receivers emit ``DDMM.MMMM`` for
latitude, ``DDDMM.MMMM`` for longitude, and some firmware drops or adds a
leading digit.  The width is inferred from the position of the decimal point.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

MIN_COORDINATE_LENGTH = 7

# Decimal point index -> number of leading degree digits.
_DEGREE_DIGITS_BY_DOT_INDEX = {
    2: 1,
    3: 2,
    4: 2,
    5: 3,
    6: 4,
}

_NEGATIVE_HEMISPHERES = ("S", "W")


def decode_coordinate(raw: str, hemisphere: Optional[str] = None) -> Optional[float]:
    """Convert an NMEA coordinate to decimal degrees.

    Args:
        raw: Coordinate text such as ``"4807.038"`` or ``"01131.000"``.
        hemisphere: ``N``/``S``/``E``/``W``.  ``S`` and ``W`` negate the
            result; anything else (including ``None``) leaves it positive.

    Returns:
        Decimal degrees, or ``None`` when *raw* is shorter than seven
        characters, has no decimal point at a recognised position, or is
        not numeric.
    """
    if len(raw) < MIN_COORDINATE_LENGTH:
        return None
    degree_digits = _DEGREE_DIGITS_BY_DOT_INDEX.get(raw.find("."))
    if degree_digits is None:
        return None

    try:
        degrees = float(raw[:degree_digits])
        minutes = float(raw[degree_digits:])
    except ValueError:
        return None
    if not (math.isfinite(degrees) and math.isfinite(minutes)):
        return None

    value = degrees + minutes / 60.0
    if hemisphere and hemisphere[0] in _NEGATIVE_HEMISPHERES:
        value = -value
    return value


def encode_coordinate(value: float, is_latitude: bool) -> Tuple[str, str]:
    """Format decimal degrees as an NMEA ``(coordinate, hemisphere)`` pair.

    Latitude is written as ``DDMM.MMMM`` and longitude as ``DDDMM.MMMM``.
    """
    if is_latitude:
        hemisphere = "S" if value < 0 else "N"
        degree_width = 2
    else:
        hemisphere = "W" if value < 0 else "E"
        degree_width = 3

    magnitude = abs(value)
    degrees = int(magnitude)
    minutes = round((magnitude - degrees) * 60.0, 4)
    if minutes >= 60.0:
        degrees += 1
        minutes = 0.0
    return f"{degrees:0{degree_width}d}{minutes:07.4f}", hemisphere
