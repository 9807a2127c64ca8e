"""
accuracy.py

Horizontal accuracy estimate derived from HDOP and the number of satellites
used in the fix.

The estimate is ``hdop * 4.9`` metres, tightened when many satellites
contribute and loosened when only a few do:

============  ==========
Satellites    Multiplier
============  ==========
>= 8          0.7
5 - 7         0.9
4             1.0
<= 3          1.5
============  ==========
"""

from __future__ import annotations

from typing import Optional

from ublox_nmea.units import round_tenth

UERE_METRES = 4.9


def _satellite_multiplier(satellites_used: int) -> float:
    if satellites_used >= 8:
        return 0.7
    if satellites_used >= 5:
        return 0.9
    if satellites_used <= 3:
        return 1.5
    return 1.0


def estimate_accuracy(hdop: Optional[float], satellites_used: Optional[int]) -> Optional[float]:
    """Return the estimated horizontal accuracy in metres, rounded to 0.1.

    Returns ``None`` when either input has not been reported yet.
    """
    if hdop is None or satellites_used is None:
        return None
    return round_tenth(hdop * UERE_METRES * _satellite_multiplier(satellites_used))
