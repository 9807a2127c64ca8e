"""
ublox_nmea: incremental decoding of u-blox NMEA 0183 output into a single
merged GPS fix, with accuracy estimation and great-circle distances.
"""

from ublox_nmea.config import CoordinateAuthority, ReceiverConfig
from ublox_nmea.errors import (
    ChecksumError,
    CoordinateRangeError,
    MalformedSentenceError,
    NmeaError,
)
from ublox_nmea.fix import FixState
from ublox_nmea.accuracy import estimate_accuracy
from ublox_nmea.geodesy import distance, haversine_distance, path_length
from ublox_nmea.receiver import (
    NmeaReceiver,
    calculate_distance,
    current,
    load_nmea,
    parse,
    reset,
)
from ublox_nmea import nmea

__all__ = [
    "CoordinateAuthority",
    "ReceiverConfig",
    "ChecksumError",
    "CoordinateRangeError",
    "MalformedSentenceError",
    "NmeaError",
    "FixState",
    "estimate_accuracy",
    "distance",
    "haversine_distance",
    "path_length",
    "NmeaReceiver",
    "calculate_distance",
    "current",
    "load_nmea",
    "parse",
    "reset",
    "nmea",
]
