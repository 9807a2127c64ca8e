"""
nmea/decoders.py

Per-sentence decoders that merge one tokenized sentence into a
:class:`~ublox_nmea.fix.FixState`.

Supported sentence types
------------------------
* **GGA** – Global Positioning System Fix Data (position, altitude, fix quality,
  satellites used, HDOP, time of day).
* **RMC** – Recommended Minimum Navigation Information (status, speed and
  course over ground, date and time; position as a fallback).
* **GSA** – DOP and active satellites (PDOP, HDOP, VDOP).
* **GSV** – Satellites in view (total count only).
* **VTG** – Track made good and ground speed (fallback course and speed).

Merge rules
-----------
Every decoder parses all of its fields before touching the fix, so a sentence
with an unparsable number raises :class:`MalformedSentenceError` and leaves the
fix unchanged.  GGA owns position, altitude, quality and satellite count.  RMC
coordinates only fill in what GGA has not supplied (see
:class:`~ublox_nmea.config.CoordinateAuthority`).  GSA HDOP replaces GGA HDOP.
VTG course and speed are used only while RMC has not reported them (or the
reported speed is below the noise floor).

Speed, course, altitude and every DOP value are rounded to 0.1 as soon as they
are parsed.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ublox_nmea.config import CoordinateAuthority, ReceiverConfig
from ublox_nmea.errors import MalformedSentenceError
from ublox_nmea.fix import FixState
from ublox_nmea.nmea.coordinates import decode_coordinate
from ublox_nmea.units import KMH_TO_MPS, KNOTS_TO_MPS, round_tenth

Clock = Tuple[int, int, int]


# ---------------------------------------------------------------------------
# Field parsing helpers
# ---------------------------------------------------------------------------


def _field(fields: List[str], index: int) -> str:
    """Return ``fields[index]``, or ``""`` past the end of the sentence."""
    return fields[index] if index < len(fields) else ""


def _parse_float(text: str) -> Optional[float]:
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise MalformedSentenceError(f"Expected a number, got {text!r}") from None
    if not math.isfinite(value):
        raise MalformedSentenceError(f"Expected a finite number, got {text!r}")
    return value


def _parse_int(text: str) -> Optional[int]:
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise MalformedSentenceError(f"Expected an integer, got {text!r}") from None


def _parse_tenths(text: str, scale: float = 1.0) -> Optional[float]:
    value = _parse_float(text)
    return None if value is None else round_tenth(value * scale)


def _parse_digit_pairs(text: str) -> Optional[Clock]:
    """Split the first six characters of *text* into three two-digit numbers.

    Shorter fields carry no usable value and yield ``None``; fractional
    seconds in ``hhmmss.sss`` are dropped.
    """
    if len(text) < 6:
        return None
    head = text[:6]
    if not (head.isascii() and head.isdigit()):
        raise MalformedSentenceError(f"Expected six digits, got {text!r}")
    return int(head[0:2]), int(head[2:4]), int(head[4:6])


def _parse_position(
    raw: str, hemisphere: str, limit: float
) -> Tuple[bool, Optional[float]]:
    """Decode one coordinate half.

    Returns ``(present, value)``: *present* is ``False`` when either field is
    empty, in which case the fix is not touched.  A present but unusable or
    out-of-range coordinate decodes to ``None``.
    """
    if not raw or not hemisphere:
        return False, None
    value = decode_coordinate(raw, hemisphere)
    if value is not None and abs(value) > limit:
        value = None
    return True, value


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def decode_gga(fields: List[str], fix: FixState, config: ReceiverConfig) -> None:
    """Apply a GGA sentence.

    ``$GPGGA,hhmmss.ss,llll.ll,a,yyyyy.yy,a,q,nn,h.h,a.a,M,g.g,M,age,id*hh``
    """
    clock = _parse_digit_pairs(fields[1])
    has_lat, latitude = _parse_position(fields[2], fields[3], 90.0)
    has_lon, longitude = _parse_position(fields[4], fields[5], 180.0)
    fix_type = _parse_int(fields[6])
    satellites_used = _parse_int(fields[7])
    hdop = _parse_tenths(fields[8])
    altitude = _parse_tenths(fields[9])

    if clock is not None:
        fix.hour, fix.minute, fix.second = clock
    # Under MOST_RECENT only a well-formed coordinate replaces the current one.
    keep_absent = config.coordinate_authority is not CoordinateAuthority.MOST_RECENT
    if has_lat and (latitude is not None or keep_absent):
        fix.latitude = latitude
    if has_lon and (longitude is not None or keep_absent):
        fix.longitude = longitude
    if fix_type is not None:
        fix.fix_type = fix_type
    if satellites_used is not None:
        fix.satellites_used = satellites_used
    if hdop is not None:
        fix.hdop = hdop
    if altitude is not None:
        fix.altitude = altitude

    fix.has_position_sentence = True
    fix.update_accuracy()
    fix.update_timestamp()


def _rmc_coordinate(
    current: Optional[float],
    present: bool,
    value: Optional[float],
    fix: FixState,
    config: ReceiverConfig,
) -> Optional[float]:
    """Return the coordinate to keep after an RMC sentence."""
    if config.coordinate_authority is CoordinateAuthority.MOST_RECENT:
        return current if value is None else value
    if present and (current is None or not fix.has_position_sentence):
        return value
    return current


def decode_rmc(fields: List[str], fix: FixState, config: ReceiverConfig) -> None:
    """Apply an RMC sentence.

    ``$GPRMC,hhmmss.ss,A,llll.ll,a,yyyyy.yy,a,x.x,x.x,ddmmyy,x.x,a*hh``
    """
    clock = _parse_digit_pairs(fields[1])
    has_lat, latitude = _parse_position(fields[3], fields[4], 90.0)
    has_lon, longitude = _parse_position(fields[5], fields[6], 180.0)
    speed = _parse_tenths(fields[7], KNOTS_TO_MPS)
    course = _parse_tenths(fields[8])
    date = _parse_digit_pairs(fields[9])

    if clock is not None:
        fix.hour, fix.minute, fix.second = clock
    fix.valid = fields[2][:1] == "A"

    fix.latitude = _rmc_coordinate(fix.latitude, has_lat, latitude, fix, config)
    fix.longitude = _rmc_coordinate(fix.longitude, has_lon, longitude, fix, config)

    if speed is not None:
        fix.speed = speed
    if course is not None:
        fix.course = course
    if date is not None:
        day, month, short_year = date
        fix.day, fix.month, fix.year = day, month, 2000 + short_year

    fix.update_timestamp()


def decode_gsa(fields: List[str], fix: FixState, config: ReceiverConfig) -> None:
    """Apply a GSA sentence.

    ``$GPGSA,M,f,s1,...,s12,pdop,hdop,vdop*hh``
    """
    pdop = _parse_tenths(_field(fields, 15))
    hdop = _parse_tenths(_field(fields, 16))
    vdop = _parse_tenths(_field(fields, 17))

    if pdop is not None:
        fix.pdop = pdop
    if hdop is not None:
        fix.hdop = hdop
    if vdop is not None:
        fix.vdop = vdop

    fix.has_satellite_geometry = True
    fix.update_accuracy()


def decode_gsv(fields: List[str], fix: FixState, config: ReceiverConfig) -> None:
    """Apply a GSV sentence.

    ``$GPGSV,total_msgs,msg_num,sats_in_view,[prn,elev,azim,snr]...*hh``

    Only the satellites-in-view total is used; per-satellite blocks are
    ignored.
    """
    visible = _parse_int(fields[3])
    if visible is not None:
        fix.satellites_visible = visible
        fix.has_satellite_view = True


def decode_vtg(fields: List[str], fix: FixState, config: ReceiverConfig) -> None:
    """Apply a VTG sentence.

    ``$GPVTG,course_t,T,course_m,M,speed_kn,N,speed_kmh,K,mode*hh``
    """
    course = _parse_tenths(fields[1])
    speed = _parse_tenths(fields[7], KMH_TO_MPS)

    if course is not None and fix.course is None:
        fix.course = course
    if speed is not None and (fix.speed is None or fix.speed < config.speed_noise_floor):
        fix.speed = speed

    fix.has_ground_track = True
