"""
fix.py

The fix record accumulated across decoded sentences.

No single NMEA sentence carries a complete fix: GGA reports position and
quality, RMC reports velocity and date, GSA the dilution of precision, GSV the
satellites in view and VTG the ground track.  :class:`FixState` merges them
into one record that is mutated in place as sentences arrive.

Quantities that have not been reported yet are ``None``; ``0`` and ``0.0`` are
always real readings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ublox_nmea.accuracy import estimate_accuracy

TIMESTAMP_FORMAT = "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}Z"


@dataclass
class FixState:
    """Merged fix data for one receiver session.

    Attributes:
        latitude: Decimal degrees (negative = South), or ``None``.
        longitude: Decimal degrees (negative = West), or ``None``.
        altitude: Antenna altitude in metres (GGA only), or ``None``.
        speed: Speed over ground in m/s, or ``None``.
        course: True course over ground in degrees, or ``None``.
        satellites_used: Satellites used in the fix (GGA), or ``None``.
        satellites_visible: Satellites in view (GSV), or ``None``.
        fix_type: GGA fix quality (0 = invalid, 1 = GPS, 2 = DGPS, ...).
            Only meaningful once ``has_position_sentence`` is set.
        hdop: Horizontal dilution of precision, or ``None``.
        vdop: Vertical dilution of precision, or ``None``.
        pdop: Position (3D) dilution of precision, or ``None``.
        accuracy: Estimated horizontal accuracy in metres, or ``None``.
        year, month, day: UTC date from RMC; ``0`` until reported.
        hour, minute, second: UTC time of day; ``0`` until reported.
        valid: ``True`` while the last RMC status was ``'A'`` (active).
        has_position_sentence: A GGA sentence has been decoded.
        has_satellite_geometry: A GSA sentence has been decoded.
        has_satellite_view: A GSV sentence reported satellites in view.
        has_ground_track: A VTG sentence has been decoded.
        timestamp: ISO-8601 ``YYYY-MM-DDThh:mm:ssZ``, or ``""`` while the
            date is incomplete.
        sentences_decoded: Sentences that passed checksum and were applied
            (or ignored as an unsupported type).
        sentences_rejected: Sentences rejected as corrupt or malformed.
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    speed: Optional[float] = None
    course: Optional[float] = None
    satellites_used: Optional[int] = None
    satellites_visible: Optional[int] = None
    fix_type: int = 0
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None
    accuracy: Optional[float] = None
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    valid: bool = False
    has_position_sentence: bool = False
    has_satellite_geometry: bool = False
    has_satellite_view: bool = False
    has_ground_track: bool = False
    timestamp: str = ""
    sentences_decoded: int = 0
    sentences_rejected: int = 0

    # ------------------------------------------------------------------
    # Presence helpers
    # ------------------------------------------------------------------

    @property
    def has_satellites_used(self) -> bool:
        return self.satellites_used is not None

    @property
    def has_satellites_visible(self) -> bool:
        return self.satellites_visible is not None

    @property
    def has_accuracy(self) -> bool:
        return self.accuracy is not None

    @property
    def has_date(self) -> bool:
        """``True`` once year, month and day are all nonzero."""
        return self.year > 0 and self.month > 0 and self.day > 0

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    # ------------------------------------------------------------------
    # Derived fields
    # ------------------------------------------------------------------

    def update_accuracy(self) -> None:
        """Recompute :attr:`accuracy` from the current HDOP and satellite count."""
        self.accuracy = estimate_accuracy(self.hdop, self.satellites_used)

    def update_timestamp(self) -> None:
        """Recompute :attr:`timestamp` from the current date and time fields."""
        if self.has_date:
            self.timestamp = TIMESTAMP_FORMAT.format(
                self.year, self.month, self.day, self.hour, self.minute, self.second
            )
        else:
            self.timestamp = ""

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Return a snapshot holding only the quantities that are known.

        ``valid`` is always present.  ``date`` is ``[day, month, year]`` and
        ``time`` is ``[hour, minute, second]``; both appear only with a full
        date.
        """
        data: dict = {"valid": bool(self.valid)}
        if self.latitude is not None:
            data["latitude"] = float(self.latitude)
        if self.longitude is not None:
            data["longitude"] = float(self.longitude)
        if self.has_position_sentence and self.altitude is not None:
            data["altitude"] = float(self.altitude)
        if self.speed is not None:
            data["speed"] = float(self.speed)
        if self.course is not None:
            data["course"] = float(self.course)
        if self.satellites_used is not None:
            data["satellites_used"] = int(self.satellites_used)
        if self.satellites_visible is not None:
            data["satellites_visible"] = int(self.satellites_visible)
        if self.has_position_sentence:
            data["fix_type"] = int(self.fix_type)
        if self.has_satellite_geometry:
            for name in ("hdop", "vdop", "pdop"):
                value = getattr(self, name)
                if value is not None:
                    data[name] = float(value)
        if self.accuracy is not None:
            data["accuracy"] = float(self.accuracy)
        if self.has_date:
            data["date"] = [self.day, self.month, self.year]
            data["time"] = [self.hour, self.minute, self.second]
        if self.timestamp:
            data["timestamp"] = self.timestamp
        return data
