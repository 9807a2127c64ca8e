"""
errors.py

Exception hierarchy for NMEA decoding and distance calculation.

All errors derive from :class:`NmeaError`, itself a :class:`ValueError`, so
callers that already guard against bad input with ``except ValueError`` keep
working.
"""


class NmeaError(ValueError):
    """Base class for every error raised by :mod:`ublox_nmea`."""


class ChecksumError(NmeaError):
    """The ``*HH`` checksum does not match the sentence body."""


class MalformedSentenceError(NmeaError):
    """The sentence framing or its fields cannot be decoded."""


class CoordinateRangeError(NmeaError):
    """A latitude or longitude lies outside its legal range."""
