"""
nmea/dispatch.py

Sentence identification and routing.

Each :class:`SentenceKind` carries the minimum number of fields (counting the
talker+type token at index 0) its decoder needs.  Talker IDs are treated as
equivalent: ``GPGGA`` and ``GNGGA`` are both :attr:`SentenceKind.GGA`.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, List, Optional

from ublox_nmea.config import ReceiverConfig
from ublox_nmea.errors import MalformedSentenceError
from ublox_nmea.fix import FixState
from ublox_nmea.nmea.decoders import (
    decode_gga,
    decode_gsa,
    decode_gsv,
    decode_rmc,
    decode_vtg,
)

logger = logging.getLogger(__name__)

Decoder = Callable[[List[str], FixState, ReceiverConfig], None]


class SentenceKind(enum.Enum):
    """Supported sentence types and their minimum field counts."""

    GGA = ("GGA", 14)
    RMC = ("RMC", 12)
    GSA = ("GSA", 17)
    GSV = ("GSV", 4)
    VTG = ("VTG", 8)

    def __init__(self, code: str, min_fields: int) -> None:
        self.code = code
        self.min_fields = min_fields

    @property
    def decoder(self) -> Decoder:
        return _DECODERS[self]


_DECODERS: Dict[SentenceKind, Decoder] = {
    SentenceKind.GGA: decode_gga,
    SentenceKind.RMC: decode_rmc,
    SentenceKind.GSA: decode_gsa,
    SentenceKind.GSV: decode_gsv,
    SentenceKind.VTG: decode_vtg,
}

# Talker+type token -> sentence kind.
SENTENCE_TABLE: Dict[str, SentenceKind] = {
    "GPRMC": SentenceKind.RMC,
    "GNRMC": SentenceKind.RMC,
    "GPGGA": SentenceKind.GGA,
    "GNGGA": SentenceKind.GGA,
    "GPGSA": SentenceKind.GSA,
    "GNGSA": SentenceKind.GSA,
    "GPGSV": SentenceKind.GSV,
    "GLGSV": SentenceKind.GSV,
    "GNGSV": SentenceKind.GSV,
    "GBGSV": SentenceKind.GSV,
    "GPVTG": SentenceKind.VTG,
    "GNVTG": SentenceKind.VTG,
}


def identify(token: str) -> Optional[SentenceKind]:
    """Return the :class:`SentenceKind` for a talker+type token, or ``None``."""
    return SENTENCE_TABLE.get(token)


def dispatch(
    fields: List[str], fix: FixState, config: ReceiverConfig
) -> Optional[SentenceKind]:
    """Run the decoder matching ``fields[0]`` against *fix*.

    Returns:
        The kind that was decoded, or ``None`` for an unsupported sentence
        (which leaves *fix* untouched).

    Raises:
        MalformedSentenceError: If the sentence has fewer fields than its
            kind requires, or a field cannot be parsed.
    """
    kind = identify(fields[0])
    if kind is None:
        logger.debug("Ignoring unsupported sentence %s", fields[0])
        return None
    if len(fields) < kind.min_fields:
        raise MalformedSentenceError(
            f"{fields[0]} needs at least {kind.min_fields} fields, got {len(fields)}."
        )
    kind.decoder(fields, fix, config)
    return kind
