"""
receiver.py

:class:`NmeaReceiver` is one receiver session: it owns a
:class:`~ublox_nmea.fix.FixState`, feeds raw NMEA lines through the tokenizer
and decoders, and returns snapshots of the merged fix.

The decode path is lenient: corrupt or malformed sentences are logged and
counted, never raised, so a continuous stream keeps flowing.  Only
:meth:`NmeaReceiver.distance` raises, on bad arguments.

A module-level default receiver backs :func:`parse`, :func:`current`,
:func:`reset` and :func:`calculate_distance` for callers that only ever talk to
one GPS.  A receiver must be fed by one writer at a time; use one receiver per
thread or serialise calls.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ublox_nmea.config import MIN_SENTENCE_LENGTH, ReceiverConfig
from ublox_nmea.errors import ChecksumError, MalformedSentenceError
from ublox_nmea.fix import FixState
from ublox_nmea.geodesy import Point, as_point, check_range, distance, haversine_distance
from ublox_nmea.nmea.dispatch import dispatch
from ublox_nmea.nmea.tokenizer import tokenize
from ublox_nmea.units import round_tenth

logger = logging.getLogger(__name__)


class NmeaReceiver:
    """Incremental NMEA decoder for a single receiver.

    Args:
        config: Merge policy and tokenizer bounds.  Defaults to
            :class:`ReceiverConfig` defaults.

    Example::

        receiver = NmeaReceiver()
        for line in serial_lines:
            snapshot = receiver.decode_sentence(line)
            if snapshot and snapshot["valid"]:
                print(snapshot["latitude"], snapshot["longitude"])
    """

    def __init__(self, config: Optional[ReceiverConfig] = None) -> None:
        self._config = config if config is not None else ReceiverConfig()
        self._fix = FixState()
        self._started = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def config(self) -> ReceiverConfig:
        return self._config

    @property
    def state(self) -> FixState:
        """The live fix record (mutated by every accepted sentence)."""
        return self._fix

    def decode_sentence(self, line: str) -> Optional[dict]:
        """Merge one NMEA sentence into the fix.

        Returns:
            ``None`` when the line is too short, badly framed or fails its
            checksum.  Otherwise the full fix snapshot, also for sentences of
            an unsupported type or with too few fields (which leave the fix
            unchanged).
        """
        if len(line) < MIN_SENTENCE_LENGTH:
            return None
        try:
            fields = tokenize(
                line,
                max_field_length=self._config.max_field_length,
                max_sentence_length=self._config.max_sentence_length,
            )
        except (ChecksumError, MalformedSentenceError) as exc:
            self._fix.sentences_rejected += 1
            logger.debug("Rejected sentence %r: %s", line.strip(), exc)
            return None

        self._started = True
        try:
            dispatch(fields, self._fix, self._config)
        except MalformedSentenceError as exc:
            self._fix.sentences_rejected += 1
            logger.debug("Skipped malformed %s sentence: %s", fields[0], exc)
        else:
            self._fix.sentences_decoded += 1
        return self._fix.to_dict()

    def current(self) -> dict:
        """Return the live snapshot, or ``{"valid": False}`` before any input."""
        if not self._started:
            return {"valid": False}
        return self._fix.to_dict()

    def reset(self) -> None:
        """Discard the fix and start over with an empty record."""
        self._fix = FixState()
        self._started = True
        logger.info("Receiver fix reset")

    def distance(self, a: Point, b: Optional[Point] = None) -> Optional[float]:
        """Distance in metres, rounded to 0.1.

        With two arguments, the distance between *a* and *b*.  With one, the
        distance from the current fix to *a*; ``None`` while the fix has no
        coordinates.

        Raises:
            TypeError: If a point is not a sequence of real numbers.
            ValueError: If a point has fewer than two items.
            CoordinateRangeError: If a coordinate is outside its legal range.
        """
        if b is not None:
            return distance(a, b)

        if not self._fix.has_coordinates:
            return None
        lat2, lon2 = as_point(a, "target")
        lat1, lon1 = self._fix.latitude, self._fix.longitude
        check_range(lat1, lon1)
        check_range(lat2, lon2)
        return round_tenth(haversine_distance(lat1, lon1, lat2, lon2))

    def feed(self, lines: Iterable[str]) -> Iterator[dict]:
        """Decode *lines* in order, yielding the snapshot of each accepted one."""
        for line in lines:
            snapshot = self.decode_sentence(line)
            if snapshot is not None:
                yield snapshot

    def replay(self, path: str | os.PathLike) -> Optional[dict]:
        """Feed every sentence of an NMEA log file and return the final snapshot.

        Lines that do not start with ``$`` are skipped.  Returns ``None`` when
        the file holds no accepted sentence.
        """
        snapshot = None
        for snapshot in self.feed(_iter_sentences(path)):
            pass
        return snapshot


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def load_nmea(path: str | os.PathLike, config: Optional[ReceiverConfig] = None) -> List[dict]:
    """Replay an NMEA log file through a fresh receiver.

    Args:
        path: Path to the ``.nmea`` or ``.txt`` file.
        config: Optional receiver configuration.

    Returns:
        One snapshot per accepted sentence, in file order.
    """
    return list(NmeaReceiver(config).feed(_iter_sentences(path)))


_default_receiver: Optional[NmeaReceiver] = None


def default_receiver() -> NmeaReceiver:
    """Return the process-wide receiver behind :func:`parse` and friends."""
    global _default_receiver
    if _default_receiver is None:
        _default_receiver = NmeaReceiver()
    return _default_receiver


def parse(line: str) -> Optional[dict]:
    """Decode *line* with the default receiver (see :meth:`NmeaReceiver.decode_sentence`)."""
    return default_receiver().decode_sentence(line)


def current() -> dict:
    """Snapshot of the default receiver (see :meth:`NmeaReceiver.current`)."""
    return default_receiver().current()


def reset() -> None:
    """Reset the default receiver."""
    default_receiver().reset()


def calculate_distance(a: Point, b: Optional[Point] = None) -> Optional[float]:
    """Distance using the default receiver (see :meth:`NmeaReceiver.distance`)."""
    return default_receiver().distance(a, b)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _iter_sentences(path: str | os.PathLike) -> Iterator[str]:
    """Yield raw (stripped) NMEA sentence strings from a log file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"NMEA file not found: {path}")
    for line in path.read_text(encoding="ascii", errors="replace").splitlines():
        line = line.strip()
        if line.startswith("$"):
            yield line
