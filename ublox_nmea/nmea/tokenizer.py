"""
nmea/tokenizer.py

Checksum verification and field splitting for raw NMEA 0183 sentences.

A sentence has the shape::

    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^ body starts here                                          ^ checksum

The checksum is the XOR of every character strictly between ``$`` and ``*``,
written as two hexadecimal digits.  :func:`tokenize` returns the
comma-separated body with the talker+type token at index 0, so data field
numbers line up with the NMEA field numbers.  Empty fields are kept: field
position carries the meaning.
"""

from __future__ import annotations

import string
from typing import List, Optional

from ublox_nmea.config import MIN_SENTENCE_LENGTH
from ublox_nmea.errors import ChecksumError, MalformedSentenceError

SENTENCE_START = "$"
CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","

DEFAULT_MAX_SENTENCE_LENGTH = 256

_HEX_DIGITS = frozenset(string.hexdigits)


def compute_checksum(body: str) -> int:
    """XOR of every character in *body* (the text between ``$`` and ``*``)."""
    checksum = 0
    for ch in body:
        checksum ^= ord(ch)
    return checksum & 0xFF


def format_sentence(body: str) -> str:
    """Frame *body* as ``$<body>*HH`` with a freshly computed checksum."""
    return f"{SENTENCE_START}{body}{CHECKSUM_DELIMITER}{compute_checksum(body):02X}"


def split_checksum(line: str, max_sentence_length: int = DEFAULT_MAX_SENTENCE_LENGTH) -> str:
    """Validate framing and checksum, returning the sentence body.

    Raises:
        MalformedSentenceError: If the line is too short, too long, does not
            start with ``$`` or lacks a two-digit ``*HH`` suffix.
        ChecksumError: If the checksum does not match the body.
    """
    line = line.strip()
    if len(line) < MIN_SENTENCE_LENGTH:
        raise MalformedSentenceError(f"Sentence too short: {line!r}")
    if len(line) > max_sentence_length:
        raise MalformedSentenceError(
            f"Sentence longer than {max_sentence_length} characters."
        )
    if not line.startswith(SENTENCE_START):
        raise MalformedSentenceError(f"Sentence does not start with '$': {line!r}")

    body, delimiter, checksum_str = line[1:].partition(CHECKSUM_DELIMITER)
    if not delimiter:
        raise MalformedSentenceError(f"Sentence has no checksum: {line!r}")
    checksum_str = checksum_str[:2]
    if len(checksum_str) != 2 or not set(checksum_str) <= _HEX_DIGITS:
        raise MalformedSentenceError(f"Invalid checksum field: {checksum_str!r}")

    expected = int(checksum_str, 16)
    actual = compute_checksum(body)
    if actual != expected:
        raise ChecksumError(
            f"Checksum mismatch: expected {expected:02X}, computed {actual:02X}."
        )
    return body


def tokenize(
    line: str,
    max_field_length: Optional[int] = None,
    max_sentence_length: int = DEFAULT_MAX_SENTENCE_LENGTH,
) -> List[str]:
    """Split a checksum-verified sentence into its fields.

    Args:
        line: Raw sentence, optionally followed by ``\\r\\n``.
        max_field_length: When given, fields longer than this are replaced
            by ``""`` rather than truncated.
        max_sentence_length: Longest accepted line.

    Returns:
        Field strings; index 0 is the talker+type token (e.g. ``"GPGGA"``).

    Raises:
        MalformedSentenceError: On framing errors (see :func:`split_checksum`).
        ChecksumError: If the checksum does not match.
    """
    fields = split_checksum(line, max_sentence_length).split(FIELD_DELIMITER)
    if max_field_length is not None:
        fields = [f if len(f) <= max_field_length else "" for f in fields]
    return fields
