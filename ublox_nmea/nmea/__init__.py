"""
ublox_nmea.nmea

NMEA 0183 sentence handling: tokenizer, coordinate codec, per-sentence
decoders and dispatch.
"""

from ublox_nmea.nmea.coordinates import decode_coordinate, encode_coordinate
from ublox_nmea.nmea.dispatch import SENTENCE_TABLE, SentenceKind, dispatch, identify
from ublox_nmea.nmea.tokenizer import compute_checksum, format_sentence, tokenize

__all__ = [
    "decode_coordinate",
    "encode_coordinate",
    "SENTENCE_TABLE",
    "SentenceKind",
    "dispatch",
    "identify",
    "compute_checksum",
    "format_sentence",
    "tokenize",
]
