"""
config.py

Receiver configuration: the merge policy applied when several sentence types
report the same quantity, and the bounds enforced by the tokenizer.  The
configuration can be loaded from and saved to YAML files.

Example YAML::

    coordinate_authority: position_locks
    max_sentence_length: 256
    max_field_length: null
    speed_noise_floor: 0.1
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

# Shortest line that can hold ``$`` + a five character sentence token.
MIN_SENTENCE_LENGTH = 6


class CoordinateAuthority(enum.Enum):
    """Which sentence may overwrite a coordinate already held by the fix.

    ``POSITION_LOCKS``
        Once a GGA sentence has been decoded, RMC coordinates only fill in
        values that are still absent.  A stale GGA fix therefore keeps
        suppressing RMC coordinates until the receiver is reset.
    ``MOST_RECENT``
        The most recent sentence carrying a well-formed coordinate wins; a
        malformed GGA or RMC coordinate leaves the current value in place.
    """

    POSITION_LOCKS = "position_locks"
    MOST_RECENT = "most_recent"


@dataclass
class ReceiverConfig:
    """Settings for a :class:`~ublox_nmea.receiver.NmeaReceiver`.

    Attributes:
        coordinate_authority: Merge policy for RMC coordinates once a GGA
            sentence has been seen.
        max_sentence_length: Longest accepted line (characters, excluding
            line terminators).  Longer lines are rejected as malformed.
        max_field_length: When set, any field longer than this is replaced
            by an empty string.  ``14`` reproduces the u-blox firmware
            field buffers; ``None`` leaves fields unbounded.
        speed_noise_floor: VTG speed replaces the current speed when the
            latter is absent or below this value (m/s).
    """

    coordinate_authority: CoordinateAuthority = CoordinateAuthority.POSITION_LOCKS
    max_sentence_length: int = 256
    max_field_length: Optional[int] = None
    speed_noise_floor: float = 0.1

    def __post_init__(self) -> None:
        if not isinstance(self.coordinate_authority, CoordinateAuthority):
            self.coordinate_authority = CoordinateAuthority(self.coordinate_authority)
        if self.max_sentence_length < MIN_SENTENCE_LENGTH:
            raise ValueError(
                f"max_sentence_length must be at least {MIN_SENTENCE_LENGTH}, "
                f"got {self.max_sentence_length}."
            )
        if self.max_field_length is not None and self.max_field_length <= 0:
            raise ValueError(
                f"max_field_length must be positive, got {self.max_field_length}."
            )
        if self.speed_noise_floor < 0:
            raise ValueError(
                f"speed_noise_floor must be non-negative, got {self.speed_noise_floor}."
            )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "coordinate_authority": self.coordinate_authority.value,
            "max_sentence_length": int(self.max_sentence_length),
            "max_field_length": (
                None if self.max_field_length is None else int(self.max_field_length)
            ),
            "speed_noise_floor": float(self.speed_noise_floor),
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ReceiverConfig":
        data = data or {}
        max_field_length = data.get("max_field_length")
        return cls(
            coordinate_authority=CoordinateAuthority(
                data.get("coordinate_authority", CoordinateAuthority.POSITION_LOCKS.value)
            ),
            max_sentence_length=int(data.get("max_sentence_length", 256)),
            max_field_length=None if max_field_length is None else int(max_field_length),
            speed_noise_floor=float(data.get("speed_noise_floor", 0.1)),
        )

    def to_yaml(self, path: str | os.PathLike) -> None:
        """Write the configuration to a YAML file."""
        Path(path).write_text(
            yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        )

    @classmethod
    def from_yaml(cls, path: str | os.PathLike) -> "ReceiverConfig":
        """Load a :class:`ReceiverConfig` from a YAML file."""
        raw = yaml.safe_load(Path(path).read_text())
        config = cls.from_dict(raw)
        logger.info("Loaded receiver config from %s: %s", path, config.to_dict())
        return config
