"""Tests for ReceiverConfig."""

import os
import tempfile

import pytest
import yaml

from ublox_nmea.config import CoordinateAuthority, ReceiverConfig


class TestReceiverConfig:
    def test_defaults(self):
        config = ReceiverConfig()
        assert config.coordinate_authority is CoordinateAuthority.POSITION_LOCKS
        assert config.max_sentence_length == 256
        assert config.max_field_length is None
        assert config.speed_noise_floor == pytest.approx(0.1)

    def test_authority_from_string(self):
        config = ReceiverConfig(coordinate_authority="most_recent")
        assert config.coordinate_authority is CoordinateAuthority.MOST_RECENT

    def test_invalid_authority(self):
        with pytest.raises(ValueError):
            ReceiverConfig(coordinate_authority="latest")

    def test_invalid_sentence_length(self):
        with pytest.raises(ValueError, match="at least"):
            ReceiverConfig(max_sentence_length=5)

    def test_invalid_field_length(self):
        with pytest.raises(ValueError, match="positive"):
            ReceiverConfig(max_field_length=0)

    def test_invalid_noise_floor(self):
        with pytest.raises(ValueError, match="non-negative"):
            ReceiverConfig(speed_noise_floor=-1.0)

    def test_dict_round_trip(self):
        config = ReceiverConfig(
            coordinate_authority=CoordinateAuthority.MOST_RECENT,
            max_sentence_length=82,
            max_field_length=14,
            speed_noise_floor=0.5,
        )
        assert ReceiverConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        assert ReceiverConfig.from_dict({}) == ReceiverConfig()
        assert ReceiverConfig.from_dict(None) == ReceiverConfig()


class TestReceiverConfigYaml:
    def setup_method(self):
        self.tmp = tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w")
        self.tmp.close()
        self.path = self.tmp.name

    def teardown_method(self):
        os.unlink(self.path)

    def test_yaml_round_trip(self):
        config = ReceiverConfig(max_field_length=14)
        config.to_yaml(self.path)
        assert ReceiverConfig.from_yaml(self.path) == config

    def test_yaml_structure(self):
        ReceiverConfig().to_yaml(self.path)
        with open(self.path) as f:
            raw = yaml.safe_load(f)
        assert raw["coordinate_authority"] == "position_locks"
        assert raw["max_field_length"] is None

    def test_partial_yaml(self):
        with open(self.path, "w") as f:
            f.write("coordinate_authority: most_recent\n")
        config = ReceiverConfig.from_yaml(self.path)
        assert config.coordinate_authority is CoordinateAuthority.MOST_RECENT
        assert config.max_sentence_length == 256
