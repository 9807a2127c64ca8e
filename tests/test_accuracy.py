"""Tests for the accuracy estimator."""

import pytest

from ublox_nmea.accuracy import estimate_accuracy


class TestEstimateAccuracy:
    def test_many_satellites(self):
        # 0.9 * 4.9 * 0.7 = 3.087
        assert estimate_accuracy(0.9, 8) == pytest.approx(3.1)

    def test_medium_satellites(self):
        # 1.0 * 4.9 * 0.9 = 4.41
        assert estimate_accuracy(1.0, 5) == pytest.approx(4.4)
        assert estimate_accuracy(1.0, 7) == pytest.approx(4.4)

    def test_four_satellites_unadjusted(self):
        assert estimate_accuracy(1.0, 4) == pytest.approx(4.9)

    def test_few_satellites(self):
        # 2.0 * 4.9 * 1.5 = 14.7
        assert estimate_accuracy(2.0, 3) == pytest.approx(14.7)
        assert estimate_accuracy(2.0, 0) == pytest.approx(14.7)

    def test_absent_hdop(self):
        assert estimate_accuracy(None, 8) is None

    def test_absent_satellites(self):
        assert estimate_accuracy(0.9, None) is None

    def test_zero_hdop_is_present(self):
        assert estimate_accuracy(0.0, 8) == 0.0

    def test_deterministic(self):
        results = {estimate_accuracy(1.7, 6) for _ in range(10)}
        assert len(results) == 1
