"""Tests for great-circle distance calculation."""

import numpy as np
import pytest

from ublox_nmea.errors import CoordinateRangeError
from ublox_nmea.geodesy import distance, haversine_distance, path_length


class TestHaversine:
    def test_one_degree_longitude_at_equator(self):
        assert haversine_distance(0.0, 0.0, 0.0, 1.0) == pytest.approx(111194.93, abs=0.01)

    def test_returns_float_for_scalars(self):
        assert isinstance(haversine_distance(0.0, 0.0, 1.0, 1.0), float)

    def test_vectorised(self):
        lat2 = np.array([0.0, 1.0, 0.0])
        lon2 = np.array([1.0, 0.0, 0.0])
        result = haversine_distance(0.0, 0.0, lat2, lon2)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, [111194.93, 111194.93, 0.0], atol=0.01)

    def test_antipodal(self):
        assert haversine_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(np.pi * 6371000.0)


class TestDistance:
    def test_equator_degree(self):
        assert distance((0, 0), (0, 1)) == pytest.approx(111194.9)

    def test_rounded_to_tenth(self):
        d = distance((48.1173, 11.5167), (48.2, 11.6))
        assert d == round(d, 1)

    def test_symmetric(self):
        a, b = (48.1173, 11.5167), (-33.8688, 151.2093)
        assert distance(a, b) == distance(b, a)

    def test_same_point_is_zero(self):
        assert distance([51.5, -0.12], [51.5, -0.12]) == 0.0

    def test_lists_and_tuples(self):
        assert distance([0, 0], (0, 1)) == distance((0, 0), [0, 1])

    def test_extra_items_ignored(self):
        assert distance((0, 0, 100.0), (0, 1, 5.0)) == distance((0, 0), (0, 1))

    def test_latitude_out_of_range(self):
        with pytest.raises(CoordinateRangeError, match="latitude"):
            distance((91.0, 0.0), (0.0, 0.0))

    def test_longitude_out_of_range(self):
        with pytest.raises(CoordinateRangeError, match="longitude"):
            distance((0.0, 0.0), (0.0, -180.5))

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            distance((0.0, 0.0), (-90.1, 0.0))

    def test_boundaries_accepted(self):
        assert distance((90.0, 180.0), (-90.0, -180.0)) > 0

    def test_not_a_sequence(self):
        with pytest.raises(TypeError):
            distance("0,0", (0, 1))

    def test_too_few_items(self):
        with pytest.raises(ValueError, match="at least 2"):
            distance((0.0,), (0, 1))

    def test_non_numeric_item(self):
        with pytest.raises(TypeError, match="latitude"):
            distance(("0", 0), (0, 1))


class TestPathLength:
    def test_sum_of_segments(self):
        assert path_length([0.0, 0.0, 0.0], [0.0, 1.0, 2.0]) == pytest.approx(2 * 111194.93, abs=0.02)

    def test_single_point(self):
        assert path_length([10.0], [20.0]) == 0.0

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError, match="equal length"):
            path_length([0.0, 1.0], [0.0])
