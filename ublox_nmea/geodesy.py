"""
geodesy.py

Great-circle distance on a spherical earth (haversine formula).

:func:`haversine_distance` works on scalars or numpy arrays, which makes it
suitable for whole tracks.  :func:`distance` is the validated single-pair
form: it accepts ``(lat, lon)`` sequences, checks that both points lie in the
legal latitude/longitude domain, and rounds the result to 0.1 m.
"""

from __future__ import annotations

import math
import numbers
from typing import Sequence, Tuple, Union

import numpy as np

from ublox_nmea.errors import CoordinateRangeError
from ublox_nmea.units import EARTH_RADIUS_M, round_tenth

ArrayLike = Union[float, np.ndarray]
Point = Sequence[float]


def haversine_distance(
    lat1: ArrayLike, lon1: ArrayLike, lat2: ArrayLike, lon2: ArrayLike
) -> ArrayLike:
    """Great-circle distance in metres between two points (or arrays of points).

    Args:
        lat1, lon1: First point(s) in decimal degrees.
        lat2, lon2: Second point(s) in decimal degrees.

    Returns:
        Distance in metres, unrounded; an array when any input is an array.
    """
    lat1_rad, lon1_rad, lat2_rad, lon2_rad = (
        np.radians(np.asarray(v, dtype=float)) for v in (lat1, lon1, lat2, lon2)
    )
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = np.sin(dlat / 2.0) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2.0) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    result = EARTH_RADIUS_M * c
    return float(result) if np.ndim(result) == 0 else result


def path_length(latitudes: Sequence[float], longitudes: Sequence[float]) -> float:
    """Total length in metres of a track given as parallel coordinate arrays."""
    lat = np.asarray(latitudes, dtype=float)
    lon = np.asarray(longitudes, dtype=float)
    if lat.shape != lon.shape or lat.ndim != 1:
        raise ValueError(
            f"latitudes and longitudes must be 1-D and equal length, "
            f"got {lat.shape} and {lon.shape}."
        )
    if lat.size < 2:
        return 0.0
    return float(np.sum(haversine_distance(lat[:-1], lon[:-1], lat[1:], lon[1:])))


def as_point(point: Point, label: str = "point") -> Tuple[float, float]:
    """Validate a ``(lat, lon)`` sequence and return it as floats.

    Raises:
        TypeError: If *point* is not a tuple/list/array, or an item is not a
            real number.
        ValueError: If *point* has fewer than two items.
    """
    if not isinstance(point, (tuple, list, np.ndarray)):
        raise TypeError(f"{label} must be a tuple or list [lat, lon], got {type(point).__name__}.")
    if len(point) < 2:
        raise ValueError(f"{label} must have at least 2 elements [lat, lon].")
    lat, lon = point[0], point[1]
    for name, value in (("latitude", lat), ("longitude", lon)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{name} must be float or int, got {type(value).__name__}.")
    return float(lat), float(lon)


def check_range(lat: float, lon: float) -> None:
    """Raise :class:`CoordinateRangeError` unless *lat*/*lon* are legal."""
    if not math.isfinite(lat) or not -90.0 <= lat <= 90.0:
        raise CoordinateRangeError(f"latitude must be between -90 and 90 degrees, got {lat}.")
    if not math.isfinite(lon) or not -180.0 <= lon <= 180.0:
        raise CoordinateRangeError(f"longitude must be between -180 and 180 degrees, got {lon}.")


def distance(a: Point, b: Point) -> float:
    """Distance in metres between two ``(lat, lon)`` points, rounded to 0.1.

    Example::

        distance((0.0, 0.0), (0.0, 1.0))  # 111194.9

    Raises:
        TypeError: If a point is not a sequence of real numbers.
        ValueError: If a point has fewer than two items.
        CoordinateRangeError: If a coordinate is outside its legal range.
    """
    lat1, lon1 = as_point(a, "first point")
    lat2, lon2 = as_point(b, "second point")
    check_range(lat1, lon1)
    check_range(lat2, lon2)
    return round_tenth(haversine_distance(lat1, lon1, lat2, lon2))
