from __future__ import annotations

import math
from typing import NamedTuple

# WGS84 semi-major axis; the sphere radius used by Web Mercator (EPSG:3857).
EARTH_RADIUS_M = 6_378_137.0


class LngLat(NamedTuple):
    """Geographic coordinate in decimal degrees."""

    lng: float
    lat: float


class XY(NamedTuple):
    """Spherical Mercator coordinate in meters."""

    x: float
    y: float


def deg2rad(deg: float) -> float:
    return deg * (math.pi / 180.0)


def rad2deg(rad: float) -> float:
    return rad * (180.0 / math.pi)


def _log(value: float) -> float:
    # math.log raises on the edge of its domain; follow IEEE instead.
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log(value)


def to_mercator(ll: LngLat) -> XY:
    """Project a lng/lat pair to Spherical Mercator meters.

    The projection diverges towards the poles: lat=90 gives a huge finite y,
    lat=-90 gives -inf. Callers wanting usable values must stay inside the
    Mercator range (about +/-85.0511 degrees).
    """
    lng, lat = ll
    x = EARTH_RADIUS_M * deg2rad(lng)
    if not math.isfinite(lat):
        return XY(x, math.nan)
    y = EARTH_RADIUS_M * _log(math.tan(math.pi * 0.25 + 0.5 * deg2rad(lat)))
    return XY(x, y)
