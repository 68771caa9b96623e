"""XYZ tile addressing: point/tile conversions, tile bounds and topology."""

from __future__ import annotations

import math
from typing import List, NamedTuple

from .projection import LngLat, deg2rad, rad2deg, to_mercator

# Largest double below 1.0; keeps the tile Y formula finite at the poles.
_MAX_SIN = math.nextafter(1.0, 0.0)

# Round-off window below a tile edge, in ulps of the grid size. x is exact up
# to a couple of ulps; y can drift further near the poles, so a y snap is also
# confirmed against the edge latitude.
_X_SNAP_ULPS = 4
_Y_SNAP_ULPS = 64


def _edge_lng(x: float, n: float) -> float:
    return x / n * 360.0 - 180.0


def _edge_lat(y: float, n: float) -> float:
    return rad2deg(math.atan(math.sinh(math.pi * (1.0 - 2.0 * y / n))))


class LngLatBbox(NamedTuple):
    """Geographic bounding box in decimal degrees."""

    west: float
    south: float
    east: float
    north: float


class Bbox(NamedTuple):
    """Spherical Mercator bounding box in meters."""

    left: float
    bottom: float
    right: float
    top: float


class FractionalTile(NamedTuple):
    """Tile coordinate before flooring; x and y carry the position inside the tile."""

    x: float
    y: float
    z: int


class Tile(NamedTuple):
    """A tile in the 2**z by 2**z grid at zoom z, origin at the north-west."""

    x: int
    y: int
    z: int

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"

    def equals(self, other: Tile) -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def upper_left(self) -> LngLat:
        """Return the north-west corner of the tile."""
        n = 2.0 ** self.z
        return LngLat(_edge_lng(self.x, n), _edge_lat(self.y, n))

    def bounds(self) -> LngLatBbox:
        # The SE corner is the NW corner of the diagonal neighbour; latitude is
        # not linear in y so each corner is projected on its own.
        nw = self.upper_left()
        se = Tile(self.x + 1, self.y + 1, self.z).upper_left()
        return LngLatBbox(nw.lng, se.lat, se.lng, nw.lat)

    def bounds_mercator(self) -> Bbox:
        west, south, east, north = self.bounds()
        left, bottom = to_mercator(LngLat(west, south))
        right, top = to_mercator(LngLat(east, north))
        return Bbox(left, bottom, right, top)

    def parent(self) -> Tile:
        """Return the enclosing tile one zoom level up.

        The root tile 0/0/0 is its own parent.
        """
        if self.z == 0 and self.x == 0 and self.y == 0:
            return self
        return Tile(self.x // 2, self.y // 2, self.z - 1)

    def children(self) -> List[Tile]:
        x, y, z = self.x * 2, self.y * 2, self.z + 1
        return [
            Tile(x, y, z),
            Tile(x + 1, y, z),
            Tile(x + 1, y + 1, z),
            Tile(x, y + 1, z),
        ]


def point_to_fractional_tile(ll: LngLat, zoom: int) -> FractionalTile:
    """Return the unfloored tile coordinate of a point.

    x wraps into [0, 2**zoom) so longitudes outside [-180, 180) land on the
    matching column. y is left as computed: latitudes beyond the Mercator
    range give values outside [0, 2**zoom). Non-finite input gives NaN.
    """
    lng, lat = ll
    n = 2.0 ** zoom
    sin = math.sin(deg2rad(lat)) if math.isfinite(lat) else math.nan
    if sin > _MAX_SIN:
        sin = _MAX_SIN
    elif sin < -_MAX_SIN:
        sin = -_MAX_SIN
    x = n * (lng / 360.0 + 0.5)
    y = n * (0.5 - 0.25 * math.log((1.0 + sin) / (1.0 - sin)) / math.pi)

    if math.isfinite(x):
        x = math.fmod(x, n)
        if x < 0:
            x += n
    else:
        x = math.nan
    return FractionalTile(x, y, zoom)


def point_to_tile(ll: LngLat, zoom: int) -> Tile:
    """Return the tile containing a point.

    Coordinates within float round-off below a tile edge are snapped onto it,
    so corners from upper_left() map back to their own tile.
    """
    tile = point_to_fractional_tile(ll, zoom)
    n = 2.0 ** zoom
    ulp = math.ulp(n)

    x = math.floor(tile.x)
    if x + 1 - tile.x <= _X_SNAP_ULPS * ulp:
        x += 1
    if x >= n:
        x -= int(n)

    y = math.floor(tile.y)
    if y + 1 - tile.y <= _Y_SNAP_ULPS * ulp and ll[1] <= _edge_lat(y + 1, n):
        y += 1
    return Tile(x, y, zoom)


def tile_from_point(lng: float, lat: float, zoom: int) -> Tile:
    return point_to_tile(LngLat(lng, lat), zoom)


def upper_left(tile: Tile) -> LngLat:
    return tile.upper_left()


def bounds(tile: Tile) -> LngLatBbox:
    return tile.bounds()


def bounds_mercator(tile: Tile) -> Bbox:
    return tile.bounds_mercator()
