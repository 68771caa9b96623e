"""xyztile: XYZ web-map tile math.

Modules:
- projection: degree/radian helpers and Spherical Mercator projection.
- tile: point/tile conversions, tile bounds and parent/children topology.
- bbox: smallest enclosing tile for a lng/lat bounding box.
- cli: command line front-end.
"""

from .bbox import BBOX_PRECISION_ZOOM, MAX_BBOX_ZOOM, bbox_to_tile, bbox_zoom
from .projection import EARTH_RADIUS_M, XY, LngLat, deg2rad, rad2deg, to_mercator
from .tile import (
    Bbox,
    FractionalTile,
    LngLatBbox,
    Tile,
    bounds,
    bounds_mercator,
    point_to_fractional_tile,
    point_to_tile,
    tile_from_point,
    upper_left,
)

__all__ = [
    "EARTH_RADIUS_M",
    "BBOX_PRECISION_ZOOM",
    "MAX_BBOX_ZOOM",
    "LngLat",
    "XY",
    "LngLatBbox",
    "Bbox",
    "Tile",
    "FractionalTile",
    "deg2rad",
    "rad2deg",
    "to_mercator",
    "point_to_tile",
    "point_to_fractional_tile",
    "tile_from_point",
    "upper_left",
    "bounds",
    "bounds_mercator",
    "bbox_to_tile",
    "bbox_zoom",
]
