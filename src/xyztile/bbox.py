from __future__ import annotations

import logging

from .projection import LngLat
from .tile import LngLatBbox, Tile, point_to_tile

logger = logging.getLogger(__name__)

# Zoom at which the bbox corners are resolved before the common-prefix scan.
BBOX_PRECISION_ZOOM = 32
MAX_BBOX_ZOOM = 28


def bbox_zoom(min_tile: Tile, max_tile: Tile) -> int:
    """Return the lowest zoom at which the two corner tiles part ways.

    Both tiles must be at BBOX_PRECISION_ZOOM. Bits are compared from the most
    significant one down; the first zoom where either x or y differs wins.
    """
    for z in range(MAX_BBOX_ZOOM):
        mask = 1 << (BBOX_PRECISION_ZOOM - (z + 1))
        if (min_tile.x & mask) != (max_tile.x & mask) or (min_tile.y & mask) != (max_tile.y & mask):
            return z
    return MAX_BBOX_ZOOM


def bbox_to_tile(bbox: LngLatBbox) -> Tile:
    """Return the smallest tile that fully contains a lng/lat bounding box."""
    west, south, east, north = bbox
    min_tile = point_to_tile(LngLat(west, south), BBOX_PRECISION_ZOOM)
    max_tile = point_to_tile(LngLat(east, north), BBOX_PRECISION_ZOOM)

    z = bbox_zoom(min_tile, max_tile)
    logger.debug("bbox %s resolves at zoom %d", tuple(bbox), z)
    if z == 0:
        return Tile(0, 0, 0)

    shift = BBOX_PRECISION_ZOOM - z
    return Tile(min_tile.x >> shift, min_tile.y >> shift, z)
