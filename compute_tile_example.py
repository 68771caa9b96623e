#!/usr/bin/env python3
"""
Example script that resolves tiles for a point or a bounding box and prints
their bounds, either:
- For a lng/lat point at a given zoom, or
- For the smallest tile enclosing a lng/lat bbox.

Usage (point):
  python compute_tile_example.py --lng 20.6852 --lat 40.1222 --zoom 9

Usage (bbox):
  python compute_tile_example.py \
    --west -77.04615354537964 --south 38.899967510782346 \
    --east -77.03664779663086 --north 38.90728142481329
"""

import argparse

from xyztile import LngLat, LngLatBbox, bbox_to_tile, point_to_tile


def main() -> int:
    p = argparse.ArgumentParser(description="Resolve the tile for a point or bbox")
    # Point mode
    p.add_argument("--lng", type=float, help="Point longitude")
    p.add_argument("--lat", type=float, help="Point latitude")
    p.add_argument("--zoom", type=int, help="Zoom level")

    # Bbox mode
    p.add_argument("--west", type=float, help="BBOX west (min lon)")
    p.add_argument("--south", type=float, help="BBOX south (min lat)")
    p.add_argument("--east", type=float, help="BBOX east (max lon)")
    p.add_argument("--north", type=float, help="BBOX north (max lat)")

    args = p.parse_args()

    if args.lng is not None and args.lat is not None and args.zoom is not None:
        tile = point_to_tile(LngLat(args.lng, args.lat), args.zoom)
    else:
        required = [args.west, args.south, args.east, args.north]
        if any(v is None for v in required):
            p.error("Provide either --lng/--lat/--zoom OR a full bbox")
        tile = bbox_to_tile(LngLatBbox(args.west, args.south, args.east, args.north))

    west, south, east, north = tile.bounds()
    left, bottom, right, top = tile.bounds_mercator()
    print(f"Tile: {tile}")
    print(f"Bounds (deg): {west:.8f} {south:.8f} {east:.8f} {north:.8f}")
    print(f"Bounds (m):   {left:.3f} {bottom:.3f} {right:.3f} {top:.3f}")
    print(f"Parent: {tile.parent()}")
    print("Children: " + " ".join(str(c) for c in tile.children()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
