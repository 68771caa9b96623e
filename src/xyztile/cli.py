from __future__ import annotations

import argparse
import logging
import sys

from .bbox import bbox_to_tile
from .projection import LngLat, to_mercator
from .tile import LngLatBbox, Tile, point_to_fractional_tile, point_to_tile

logger = logging.getLogger(__name__)


def _tile_arg(args: argparse.Namespace) -> Tile | None:
    if args.z < 0:
        print(f"Invalid zoom: {args.z}", file=sys.stderr)
        return None
    return Tile(args.x, args.y, args.z)


def cmd_tile(args: argparse.Namespace) -> int:
    if args.zoom < 0:
        print(f"Invalid zoom: {args.zoom}", file=sys.stderr)
        return 2
    ll = LngLat(args.lng, args.lat)
    if args.fractional:
        ft = point_to_fractional_tile(ll, args.zoom)
        print(f"{ft.z} {ft.x} {ft.y}")
        return 0
    print(point_to_tile(ll, args.zoom))
    return 0


def cmd_bounds(args: argparse.Namespace) -> int:
    tile = _tile_arg(args)
    if tile is None:
        return 2
    box = tile.bounds_mercator() if args.mercator else tile.bounds()
    print(" ".join(f"{v:.10f}" for v in box))
    return 0


def cmd_parent(args: argparse.Namespace) -> int:
    tile = _tile_arg(args)
    if tile is None:
        return 2
    print(tile.parent())
    return 0


def cmd_children(args: argparse.Namespace) -> int:
    tile = _tile_arg(args)
    if tile is None:
        return 2
    for child in tile.children():
        print(child)
    return 0


def cmd_bbox(args: argparse.Namespace) -> int:
    if not (args.south < args.north and args.west < args.east):
        print("Invalid bbox: require south < north and west < east", file=sys.stderr)
        return 2
    tile = bbox_to_tile(LngLatBbox(args.west, args.south, args.east, args.north))
    print(tile)
    return 0


def cmd_mercator(args: argparse.Namespace) -> int:
    xy = to_mercator(LngLat(args.lng, args.lat))
    print(f"{xy.x:.10f} {xy.y:.10f}")
    return 0


def _add_tile_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("z", type=int)
    p.add_argument("x", type=int)
    p.add_argument("y", type=int)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xyztile", description="XYZ web-map tile math")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    pt = sub.add_parser("tile", help="Tile containing a lng/lat point")
    pt.add_argument("--lng", type=float, required=True)
    pt.add_argument("--lat", type=float, required=True)
    pt.add_argument("--zoom", type=int, required=True)
    pt.add_argument("--fractional", action="store_true", help="Print the unfloored tile coordinate")
    pt.set_defaults(func=cmd_tile)

    pb = sub.add_parser("bounds", help="Bounds of a tile (degrees, or meters with --mercator)")
    _add_tile_args(pb)
    pb.add_argument("--mercator", action="store_true")
    pb.set_defaults(func=cmd_bounds)

    pp = sub.add_parser("parent", help="Parent of a tile")
    _add_tile_args(pp)
    pp.set_defaults(func=cmd_parent)

    pc = sub.add_parser("children", help="The four children of a tile")
    _add_tile_args(pc)
    pc.set_defaults(func=cmd_children)

    px = sub.add_parser("bbox", help="Smallest tile enclosing a bounding box")
    px.add_argument("--west", type=float, required=True)
    px.add_argument("--south", type=float, required=True)
    px.add_argument("--east", type=float, required=True)
    px.add_argument("--north", type=float, required=True)
    px.set_defaults(func=cmd_bbox)

    pm = sub.add_parser("mercator", help="Project a lng/lat point to Spherical Mercator meters")
    pm.add_argument("--lng", type=float, required=True)
    pm.add_argument("--lat", type=float, required=True)
    pm.set_defaults(func=cmd_mercator)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
