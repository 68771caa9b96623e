import math

import pytest

import xyztile
from xyztile import LngLat, Tile


def assert_close(a, b, tol=1e-8):
    assert math.isclose(a, b, rel_tol=0, abs_tol=tol), f"{a} != {b}"


SAMPLE_TILES = [
    Tile(0, 0, 0),
    Tile(1, 0, 1),
    Tile(0, 1, 1),
    Tile(3, 2, 2),
    Tile(486, 332, 10),
    Tile(285, 193, 9),
    Tile(9371, 12534, 15),
    Tile(1000, 2000, 12),
    Tile(123456, 234567, 19),
    Tile(2097151, 1048576, 22),
    Tile(4194303, 4194303, 22),
]


def test_upper_left():
    ll = Tile(486, 332, 10).upper_left()
    assert_close(ll.lng, -9.140625)
    assert_close(ll.lat, 53.33087298301705)


def test_bounds():
    box = Tile(486, 332, 10).bounds()
    assert_close(box.west, -9.140625)
    assert_close(box.south, 53.120405283106564)
    assert_close(box.east, -8.7890625)
    assert_close(box.north, 53.33087298301705)


def test_module_level_helpers_match_methods():
    tile = Tile(486, 332, 10)
    assert xyztile.upper_left(tile) == tile.upper_left()
    assert xyztile.bounds(tile) == tile.bounds()
    assert xyztile.bounds_mercator(tile) == tile.bounds_mercator()


def test_bounds_mercator_truncated():
    box = Tile(0, 0, 2).bounds_mercator()
    assert [int(v) for v in box] == [-20037508, 10018754, -10018754, 20037508]


def test_root_bounds_cover_world():
    box = Tile(0, 0, 0).bounds()
    assert_close(box.west, -180.0)
    assert_close(box.east, 180.0)
    assert_close(box.north, 85.0511287798066)
    assert_close(box.south, -85.0511287798066)


@pytest.mark.parametrize("tile", SAMPLE_TILES)
def test_bounds_ordering(tile):
    west, south, east, north = tile.bounds()
    assert west < east
    assert south < north


@pytest.mark.parametrize("tile", SAMPLE_TILES)
def test_upper_left_maps_back_to_tile(tile):
    assert xyztile.point_to_tile(tile.upper_left(), tile.z) == tile


def test_parent():
    assert Tile(486, 332, 10).parent() == Tile(243, 166, 9)


@pytest.mark.parametrize("tile", [Tile(1, 1, 1), Tile(2, 3, 2), Tile(3, 2, 2), Tile(487, 333, 10)])
def test_parent_all_parities(tile):
    parent = tile.parent()
    assert parent == Tile(tile.x // 2, tile.y // 2, tile.z - 1)


def test_root_is_own_parent():
    root = Tile(0, 0, 0)
    assert root.parent() == root
    assert root.parent().equals(root)


def test_children():
    children = Tile(246, 166, 9).children()
    assert len(children) == 4
    assert any(child.equals(Tile(492, 332, 10)) for child in children)
    assert children == [Tile(492, 332, 10), Tile(493, 332, 10), Tile(493, 333, 10), Tile(492, 333, 10)]


@pytest.mark.parametrize("tile", [t for t in SAMPLE_TILES if t.z > 0])
def test_tile_is_child_of_its_parent(tile):
    assert tile in tile.parent().children()


def test_equals():
    assert Tile(1, 2, 3).equals(Tile(1, 2, 3))
    assert not Tile(1, 2, 3).equals(Tile(1, 2, 4))
    assert not Tile(1, 2, 3).equals(Tile(2, 1, 3))


def test_str_is_zxy_path():
    assert str(Tile(486, 332, 10)) == "10/486/332"


def test_point_to_tile():
    assert xyztile.point_to_tile(LngLat(20.6852, 40.1222), 9) == Tile(285, 193, 9)
    assert xyztile.point_to_tile(LngLat(-95.93965530395508, 41.26000108568697), 9) == Tile(119, 191, 9)


def test_tile_from_point():
    assert xyztile.tile_from_point(20.6852, 40.1222, 9) == Tile(285, 193, 9)


def test_point_to_fractional_tile():
    ft = xyztile.point_to_fractional_tile(LngLat(-95.93965530395508, 41.26000108568697), 9)
    assert_close(ft.x, 119.552490234375)
    assert_close(ft.y, 191.47119140625)
    assert ft.z == 9


@pytest.mark.parametrize("lng", [-179.5, -95.0, 0.0, 12.25, 170.0])
@pytest.mark.parametrize("zoom", [0, 3, 12])
def test_longitude_wraps(lng, zoom):
    a = xyztile.point_to_fractional_tile(LngLat(lng, 30.0), zoom)
    b = xyztile.point_to_fractional_tile(LngLat(lng + 360.0, 30.0), zoom)
    assert_close(a.x, b.x, 1e-6)
    assert 0 <= b.x < 2 ** zoom


def test_longitude_past_antimeridian_lands_on_matching_column():
    assert xyztile.point_to_tile(LngLat(190.0, 0.0), 2).x == xyztile.point_to_tile(LngLat(-170.0, 0.0), 2).x


def test_polar_latitudes_are_out_of_range_but_finite():
    north = xyztile.point_to_tile(LngLat(0.0, 90.0), 4)
    south = xyztile.point_to_tile(LngLat(0.0, -90.0), 4)
    assert north.y < 0
    assert south.y >= 2 ** 4


def test_point_just_inside_column_edge_at_high_zoom():
    n = 2 ** 22
    lng = (1235 - 1e-6) / n * 360.0 - 180.0
    assert xyztile.point_to_tile(LngLat(lng, 0.0), 22).x == 1234


def test_point_just_inside_row_edge_at_high_zoom():
    n = 2 ** 22
    lat = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * (1235 - 1e-6) / n))))
    assert xyztile.point_to_tile(LngLat(0.0, lat), 22).y == 1234


def test_point_to_tile_at_zoom_40_matches_floor():
    ll = LngLat(10.123456, 20.654321)
    ft = xyztile.point_to_fractional_tile(ll, 40)
    tile = xyztile.point_to_tile(ll, 40)
    assert tile.x == math.floor(ft.x) == 580674862735
    assert tile.y == math.floor(ft.y)


def test_longitude_a_hair_below_antimeridian_folds_to_column_zero():
    lng = 180.0 - 1e-13
    assert xyztile.point_to_fractional_tile(LngLat(lng, 0.0), 3).x < 8
    assert xyztile.point_to_tile(LngLat(lng, 0.0), 3).x == 0
    assert xyztile.point_to_tile(LngLat(lng + 360.0, 0.0), 3).x == 0


def test_non_finite_input_gives_nan():
    assert math.isnan(xyztile.point_to_fractional_tile(LngLat(math.inf, 0.0), 3).x)
    assert math.isnan(xyztile.point_to_fractional_tile(LngLat(0.0, math.nan), 3).y)
    assert math.isnan(xyztile.point_to_fractional_tile(LngLat(0.0, math.inf), 3).y)
