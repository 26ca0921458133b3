from itertools import product

import pytest
from conftest import ZOOM_LEVEL

from quadtile.tms.geo import point_to_tile, tile_to_rect
from quadtile.tms.quadkey import (
    point_to_quadkey,
    quadkey_to_rect,
    quadkey_to_tile,
    tile_to_quadkey,
)
from quadtile.tms.schemas import Point, Tile
from quadtile.utils.errors import InvalidQuadkeyError


def test_tile_to_quadkey(tile: Tile, quadkey: str):
    assert tile_to_quadkey(tile) == quadkey


def test_quadkey_to_tile(tile: Tile, quadkey: str):
    assert quadkey_to_tile(quadkey) == tile


def test_point_to_quadkey(point: Point, quadkey: str):
    assert point_to_quadkey(point, ZOOM_LEVEL) == quadkey


def test_quadkey_to_rect(tile: Tile, quadkey: str):
    assert quadkey_to_rect(quadkey) == tile_to_rect(tile)


def test_zoom_level_0_is_empty_quadkey():
    assert tile_to_quadkey(Tile(x=0, y=0, z=0)) == ""
    assert quadkey_to_tile("") == Tile(x=0, y=0, z=0)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("0", Tile(x=0, y=0, z=1)),
        ("1", Tile(x=1, y=0, z=1)),
        ("2", Tile(x=0, y=1, z=1)),
        ("3", Tile(x=1, y=1, z=1)),
        ("13", Tile(x=3, y=1, z=2)),
        ("0000", Tile(x=0, y=0, z=4)),
        ("3333", Tile(x=15, y=15, z=4)),
    ],
)
def test_quadkey_digits(key: str, expected: Tile):
    assert quadkey_to_tile(key) == expected
    assert tile_to_quadkey(expected) == key


def test_first_digit_is_coarsest_level():
    # the zoom 1 parent of a tile is the prefix of its quadkey
    key = tile_to_quadkey(Tile(x=5, y=2, z=3))
    parent = tile_to_quadkey(Tile(x=5 >> 2, y=2 >> 2, z=1))
    assert key.startswith(parent)


def test_fractional_tile_is_floored(quadkey: str):
    assert tile_to_quadkey(Tile(x=20.9, y=49.2, z=7.0)) == quadkey


@pytest.mark.parametrize("z", [1, 2, 3, 4])
def test_tile_quadkey_round_trip(z: int):
    size = 2**z
    for x, y in product(range(size), range(size)):
        tile = Tile(x=x, y=y, z=z)
        key = tile_to_quadkey(tile)
        assert len(key) == z
        assert quadkey_to_tile(key) == tile


@pytest.mark.parametrize(
    "point",
    [
        Point(long=-122.406921, lat=37.785232),
        Point(long=-0.127758, lat=51.507351),
        Point(long=18.423300, lat=-33.918861),
    ],
)
@pytest.mark.parametrize("z", [0, 1, 9, 16])
def test_point_to_quadkey_matches_tile_encoding(point: Point, z: int):
    assert point_to_quadkey(point, z) == tile_to_quadkey(point_to_tile(point, z))


@pytest.mark.parametrize("key", ["0234", "01a", " 01", "0-1", "٣"])
def test_invalid_quadkey_raises(key: str):
    with pytest.raises(InvalidQuadkeyError, match="Invalid quadkey digit"):
        quadkey_to_tile(key)
    with pytest.raises(InvalidQuadkeyError):
        quadkey_to_rect(key)


def test_invalid_quadkey_names_position():
    with pytest.raises(InvalidQuadkeyError, match="at position 2"):
        quadkey_to_tile("019")


def test_decoded_tile_holds_integers(quadkey: str):
    tile = quadkey_to_tile(quadkey)
    assert all(isinstance(value, int) for value in (tile.x, tile.y, tile.z))
