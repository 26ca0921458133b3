import math

from quadtile.tms.geo import point_to_tile, tile_to_rect
from quadtile.tms.schemas import Point, Rect, Tile
from quadtile.utils.checks import check_quadkey


def tile_to_quadkey(tile: Tile) -> str:
    """
    Encode a tile as a quadkey.

    Each digit packs one bit of x (value 1) and one bit of y (value 2), from
    the coarsest zoom level to the finest. Fractional coordinates are floored
    first. Tile coordinates are expected to be non-negative.

    Parameters
    ----------
    tile : Tile
        tile coordinates

    Returns
    -------
    str
        quadkey of ``floor(tile.z)`` digits, empty at zoom level 0
    """
    x = math.floor(tile.x)
    y = math.floor(tile.y)
    digits = []
    for i in range(math.floor(tile.z), 0, -1):
        digit = 0
        mask = 1 << (i - 1)
        if x & mask:
            digit += 1
        if y & mask:
            digit += 2
        digits.append(str(digit))
    return "".join(digits)


def quadkey_to_tile(key: str) -> Tile:
    """
    Decode a quadkey into the tile it names.

    Parameters
    ----------
    key : str
        quadkey, its length is the zoom level

    Returns
    -------
    Tile
        discrete tile

    Raises
    ------
    InvalidQuadkeyError
        if the key contains anything but the digits 0 to 3
    """
    check_quadkey(key)
    x = 0
    y = 0
    z = len(key)
    for position, char in enumerate(key):
        mask = 1 << (z - position - 1)
        digit = int(char)
        if digit & 1:
            x |= mask
        if digit & 2:
            y |= mask
    return Tile(x=x, y=y, z=z)


def point_to_quadkey(point: Point, z: float) -> str:
    return tile_to_quadkey(point_to_tile(point, z))


def quadkey_to_rect(key: str) -> Rect:
    return tile_to_rect(quadkey_to_tile(key))
