import math

from quadtile.tms.schemas import Point, Rect, Tile
from quadtile.utils.checks import check_latitude
from quadtile.utils.constants import BASE


def point_to_tile_fraction(point: Point, z: float) -> Tile:
    """
    Project a geographic point onto the tile grid without flooring.

    The longitude maps linearly onto x and wraps modulo the grid width, so
    longitudes outside [-180, 180) land on the tile they alias. The latitude
    goes through the spherical Mercator transform and is not wrapped.

    Parameters
    ----------
    point : Point
        geographic point in degrees
    z : float
        zoom level

    Returns
    -------
    Tile
        fractional tile coordinates, with ``z`` unchanged

    Raises
    ------
    UndefinedLatitudeError
        if the latitude is -90 or 90 degrees
    OverflowError
        if ``2**z`` does not fit in a float, which happens from zoom level 1024
    """
    check_latitude(point.lat)
    sin = math.sin(math.radians(point.lat))
    z2 = BASE**z
    x = z2 * (point.long / 360.0 + 0.5)
    y = z2 * (0.5 - 0.25 * math.log((1.0 + sin) / (1.0 - sin)) / math.pi)
    return Tile(x=x % z2, y=y, z=z)


def point_to_tile(point: Point, z: float) -> Tile:
    """
    Find the tile containing a geographic point.

    Parameters
    ----------
    point : Point
        geographic point in degrees
    z : float
        zoom level, expected to be integral

    Returns
    -------
    Tile
        discrete tile
    """
    return point_to_tile_fraction(point, z).floor()


def tile_longitude(x: float, z: float) -> float:
    """Longitude in degrees of the western edge of column ``x``."""
    return x / BASE**z * 360.0 - 180.0


def tile_latitude(y: float, z: float) -> float:
    """Latitude in degrees of the northern edge of row ``y``."""
    n = math.pi - 2.0 * math.pi * y / BASE**z
    return math.degrees(math.atan(math.sinh(n)))


def tile_to_rect(tile: Tile) -> Rect:
    """
    Compute the geographic extent of a tile.

    Parameters
    ----------
    tile : Tile
        tile coordinates

    Returns
    -------
    Rect
        bounding box with the south west corner as ``min`` and the north east
        corner as ``max``
    """
    west = tile_longitude(tile.x, tile.z)
    east = tile_longitude(tile.x + 1, tile.z)
    north = tile_latitude(tile.y, tile.z)
    south = tile_latitude(tile.y + 1, tile.z)
    return Rect(min=Point(long=west, lat=south), max=Point(long=east, lat=north))


def point_to_rect(point: Point, z: float) -> Rect:
    """Compute the geographic extent of the tile containing a point."""
    return tile_to_rect(point_to_tile(point, z))
