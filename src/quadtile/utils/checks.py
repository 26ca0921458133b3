import math

from quadtile.utils.constants import MAX_ZOOM_LEVEL, MIN_ZOOM_LEVEL, QUADKEY_DIGITS
from quadtile.utils.errors import (
    InvalidQuadkeyError,
    InvalidZoomLevelError,
    UndefinedLatitudeError,
)


def check_zoom_level(zoom_level: int) -> None:
    """
    Check if the zoom level is valid.

    Parameters
    ----------
    zoom_level : int
        zoom level

    Raises
    ------
    InvalidZoomLevelError
        if the zoom level is not an integer between MIN_ZOOM_LEVEL and MAX_ZOOM_LEVEL
    """
    if zoom_level != int(zoom_level):
        raise InvalidZoomLevelError(
            f"The zoom level must be an integer, got {zoom_level}."
        )
    if zoom_level < MIN_ZOOM_LEVEL or zoom_level > MAX_ZOOM_LEVEL:
        raise InvalidZoomLevelError()


def check_latitude(latitude: float) -> None:
    """
    Check if the Mercator projection is defined at the latitude.

    The forward projection divides by ``1 - sin(lat)`` and takes the logarithm
    of ``1 + sin(lat)``, so any latitude whose sine rounds to -1 or 1 has no
    projected y.

    Parameters
    ----------
    latitude : float
        latitude in degrees

    Raises
    ------
    UndefinedLatitudeError
        if the latitude is a pole, or rounds to one
    """
    if abs(math.sin(math.radians(latitude))) >= 1.0:
        raise UndefinedLatitudeError(
            f"The Mercator projection is undefined at latitude {latitude}."
        )


def check_quadkey(key: str) -> None:
    """
    Check if every character of a quadkey is a base-4 digit.

    Parameters
    ----------
    key : str
        quadkey

    Raises
    ------
    InvalidQuadkeyError
        on the first character that is not one of 0, 1, 2 or 3
    """
    for position, char in enumerate(key):
        if char not in QUADKEY_DIGITS:
            raise InvalidQuadkeyError(
                f"Invalid quadkey digit {char!r} at position {position} in {key!r}."
            )
