import pytest

from quadtile.tms.schemas import Point, Tile

ZOOM_LEVEL = 7


# downtown San Francisco, the reference point for the conversions below
@pytest.fixture(scope="session")
def point() -> Point:
    return Point(long=-122.406921, lat=37.785232)


@pytest.fixture(scope="session")
def tile() -> Tile:
    return Tile(x=20, y=49, z=ZOOM_LEVEL)


@pytest.fixture(scope="session")
def quadkey() -> str:
    return "0230102"
