from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point:
    """A geographic coordinate in degrees (EPSG:4326)."""

    long: float
    lat: float


@dataclass(frozen=True)
class Tile:
    """Class to represent a cell of the Web Mercator tile grid.

    At zoom level ``z`` the grid has ``2**z`` tiles per axis. Tiles produced by
    a projection may be fractional; a discrete tile has integral ``x`` and ``y``
    and identifies a single cell.

    Parameters
    ----------
    x : int | float
        horizontal grid coordinate, growing eastwards
    y : int | float
        vertical grid coordinate, growing southwards
    z : int | float
        zoom level
    """

    x: Union[int, float]
    y: Union[int, float]
    z: Union[int, float]

    def floor(self) -> Tile:
        """Return the discrete tile containing this (possibly fractional) tile."""
        return Tile(x=math.floor(self.x), y=math.floor(self.y), z=self.z)


@dataclass(frozen=True)
class Rect:
    """Class to represent a geographic bounding box.

    Parameters
    ----------
    min : Point
        south west corner
    max : Point
        north east corner

    Properties
    ----------
    west, south, east, north : float
        edges of the box in degrees
    """

    min: Point
    max: Point

    @property
    def west(self) -> float:
        return self.min.long

    @property
    def south(self) -> float:
        return self.min.lat

    @property
    def east(self) -> float:
        return self.max.long

    @property
    def north(self) -> float:
        return self.max.lat

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the box, edges included."""
        return (
            self.west <= point.long <= self.east
            and self.south <= point.lat <= self.north
        )
