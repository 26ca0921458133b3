from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike
from tqdm import tqdm

from quadtile.tms.quadkey import tile_to_quadkey
from quadtile.tms.schemas import Tile
from quadtile.utils.checks import check_zoom_level
from quadtile.utils.constants import BASE
from quadtile.utils.errors import UndefinedLatitudeError
from quadtile.utils.io import JsonParser, YamlParser


def points_to_tiles_fraction(
    longs: ArrayLike, lats: ArrayLike, z: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project arrays of geographic points onto the tile grid without flooring.

    Vectorized counterpart of ``quadtile.tms.geo.point_to_tile_fraction``.

    Parameters
    ----------
    longs : ArrayLike
        longitudes in degrees
    lats : ArrayLike
        latitudes in degrees, same shape as ``longs``
    z : float
        zoom level

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        fractional x, y tile coordinates

    Raises
    ------
    UndefinedLatitudeError
        if any latitude is -90 or 90 degrees
    """
    longs = np.asarray(longs, dtype=np.float64)
    lats = np.asarray(lats, dtype=np.float64)
    sin = np.sin(np.radians(lats))
    poles = np.abs(sin) >= 1.0
    if np.any(poles):
        raise UndefinedLatitudeError(
            f"The Mercator projection is undefined at latitudes {lats[poles].tolist()}."
        )
    z2 = BASE**z
    x = z2 * (longs / 360.0 + 0.5)
    y = z2 * (0.5 - 0.25 * np.log((1.0 + sin) / (1.0 - sin)) / np.pi)
    return np.mod(x, z2), y


def points_to_tiles(
    longs: ArrayLike, lats: ArrayLike, z: float
) -> Tuple[np.ndarray, np.ndarray]:
    """Integer x, y indices of the tiles containing each point.

    Coordinates must be finite.
    """
    x, y = points_to_tiles_fraction(longs, lats, z)
    return np.floor(x).astype(np.int64), np.floor(y).astype(np.int64)


def tiles_to_bounds(
    xs: ArrayLike, ys: ArrayLike, z: float
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute the geographic extent of arrays of tiles.

    Parameters
    ----------
    xs : ArrayLike
        x tile coordinates
    ys : ArrayLike
        y tile coordinates
    z : float
        zoom level

    Returns
    -------
    Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]
        west, south, east, north edges in degrees
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    z2 = BASE**z

    def longitude(x: np.ndarray) -> np.ndarray:
        return x / z2 * 360.0 - 180.0

    def latitude(y: np.ndarray) -> np.ndarray:
        n = np.pi - 2.0 * np.pi * y / z2
        return np.degrees(np.arctan(np.sinh(n)))

    return longitude(xs), latitude(ys + 1), longitude(xs + 1), latitude(ys)


def tiles_to_quadkeys(
    xs: ArrayLike, ys: ArrayLike, z: int, show_progress: bool = False
) -> List[str]:
    """Quadkeys of the tiles ``(xs[i], ys[i], z)``."""
    return [
        tile_to_quadkey(Tile(x=int(x), y=int(y), z=z))
        for x, y in tqdm(
            zip(xs, ys), desc="Encoding", total=len(xs), disable=not show_progress
        )
    ]


@dataclass
class BatchConfig:
    """Configuration of a batch conversion.

    Parameters
    ----------
    zoom_level : int
        zoom level of the computed tiles
    long_column : str, optional
        name of the longitude column, by default "long"
    lat_column : str, optional
        name of the latitude column, by default "lat"
    with_rect : bool, optional
        add the west, south, east and north edges of each tile, by default False
    show_progress : bool, optional
        show a progress bar while encoding quadkeys, by default True
    """

    zoom_level: int
    long_column: str = "long"
    lat_column: str = "lat"
    with_rect: bool = False
    show_progress: bool = True

    def __post_init__(self) -> None:
        check_zoom_level(self.zoom_level)

    @staticmethod
    def from_yaml(yaml_file: Union[str, Path]) -> BatchConfig:
        return BatchConfig(**YamlParser.load(yaml_file))

    @staticmethod
    def from_json(json_file: Union[str, Path]) -> BatchConfig:
        return BatchConfig(**JsonParser.load(json_file))


class BatchConverter:
    """Class for converting tables of geographic points into tiles and quadkeys

    Parameters
    ----------
    config : BatchConfig
        conversion settings
    logger : logging.Logger
        Logger object
    """

    TILE_COLUMNS = ["tile_x", "tile_y", "quadkey"]
    RECT_COLUMNS = ["west", "south", "east", "north"]

    def __init__(self, config: BatchConfig, logger: logging.Logger) -> None:
        self.config = config
        self.logger = logger

    @property
    def output_columns(self) -> List[str]:
        """Columns added to the converted table"""
        if self.config.with_rect:
            return self.TILE_COLUMNS + self.RECT_COLUMNS
        return list(self.TILE_COLUMNS)

    def convert(self, points: pd.DataFrame) -> pd.DataFrame:
        """
        Add the tile columns to a table of points.

        Parameters
        ----------
        points : pd.DataFrame
            table with longitude and latitude columns

        Returns
        -------
        pd.DataFrame
            copy of the table, without rows missing a coordinate, with the
            ``output_columns`` added

        Raises
        ------
        ValueError
            if a coordinate column is missing
        UndefinedLatitudeError
            if a latitude is -90 or 90 degrees
        """
        coordinate_columns = [self.config.long_column, self.config.lat_column]
        missing = [col for col in coordinate_columns if col not in points.columns]
        if missing:
            raise ValueError(f"Missing coordinate columns {missing}")

        is_complete = points[coordinate_columns].notna().all(axis=1)
        num_dropped = int((~is_complete).sum())
        if num_dropped > 0:
            self.logger.warning(
                f"Dropping {num_dropped} rows with missing coordinates"
            )
        df = points[is_complete].copy()

        zoom_level = self.config.zoom_level
        self.logger.info(f"Converting {len(df)} points at zoom level {zoom_level}")
        xs, ys = points_to_tiles(
            df[self.config.long_column].to_numpy(),
            df[self.config.lat_column].to_numpy(),
            zoom_level,
        )
        df["tile_x"] = xs
        df["tile_y"] = ys
        df["quadkey"] = tiles_to_quadkeys(
            xs, ys, zoom_level, show_progress=self.config.show_progress
        )
        if self.config.with_rect:
            west, south, east, north = tiles_to_bounds(xs, ys, zoom_level)
            df["west"] = west
            df["south"] = south
            df["east"] = east
            df["north"] = north

        self.logger.info("Points converted successfully")
        return df

    def convert_csv(self, csv_file: Union[str, Path]) -> pd.DataFrame:
        """Read a CSV file of points and convert it."""
        csv_file = csv_file if isinstance(csv_file, Path) else Path(csv_file)
        if not csv_file.exists():
            raise FileNotFoundError(f"Points file not found at {csv_file}")
        self.logger.info(f"Loading points from {csv_file}")
        return self.convert(pd.read_csv(csv_file))
