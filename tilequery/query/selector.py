"""
Tile Selector

Chooses the zoom depth and the rectangular grid of tiles that cover a query
box at a resolution at least as fine as the requesting viewport needs.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

import numpy as np
from numpy.typing import NDArray

from tilequery.core.exceptions import (
    InvalidBox,
    InvalidQuery,
    InvalidViewport,
    OutOfBounds,
    TileQueryError,
)
from tilequery.grid.pyramid import DEFAULT_PYRAMID, TilePyramid

logger = logging.getLogger(__name__)

QUERY_FIELDS = ("ullon", "ullat", "lrlon", "lrlat", "w", "h")


@dataclass(frozen=True)
class RasterQuery:
    """
    Viewport request: a bounding box and the pixel size it is drawn at

    Attributes:
        ullon: Upper-left longitude
        ullat: Upper-left latitude
        lrlon: Lower-right longitude
        lrlat: Lower-right latitude
        w: Viewport width in pixels
        h: Viewport height in pixels
    """

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    w: float
    h: float

    @property
    def lon_dpp(self) -> float:
        """Longitudinal distance per pixel requested by the viewport"""
        return (self.lrlon - self.ullon) / self.w

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "RasterQuery":
        """
        Build a query from request parameters

        Args:
            params: Mapping holding ullon, ullat, lrlon, lrlat, w and h.
                    Values may be numbers or numeric strings.

        Raises:
            InvalidQuery: If a field is missing or not numeric
        """
        missing = [k for k in QUERY_FIELDS if k not in params]
        if missing:
            raise InvalidQuery(f"Missing query parameters: {', '.join(missing)}")

        values = {}
        for key in QUERY_FIELDS:
            try:
                values[key] = float(params[key])
            except (TypeError, ValueError) as e:
                raise InvalidQuery(f"Query parameter '{key}' is not a number: {params[key]!r}") from e
        return cls(**values)

    def validate(self) -> None:
        """
        Check the query describes a drawable box

        Raises:
            InvalidViewport: If w or h is not a positive finite number, or the
                distance per pixel they give is not
            InvalidBox: If a coordinate or the box width is non-finite, or the
                box is inverted/empty
        """
        for name, value in (("w", self.w), ("h", self.h)):
            if not math.isfinite(value) or value <= 0:
                raise InvalidViewport(f"Viewport {name} must be positive and finite, got {value}")

        coords = (self.ullon, self.ullat, self.lrlon, self.lrlat)
        if not all(math.isfinite(c) for c in coords):
            raise InvalidBox(f"Query box coordinates must be finite, got {coords}")
        if not self.ullon < self.lrlon:
            raise InvalidBox(f"ullon ({self.ullon}) must be west of lrlon ({self.lrlon})")
        if not self.ullat > self.lrlat:
            raise InvalidBox(f"ullat ({self.ullat}) must be north of lrlat ({self.lrlat})")
        if not math.isfinite(self.lrlon - self.ullon):
            raise InvalidBox(f"Query box width overflows: {self.ullon} to {self.lrlon}")

        lon_dpp = self.lon_dpp
        if not math.isfinite(lon_dpp) or lon_dpp <= 0:
            raise InvalidViewport(
                f"Viewport width {self.w} gives unusable distance per pixel {lon_dpp}"
            )


@dataclass(frozen=True)
class RasterPlan:
    """
    Tiles selected for a query and the area they cover together

    render_grid rows are latitude bands (north to south), columns are
    longitude bands (west to east).
    """

    render_grid: Tuple[Tuple[str, ...], ...]
    raster_ul_lon: float
    raster_ul_lat: float
    raster_lr_lon: float
    raster_lr_lat: float
    depth: int
    query_success: bool = True

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns) of the tile grid"""
        rows = len(self.render_grid)
        return (rows, len(self.render_grid[0]) if rows else 0)

    @classmethod
    def failed(cls) -> "RasterPlan":
        """Empty plan reported for a query that could not be served"""
        return cls(
            render_grid=(),
            raster_ul_lon=0.0,
            raster_ul_lat=0.0,
            raster_lr_lon=0.0,
            raster_lr_lat=0.0,
            depth=0,
            query_success=False,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "render_grid": [list(row) for row in self.render_grid],
            "raster_ul_lon": self.raster_ul_lon,
            "raster_ul_lat": self.raster_ul_lat,
            "raster_lr_lon": self.raster_lr_lon,
            "raster_lr_lat": self.raster_lr_lat,
            "depth": self.depth,
            "query_success": self.query_success,
        }

    def to_numpy(self) -> NDArray:
        """Tile ids as a 2-D string array shaped like the grid"""
        if not self.render_grid:
            return np.empty((0, 0), dtype=str)
        return np.array(self.render_grid, dtype=str)


def select_depth(lon_dpp: float, pyramid: TilePyramid = DEFAULT_PYRAMID) -> int:
    """
    Pick the coarsest depth whose tiles are at least as detailed as lon_dpp

    Args:
        lon_dpp: Requested longitudinal distance per pixel
        pyramid: Tile pyramid to choose from

    Returns:
        Depth in 0..pyramid.max_depth

    Raises:
        InvalidQuery: If lon_dpp is not a positive finite number
    """
    if not math.isfinite(lon_dpp) or lon_dpp <= 0:
        raise InvalidQuery(f"Distance per pixel must be positive and finite, got {lon_dpp}")

    ratio = pyramid.lon_dpp(0) / lon_dpp
    d = math.log2(ratio) if ratio > 0 else -math.inf
    if d > pyramid.max_depth:
        return pyramid.max_depth
    if d < 0:
        return 0
    return int(math.ceil(d))


def _index_range(lo: float, hi: float, size: float, tiles: int) -> Tuple[int, int]:
    """Half-open tile index range covering [lo, hi], clipped to the pyramid"""
    start = int(math.floor(lo / size))
    stop = int(math.ceil(hi / size))
    start = min(max(start, 0), tiles - 1)
    stop = max(min(stop, tiles), start + 1)
    return start, stop


def select_tiles(query: RasterQuery, pyramid: TilePyramid = DEFAULT_PYRAMID) -> RasterPlan:
    """
    Select the tiles needed to draw a query box

    Args:
        query: Bounding box and viewport size
        pyramid: Tile pyramid to draw from

    Returns:
        RasterPlan with the tile grid, its depth and its geographic bounds

    Raises:
        InvalidViewport: Non-positive or non-finite viewport size
        InvalidBox: Non-finite, inverted or empty query box
        OutOfBounds: Query box does not overlap the pyramid's root extent

    Examples:
        >>> query = RasterQuery(
        ...     ullon=-122.2998046875, ullat=37.892195547244356,
        ...     lrlon=-122.2119140625, lrlat=37.82280243352756,
        ...     w=256, h=256,
        ... )
        >>> select_tiles(query).render_grid
        (('d0_x0_y0.png',),)
    """
    logger.debug("Raster query: %s", query)
    query.validate()

    if (
        query.lrlon <= pyramid.ullon
        or query.ullon >= pyramid.lrlon
        or query.lrlat >= pyramid.ullat
        or query.ullat <= pyramid.lrlat
    ):
        raise OutOfBounds(
            f"Query box ({query.ullon}, {query.ullat}) - ({query.lrlon}, {query.lrlat}) "
            f"does not overlap pyramid '{pyramid.name}'"
        )

    depth = select_depth(query.lon_dpp, pyramid)
    tiles = pyramid.tiles_per_side(depth)
    tile_w = pyramid.tile_width(depth)
    tile_h = pyramid.tile_height(depth)

    # Partially outside boxes are clipped to tiles that exist
    west = min(max(query.ullon, pyramid.ullon), pyramid.lrlon)
    east = min(max(query.lrlon, pyramid.ullon), pyramid.lrlon)
    north = min(max(query.ullat, pyramid.lrlat), pyramid.ullat)
    south = min(max(query.lrlat, pyramid.lrlat), pyramid.ullat)
    x1, x2 = _index_range(west - pyramid.ullon, east - pyramid.ullon, tile_w, tiles)
    y1, y2 = _index_range(pyramid.ullat - north, pyramid.ullat - south, tile_h, tiles)

    render_grid = tuple(
        tuple(pyramid.tile_id(depth, x, y) for x in range(x1, x2)) for y in range(y1, y2)
    )

    plan = RasterPlan(
        render_grid=render_grid,
        raster_ul_lon=pyramid.ullon + x1 * tile_w,
        raster_ul_lat=pyramid.ullat - y1 * tile_h,
        raster_lr_lon=pyramid.ullon + x2 * tile_w,
        raster_lr_lat=pyramid.ullat - y2 * tile_h,
        depth=depth,
    )
    logger.debug("Selected depth %d, grid %dx%d", depth, y2 - y1, x2 - x1)
    return plan


def get_map_raster(
    params: Mapping[str, Any], pyramid: TilePyramid = DEFAULT_PYRAMID
) -> dict[str, Any]:
    """
    Serve a raster request given as named parameters

    Failures are reported in-band with query_success=False and a zeroed
    payload, which is what the front end expects.

    Args:
        params: Mapping with ullon, ullat, lrlon, lrlat, w, h
        pyramid: Tile pyramid to draw from

    Returns:
        Dictionary with render_grid, raster_ul_lon, raster_ul_lat,
        raster_lr_lon, raster_lr_lat, depth and query_success
    """
    try:
        plan = select_tiles(RasterQuery.from_params(params), pyramid)
    except TileQueryError as e:
        logger.warning("Raster query failed: %s", e)
        plan = RasterPlan.failed()
    return plan.to_dict()
