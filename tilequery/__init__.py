"""
TileQuery - Pick the pre-rendered map tiles a viewport needs

Given a query box and a viewport size, choose the tile depth and the grid of
tiles that covers the box, along with the exact bounds of that grid.

Quick Start:
    >>> import tilequery as tq
    >>>
    >>> query = tq.RasterQuery(
    ...     ullon=-122.241, ullat=37.876, lrlon=-122.239, lrlat=37.874, w=512, h=512
    ... )
    >>> plan = tq.select_tiles(query)
    >>> plan.depth, plan.shape
    >>>
    >>> # Mapping in, mapping out (HTTP handler style)
    >>> result = tq.get_map_raster({"ullon": -122.241, "ullat": 37.876,
    ...                             "lrlon": -122.239, "lrlat": 37.874,
    ...                             "w": 512, "h": 512})
"""

from tilequery.core import (
    InvalidBox,
    InvalidQuery,
    InvalidViewport,
    OutOfBounds,
    PyramidConfigError,
    TileQueryError,
)
from tilequery.grid import (
    BUILTIN_PYRAMIDS,
    DEFAULT_PYRAMID,
    TilePyramid,
    get_pyramid,
    load_pyramid,
)
from tilequery.query import (
    RasterPlan,
    RasterQuery,
    get_map_raster,
    select_depth,
    select_tiles,
)

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_PYRAMIDS",
    "DEFAULT_PYRAMID",
    "InvalidBox",
    "InvalidQuery",
    "InvalidViewport",
    "OutOfBounds",
    "PyramidConfigError",
    "RasterPlan",
    "RasterQuery",
    "TilePyramid",
    "TileQueryError",
    "__version__",
    "get_map_raster",
    "get_pyramid",
    "load_pyramid",
    "select_depth",
    "select_tiles",
]
