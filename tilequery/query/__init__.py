"""
TileQuery Query Module

Tile selection for viewport raster requests.
"""

from tilequery.query.selector import (
    RasterPlan,
    RasterQuery,
    get_map_raster,
    select_depth,
    select_tiles,
)

__all__ = [
    "RasterPlan",
    "RasterQuery",
    "get_map_raster",
    "select_depth",
    "select_tiles",
]
