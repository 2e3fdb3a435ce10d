"""
TileQuery Grid Module

Tile pyramid geometry and configuration.
"""

from tilequery.grid.pyramid import (
    BUILTIN_PYRAMIDS,
    DEFAULT_PYRAMID,
    TilePyramid,
    get_pyramid,
    load_pyramid,
)

__all__ = [
    "BUILTIN_PYRAMIDS",
    "DEFAULT_PYRAMID",
    "TilePyramid",
    "get_pyramid",
    "load_pyramid",
]
