"""
TileQuery Core Module

Exception hierarchy shared by the grid and query modules.
"""

from tilequery.core.exceptions import (
    TileQueryError,
    InvalidQuery,
    InvalidViewport,
    InvalidBox,
    OutOfBounds,
    PyramidConfigError,
)

__all__ = [
    "TileQueryError",
    "InvalidQuery",
    "InvalidViewport",
    "InvalidBox",
    "OutOfBounds",
    "PyramidConfigError",
]
