"""
TileQuery Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from tilequery.grid.pyramid import BUILTIN_PYRAMIDS, TilePyramid
from tilequery.query.selector import RasterQuery


@pytest.fixture
def berkeley():
    """Reference pyramid used by the map front end"""
    return BUILTIN_PYRAMIDS["berkeley"]


@pytest.fixture
def square_pyramid():
    """8x8 degree pyramid with exact binary tile sizes (depths 0..3)"""
    return TilePyramid(
        ullon=0.0, ullat=8.0, lrlon=8.0, lrlat=0.0, max_depth=3, tile_size=256, name="square"
    )


@pytest.fixture
def reference_query():
    """Small box in central Berkeley drawn on a 305x305 viewport"""
    ullon = -122.24053369025242
    ullat = 37.87538940251607
    return RasterQuery(
        ullon=ullon, ullat=ullat, lrlon=ullon + 0.0005, lrlat=ullat - 0.0005, w=305, h=305
    )
