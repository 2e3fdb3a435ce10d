"""
Pyramid CLI command

Shows a tile pyramid's root extent and the tile geometry at every depth.
"""

import argparse

from tilequery.core.exceptions import TileQueryError
from tilequery.grid.pyramid import get_pyramid


def run_pyramid(args: argparse.Namespace) -> int:
    """Run the pyramid command"""
    try:
        pyramid = get_pyramid(args.pyramid)
    except TileQueryError as e:
        print(f"Error: {e}")
        return 1

    print(f"Pyramid: {pyramid.name or 'unnamed'}")
    print(f"  Upper-left:  ({pyramid.ullon}, {pyramid.ullat})")
    print(f"  Lower-right: ({pyramid.lrlon}, {pyramid.lrlat})")
    print(f"  Tile size:   {pyramid.tile_size}px")
    print()

    print(f"  {'Depth':>5}  {'Tiles':>9}  {'Tile width':>14}  {'Tile height':>14}  {'LonDPP':>12}")
    for depth in range(pyramid.max_depth + 1):
        n = pyramid.tiles_per_side(depth)
        print(
            f"  {depth:>5}  {f'{n}x{n}':>9}  {pyramid.tile_width(depth):>14.10f}"
            f"  {pyramid.tile_height(depth):>14.10f}  {pyramid.lon_dpp(depth):>12.4e}"
        )
    return 0
