"""
Select CLI command

Prints the raster plan for a query box as JSON.
"""

import argparse
import json

from tilequery.core.exceptions import TileQueryError
from tilequery.grid.pyramid import get_pyramid
from tilequery.query.selector import RasterQuery, select_tiles


def run_select(args: argparse.Namespace) -> int:
    """Run the select command"""
    try:
        pyramid = get_pyramid(args.pyramid)
        query = RasterQuery(
            ullon=args.ullon,
            ullat=args.ullat,
            lrlon=args.lrlon,
            lrlat=args.lrlat,
            w=args.width,
            h=args.height,
        )
        plan = select_tiles(query, pyramid)
    except TileQueryError as e:
        print(f"Error: {e}")
        return 1

    print(json.dumps(plan.to_dict(), indent=2))
    return 0
