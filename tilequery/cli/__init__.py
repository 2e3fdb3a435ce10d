"""
TileQuery CLI Entry Points

Provides command-line interface for:
- select: Select the tiles covering a query box
- pyramid: Show tile pyramid geometry
"""

import argparse
import logging
import sys


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="TileQuery - Map tile selection for viewport queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tilequery select --ullon -122.241 --ullat 37.876 --lrlon -122.239 --lrlat 37.874 \\
                   --width 512 --height 512      Select tiles for a box
  tilequery pyramid                              Show the default pyramid
  tilequery pyramid ./my_pyramid.json            Show a custom pyramid
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Select command
    select_parser = subparsers.add_parser("select", help="Select tiles for a query box")
    select_parser.add_argument("--ullon", type=float, required=True, help="Upper-left longitude")
    select_parser.add_argument("--ullat", type=float, required=True, help="Upper-left latitude")
    select_parser.add_argument("--lrlon", type=float, required=True, help="Lower-right longitude")
    select_parser.add_argument("--lrlat", type=float, required=True, help="Lower-right latitude")
    select_parser.add_argument("--width", type=float, required=True, help="Viewport width (px)")
    select_parser.add_argument("--height", type=float, required=True, help="Viewport height (px)")
    select_parser.add_argument(
        "--pyramid", default=None, help="Built-in pyramid name or JSON file (default: berkeley)"
    )

    # Pyramid command
    pyramid_parser = subparsers.add_parser("pyramid", help="Show tile pyramid geometry")
    pyramid_parser.add_argument(
        "pyramid", nargs="?", default=None, help="Built-in pyramid name or JSON file"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    if args.command == "select":
        from tilequery.cli.select import run_select

        sys.exit(run_select(args))
    elif args.command == "pyramid":
        from tilequery.cli.pyramid import run_pyramid

        sys.exit(run_pyramid(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
