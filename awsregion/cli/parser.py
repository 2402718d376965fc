"""Command-line argument parser"""

import argparse
from typing import List, Optional

from awsregion import __version__
from awsregion.cli import commands
from awsregion.exceptions import RegionParseError
from awsregion.models.region import Region, parse_region


def region_type(value: str) -> Region:
    """argparse type for options that take a region identifier"""
    try:
        return parse_region(value)
    except RegionParseError as e:
        raise argparse.ArgumentTypeError(e.message) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands"""
    parser = argparse.ArgumentParser(
        prog="awsregion",
        description="Convert between AWS regions and their identifiers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    # Shared output options for every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=["table", "json", "csv"],
        default=None,
        help="Output format (defaults to the configured output_format)",
    )
    common.add_argument("--output", "-o", help="Write output to a file instead of stdout")
    common.add_argument("--quiet", "-q", action="store_true", help="Suppress status messages")

    subparsers = parser.add_subparsers(dest="command")

    regions_parser = subparsers.add_parser(
        "regions", parents=[common], help="List all known regions"
    )
    regions_parser.set_defaults(func=commands.cmd_regions)

    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Parse a region identifier"
    )
    parse_parser.add_argument("identifier", help="Region identifier (e.g. us-east-1)")
    parse_parser.set_defaults(func=commands.cmd_parse)

    default_parser = subparsers.add_parser(
        "default", parents=[common], help="Show the configured default region"
    )
    default_parser.add_argument(
        "--region",
        type=region_type,
        default=None,
        help="Override the configured default region",
    )
    default_parser.set_defaults(func=commands.cmd_default)

    config_parser = subparsers.add_parser(
        "config", parents=[common], help="Print a template config file"
    )
    config_parser.set_defaults(func=commands.cmd_config)

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    return create_parser().parse_args(argv)
