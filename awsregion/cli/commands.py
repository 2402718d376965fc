"""CLI command handlers"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Type

from pydantic import ValidationError

from awsregion.cli.output import get_formatter
from awsregion.config.settings import OutputSettings, Settings, create_default_config
from awsregion.exceptions import ConfigurationError, RegionParseError
from awsregion.models.region import Region, parse_region

logger = logging.getLogger("awsregion")


def status(message: str, quiet: bool = False) -> None:
    """Print status message to stderr unless quiet mode is on."""
    if not quiet:
        print(message, file=sys.stderr)


def print_error(message: str, debug: bool = False, exception: Exception = None) -> None:
    """Print error message to stderr with consistent formatting.

    Args:
        message: Error message to display
        debug: Whether to print full traceback
        exception: Optional exception for traceback
    """
    print(f"Error: {message}", file=sys.stderr)
    if debug and exception:
        import traceback
        traceback.print_exception(exception)


def write_output(output: str, output_path: Optional[str], quiet: bool = False) -> None:
    """Write output to file or stdout.

    Raises:
        OSError: If the file cannot be written
    """
    if output_path:
        Path(output_path).write_text(output if output.endswith("\n") else output + "\n")
        status(f"Output written to {output_path}", quiet)
    else:
        print(output)


def load_settings(settings_cls: Type[OutputSettings] = Settings) -> OutputSettings:
    """Load settings, turning validation failures into ConfigurationError"""
    try:
        return settings_cls()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def region_info(region: Region) -> Dict[str, str]:
    """Describe a region as a flat dict for the formatters"""
    return {
        "member": region.name,
        "code": region.identifier,
        "name": region.location_name,
    }


def _resolve_format(args, settings: Optional[OutputSettings] = None) -> str:
    if getattr(args, "format", None):
        return args.format
    if settings is None:
        # Output fields only; default_region is not validated here
        settings = load_settings(OutputSettings)
    return settings.output_format


def cmd_regions(args) -> int:
    """List available regions command"""
    try:
        formatter = get_formatter(_resolve_format(args))
        regions = sorted(
            (region_info(region) for region in Region),
            key=lambda r: r["code"],
        )
        logger.debug(f"Listing {len(regions)} regions")
        write_output(formatter.format_regions(regions), args.output, args.quiet)
        return 0
    except (ConfigurationError, ValueError, OSError) as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_parse(args) -> int:
    """Parse a region identifier command"""
    try:
        region = parse_region(args.identifier)
    except RegionParseError as e:
        print_error(e.message, debug=args.debug, exception=e)
        return 1

    try:
        formatter = get_formatter(_resolve_format(args))
        write_output(formatter.format_region(region_info(region)), args.output, args.quiet)
        return 0
    except (ConfigurationError, ValueError, OSError) as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_default(args) -> int:
    """Show the configured default region command"""
    try:
        if args.region is not None:
            region = args.region
            fmt = _resolve_format(args)
        else:
            settings = load_settings()
            region = settings.default_region
            fmt = _resolve_format(args, settings)
        logger.debug(f"Default region resolved to {region}")
        formatter = get_formatter(fmt)
        write_output(formatter.format_region(region_info(region)), args.output, args.quiet)
        return 0
    except (ConfigurationError, ValueError, OSError) as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def cmd_config(args) -> int:
    """Print template config file command"""
    try:
        write_output(create_default_config(), args.output, args.quiet)
        return 0
    except OSError as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1


def run_cli(args) -> int:
    """Run CLI command based on args"""
    if hasattr(args, 'func'):
        return args.func(args)
    else:
        print("Error: No command specified", file=sys.stderr)
        return 1
