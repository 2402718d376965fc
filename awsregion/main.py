"""Entry point for the application"""

import sys

from awsregion.cli.commands import run_cli
from awsregion.cli.parser import create_parser, parse_args
from awsregion.logging_config import enable_debug, setup_logging


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    setup_logging(level="INFO")
    if args.debug:
        enable_debug()

    if not args.command:
        create_parser().print_help(sys.stderr)
        sys.exit(1)

    try:
        exit_code = run_cli(args)
    except KeyboardInterrupt:
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
