"""
Command-line interface for docdb-explorer.
"""

import logging
import sys

from docdb_explorer.cli_app.common import EXIT_ERROR
from docdb_explorer.cli_app.registry import build_parser, dispatch
from docdb_explorer.config import get_config
from docdb_explorer.utils.errors import ConfigurationError, handle_error
from docdb_explorer.utils.logging_config import initialize_logging, setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = get_config()
    except ConfigurationError as e:
        print(handle_error(e, "load configuration"))
        return EXIT_ERROR

    debug = args.debug or config.debug
    initialize_logging(logging.DEBUG if debug else None)
    if debug:
        # Package debug output also goes to the rotating log file
        setup_logging("docdb_explorer", level=logging.DEBUG)

    return dispatch(args)


if __name__ == "__main__":
    sys.exit(main())
