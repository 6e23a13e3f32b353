# -*- coding:utf-8 -*-

#  ************************** Copyrights and license ***************************
#
# This file is part of unusedjs 1.1+main, a tool to measure unused JavaScript.
#
# _____________________________________________________________________________
#
# Copyright (c) 2024-2026 the unusedjs authors
#
# This software is distributed under the 3-clause BSD License.
# For more information, see the README.rst file.
#
# ****************************************************************************

import asyncio
import logging
import sys

from argparse import ArgumentError, ArgumentParser
from typing import Optional
import traceback

from .configuration import argument_parser_setup, load_config, merge_options
from .exceptions import UnusedJsError
from .logging import configure_logging, update_logging
from .summary import compute_all
from .version import __version__

# formats
from . import formats as unusedjs_formats

LOGGER = logging.getLogger("unusedjs")


EXIT_SUCCESS = 0
EXIT_CMDLINE_ERROR = 1
EXIT_DATA_ERROR = 32
EXIT_READ_ERROR = 64
EXIT_WRITE_ERROR = 128


def create_argument_parser() -> ArgumentParser:
    """Create the argument parser."""

    parser = ArgumentParser(add_help=False, exit_on_error=False)
    parser.usage = "unusedjs [options] [coverage_files...]"
    parser.description = (
        "A utility to report the unused bytes of JavaScript resources "
        "from DevTools coverage data."
    )

    options = parser.add_argument_group("Options")
    options.add_argument(
        "-h", "--help", help="Show this help message, then exit.", action="help"
    )
    options.add_argument(
        "--version",
        help="Print the version number, then exit.",
        action="store_true",
        dest="version",
        default=False,
    )

    argument_parser_setup(parser, options)

    return parser


COPYRIGHT = "Copyright (c) 2024-2026 the unusedjs authors\n"


def main(args: Optional[list[str]] = None) -> int:  # pylint: disable=too-many-return-statements
    """The main entry point of unusedjs."""
    configure_logging()
    try:
        parser = create_argument_parser()
        cli_options = parser.parse_args(args=args)
    except SystemExit as e:
        return EXIT_SUCCESS if e.code == 0 else EXIT_CMDLINE_ERROR
    except ArgumentError as e:
        sys.stderr.write(f"unusedjs: error: {e}\n")
        return EXIT_CMDLINE_ERROR

    if cli_options.version:
        sys.stdout.write(f"unusedjs {__version__}\n\n{COPYRIGHT}")
        return EXIT_SUCCESS

    cli_settings = vars(cli_options)
    try:
        config_settings = load_config(cli_settings.get("config"))
    except ValueError as e:
        LOGGER.error(f"Error in configuration: {e}")
        return EXIT_CMDLINE_ERROR
    options = merge_options(config_settings, cli_settings)

    # Reconfigure the logging.
    update_logging(options)

    try:
        unusedjs_formats.validate_options(options)
    except RuntimeError as exc:
        LOGGER.error(str(exc))
        return EXIT_CMDLINE_ERROR

    LOGGER.info("Reading coverage data...")
    try:
        coverage_by_url, network_records, bundles = unusedjs_formats.read_inputs(
            options
        )
    except UnusedJsError as exc:
        LOGGER.error(f"Invalid input data: {exc}")
        return EXIT_DATA_ERROR
    except Exception:  # pylint: disable=broad-exception-caught
        LOGGER.error(
            f"Error occurred while reading inputs:\n{traceback.format_exc()}"
        )
        return EXIT_READ_ERROR

    LOGGER.info("Computing unused bytes...")
    try:
        summaries = asyncio.run(
            compute_all(coverage_by_url, network_records, bundles)
        )
    except UnusedJsError as exc:
        LOGGER.error(f"Error occurred while computing unused bytes: {exc}")
        return EXIT_DATA_ERROR

    LOGGER.info("Writing report...")
    try:
        unusedjs_formats.write_reports(summaries, options)
    except Exception:  # pylint: disable=broad-exception-caught
        LOGGER.error(
            f"Error occurred while printing reports:\n{traceback.format_exc()}"
        )
        return EXIT_WRITE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
