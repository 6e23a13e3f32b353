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

"""
Logging of unusedjs.

Messages go to STDERR, colored by colorlog. On Azure Pipelines and GitHub
Actions warnings and errors are repeated as annotations of the build.
"""

import logging
import os
import sys
from typing import Any, Optional

from colorlog import ColoredFormatter

from .options import Options

LOGGER = logging.getLogger("unusedjs")

LOG_FORMAT = "(%(levelname)s) %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Environment variable of the CI system and the prefixes of its annotations.
CI_ANNOTATION_PREFIXES = {
    "TF_BUILD": {
        logging.WARNING: "##vso[task.logissue type=warning]",
        logging.ERROR: "##vso[task.logissue type=error]",
    },
    "GITHUB_ACTIONS": {
        logging.WARNING: "::warning::",
        logging.ERROR: "::error::",
    },
}

STDERR_HANDLER = logging.StreamHandler(sys.stderr)


class CiAnnotationHandler(logging.StreamHandler):
    """Write warnings and errors once more with the prefix of the CI system."""

    def __init__(self, prefixes: dict[int, str]) -> None:
        super().__init__(sys.stderr)
        self.prefixes = prefixes
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno in self.prefixes:
            super().emit(record)

    def format(self, record: logging.LogRecord) -> str:
        return self.prefixes[record.levelno] + super().format(record)


def _colored_formatter(
    no_color: bool = False, force_color: bool = False
) -> ColoredFormatter:
    return ColoredFormatter(
        f"%(log_color)s{LOG_FORMAT}",
        log_colors=LOG_COLORS,
        no_color=no_color,
        force_color=force_color,
        stream=sys.stderr,
    )


def _ci_annotation_prefixes() -> Optional[dict[int, str]]:
    for variable, prefixes in CI_ANNOTATION_PREFIXES.items():
        if variable in os.environ:
            return prefixes
    return None


def _log_uncaught_exception(
    exc_type: Any, exc_value: Any, exc_traceback: Any
) -> None:
    LOGGER.critical(
        "Uncaught EXCEPTION", exc_info=(exc_type, exc_value, exc_traceback)
    )


def configure_logging() -> None:
    """Set up the handlers, repeated calls add no further handler."""
    STDERR_HANDLER.setFormatter(_colored_formatter())
    logging.basicConfig(level=logging.INFO, handlers=[STDERR_HANDLER])

    root_logger = logging.getLogger()
    prefixes = _ci_annotation_prefixes()
    if prefixes is not None and not any(
        isinstance(handler, CiAnnotationHandler) for handler in root_logger.handlers
    ):
        root_logger.addHandler(CiAnnotationHandler(prefixes))

    sys.excepthook = _log_uncaught_exception


def update_logging(options: Options) -> None:
    """Apply the verbosity and the color settings."""
    if options.verbose:
        LOGGER.setLevel(logging.DEBUG)

    STDERR_HANDLER.setFormatter(
        _colored_formatter(
            no_color=bool(options.no_color), force_color=bool(options.force_color)
        )
    )
