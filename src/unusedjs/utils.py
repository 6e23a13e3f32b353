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

from contextlib import contextmanager
import json
import logging
import math
import sys
from typing import Any, Iterator, Optional, TextIO

LOGGER = logging.getLogger("unusedjs")

PRETTY_JSON_INDENT = 4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves are rounded up.

    Unlike the builtin ``round`` there is no rounding to even:
    >>> round_half_up(0.5), round_half_up(1.5), round_half_up(2.5)
    (1, 2, 3)
    >>> round_half_up(329.99)
    330
    """
    return int(math.floor(value + 0.5))


@contextmanager
def open_text_for_writing(filename: Optional[str]) -> Iterator[TextIO]:
    """Open a report for writing, STDOUT is used without a filename."""
    if filename is None:
        yield sys.stdout
        return

    LOGGER.debug(f"Writing report: {filename}")
    with open(filename, "w", encoding="utf-8") as fh_out:
        yield fh_out


def write_json_output(
    json_dict: dict[str, Any], *, pretty: bool, filename: Optional[str]
) -> None:
    """Write a JSON document to a file or to STDOUT."""
    with open_text_for_writing(filename) as fh:
        if pretty:
            json.dump(json_dict, fh, indent=PRETTY_JSON_INDENT)
            fh.write("\n")
        else:
            json.dump(json_dict, fh)
