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

from typing import Optional

from ...data_model.stats import Summary, sort_summaries, total_summary
from ...options import Options
from ...utils import open_text_for_writing

# Widths of the various columns
COL_URL_WIDTH = 48
COL_TOTAL_WIDTH = 10
COL_WASTED_WIDTH = 10
COL_PERCENTAGE_WIDTH = 10  # including "%" percentage sign
LINE_WIDTH = 78


def write_report(
    summaries: list[Summary], output_file: Optional[str], options: Options
) -> None:
    """Produce the text report of the unused bytes."""

    with open_text_for_writing(output_file) as fh:
        # Header
        fh.write("-" * LINE_WIDTH + "\n")
        fh.write("Unused JavaScript Report".center(LINE_WIDTH).rstrip() + "\n")
        fh.write("-" * LINE_WIDTH + "\n")
        fh.write(
            "URL".ljust(COL_URL_WIDTH)
            + "Total".rjust(COL_TOTAL_WIDTH)
            + "Wasted".rjust(COL_WASTED_WIDTH)
            + "Wasted%".rjust(COL_PERCENTAGE_WIDTH)
            + "\n"
        )
        fh.write("-" * LINE_WIDTH + "\n")

        # Data
        for summary in sort_summaries(
            summaries, options.sort_key, options.sort_reverse
        ):
            fh.write(
                _format_line(
                    summary.url,
                    summary.total_bytes,
                    summary.wasted_bytes,
                    summary.wasted_percent,
                )
                + "\n"
            )
            if options.txt_sources and summary.sources_wasted_bytes:
                for source, unused in summary.sources_wasted_bytes.items():
                    fh.write(
                        _format_name("  " + source)
                        + " " * COL_TOTAL_WIDTH
                        + str(unused).rjust(COL_WASTED_WIDTH)
                        + "\n"
                    )

        # Footer & summary
        totals = total_summary(summaries)
        fh.write("-" * LINE_WIDTH + "\n")
        fh.write(
            _format_line(
                "TOTAL",
                totals["total_bytes"],
                totals["wasted_bytes"],
                totals["wasted_percent"],
            )
            + "\n"
        )
        fh.write("-" * LINE_WIDTH + "\n")


def _format_name(name: str) -> str:
    """Put a long name on a line of its own.

    >>> _format_name("a.js")
    'a.js                                            '
    """
    if len(name) >= COL_URL_WIDTH:
        return name + "\n" + " " * COL_URL_WIDTH
    return name.ljust(COL_URL_WIDTH)


def _format_line(name: str, total: int, wasted: int, percent: float) -> str:
    """Format a single report line.

    >>> _format_line("TOTAL", 1000, 330, 33.0)
    'TOTAL                                                 1000       330     33.0%'
    """
    return (
        _format_name(name)
        + str(total).rjust(COL_TOTAL_WIDTH)
        + str(wasted).rjust(COL_WASTED_WIDTH)
        + f"{percent:.1f}%".rjust(COL_PERCENTAGE_WIDTH)
    )
