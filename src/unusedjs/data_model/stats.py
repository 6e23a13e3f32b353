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

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Literal, Optional


@dataclass(frozen=True)
class LengthSummary:
    """Summed lengths of all executions of one resource."""

    content: int
    """Sum of the content lengths of all executions."""

    unused: int
    """Sum of the unused lengths of all executions."""

    transfer: int
    """Estimated number of bytes sent over the network for the resource."""


@dataclass
class Summary:
    """The unused bytes of one script resource."""

    url: str
    total_bytes: int
    wasted_bytes: int
    wasted_percent: float
    sources_wasted_bytes: Optional[dict[str, int]] = None
    """Unused bytes per original source, largest first."""

    def serialize(self) -> dict[str, Any]:
        """Serialize the object."""
        data_dict = dict[str, Any](
            {
                "url": self.url,
                "total_bytes": self.total_bytes,
                "wasted_bytes": self.wasted_bytes,
                "wasted_percent": self.wasted_percent,
            }
        )
        if self.sources_wasted_bytes is not None:
            data_dict["sources_wasted_bytes"] = dict(self.sources_wasted_bytes)

        return data_dict


def sort_summaries(
    summaries: Iterable[Summary],
    sort_key: Literal["wasted-bytes", "wasted-percent", "url"],
    sort_reverse: bool,
) -> list[Summary]:
    """Sort the summaries for a report.

    The numeric keys put the largest waste first, ties are sorted by URL.
    ``sort_reverse`` inverts the resulting order.
    """

    def key_url(summary: Summary) -> str:
        return summary.url.casefold()

    def key_wasted_bytes(summary: Summary) -> tuple[int, str]:
        return (-summary.wasted_bytes, key_url(summary))

    def key_wasted_percent(summary: Summary) -> tuple[float, str]:
        return (-summary.wasted_percent, key_url(summary))

    if sort_key == "url":
        key_fn: Any = key_url
    elif sort_key == "wasted-bytes":
        key_fn = key_wasted_bytes
    elif sort_key == "wasted-percent":
        key_fn = key_wasted_percent
    else:
        raise AssertionError(f"Sanity check: Unknown sort key {sort_key!r}.")

    return sorted(summaries, key=key_fn, reverse=sort_reverse)


def total_summary(summaries: Iterable[Summary]) -> dict[str, Any]:
    """Get the totals over several script resources."""
    total_bytes = 0
    wasted_bytes = 0
    for summary in summaries:
        total_bytes += summary.total_bytes
        wasted_bytes += summary.wasted_bytes

    return {
        "total_bytes": total_bytes,
        "wasted_bytes": wasted_bytes,
        "wasted_percent": 100 * wasted_bytes / total_bytes if total_bytes else 0.0,
    }
