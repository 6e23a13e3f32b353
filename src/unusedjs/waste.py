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
Mark the unused bytes of a script and sum them up.

Coverage of the same resource can come from several executions
(script tags, frames, workers). The totals computed here are plain sums
over all executions without any deduplication of the underlying bytes.
"""

import inspect
import logging
from typing import Iterable, NoReturn, Optional, Sequence

from .data_model.coverage import (
    CoverageRange,
    FunctionCoverage,
    ScriptCoverage,
    WasteData,
)
from .data_model.stats import LengthSummary, Summary
from .exceptions import CoverageDataError
from .transfer import (
    RESOURCE_TYPE_SCRIPT,
    NetworkRecord,
    TransferSizeEstimator,
    estimate_transfer_size,
)
from .utils import round_half_up

LOGGER = logging.getLogger("unusedjs")


def _raise_range_error(
    script_coverage: ScriptCoverage,
    function: FunctionCoverage,
    index: int,
    msg: str,
) -> NoReturn:
    name = function.function_name or "<anonymous>"
    raise CoverageDataError(
        f"{script_coverage.location}: range #{index} of function {name!r} {msg}"
    )


def _check_range(
    script_coverage: ScriptCoverage,
    function: FunctionCoverage,
    index: int,
    coverage_range: CoverageRange,
) -> None:
    for attribute in ("start_offset", "end_offset", "count"):
        value = getattr(coverage_range, attribute)
        if not isinstance(value, int) or isinstance(value, bool):
            _raise_range_error(
                script_coverage,
                function,
                index,
                f"has a non integer {attribute}: {value!r}.",
            )
        if value < 0:
            _raise_range_error(
                script_coverage,
                function,
                index,
                f"has a negative {attribute}: {value}.",
            )
    if coverage_range.end_offset < coverage_range.start_offset:
        _raise_range_error(
            script_coverage,
            function,
            index,
            "ends before it starts: "
            f"[{coverage_range.start_offset}, {coverage_range.end_offset}).",
        )


def compute_waste(script_coverage: ScriptCoverage) -> WasteData:
    """Mark every byte of a script which was never executed.

    Nesting is ignored: a range which was not executed implies that all
    ranges nested in it were not executed either. Ranges are applied in
    the given order, so a later range overwrites an earlier one.
    """
    content_length = 0
    for function in script_coverage.functions:
        for index, coverage_range in enumerate(function.ranges):
            _check_range(script_coverage, function, index, coverage_range)
            content_length = max(content_length, coverage_range.end_offset)

    unused_by_index = bytearray(content_length)
    for function in script_coverage.functions:
        for coverage_range in function.ranges:
            if coverage_range.is_unused:
                start, end = coverage_range.start_offset, coverage_range.end_offset
                unused_by_index[start:end] = b"\x01" * (end - start)

    unused_length = unused_by_index.count(1)
    LOGGER.debug(
        f"{script_coverage.location}: {unused_length} of {content_length} bytes unused."
    )

    return WasteData(
        unused_by_index=bytes(unused_by_index),
        unused_length=unused_length,
        content_length=content_length,
    )


def _sum_lengths(waste_data: Iterable[WasteData]) -> tuple[int, int]:
    unused = 0
    content = 0
    # Right for several script tags of a document,
    # but counts the bytes of a script shared by several frames more than once.
    for usage in waste_data:
        unused += usage.unused_length
        content += usage.content_length
    return content, unused


async def determine_lengths(
    waste_data: Sequence[WasteData],
    network_record: Optional[NetworkRecord],
    estimator: TransferSizeEstimator = estimate_transfer_size,
) -> LengthSummary:
    """Sum the lengths of all executions and estimate the transferred bytes."""
    content, unused = _sum_lengths(waste_data)

    transfer = estimator(network_record, content, RESOURCE_TYPE_SCRIPT)
    if inspect.isawaitable(transfer):
        transfer = await transfer

    return LengthSummary(content=content, unused=unused, transfer=transfer)


def merge_waste(
    waste_data: Sequence[WasteData], url: str, lengths: LengthSummary
) -> Summary:
    """Scale the unused share of the content to the transferred bytes."""
    content, unused = _sum_lengths(waste_data)

    wasted_ratio = unused / content if content else 0.0
    wasted_bytes = round_half_up(lengths.transfer * wasted_ratio)

    return Summary(
        url=url,
        total_bytes=lengths.transfer,
        wasted_bytes=wasted_bytes,
        wasted_percent=100 * wasted_ratio,
    )
