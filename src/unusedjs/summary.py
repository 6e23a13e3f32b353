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

"""Compute the unused bytes summary of script resources."""

import asyncio
import logging
from typing import Optional, Sequence

from .data_model.bundle import Bundle
from .data_model.coverage import ScriptCoverage
from .data_model.stats import Summary
from .sources import create_source_wasted_bytes
from .transfer import NetworkRecord, TransferSizeEstimator, estimate_transfer_size
from .waste import compute_waste, determine_lengths, merge_waste

LOGGER = logging.getLogger("unusedjs")


async def compute(
    network_record: NetworkRecord,
    script_coverages: Sequence[ScriptCoverage],
    bundle: Optional[Bundle] = None,
    *,
    estimator: TransferSizeEstimator = estimate_transfer_size,
) -> Summary:
    """Summarize the unused bytes of all executions of one resource."""
    waste_data = [compute_waste(coverage) for coverage in script_coverages]
    lengths = await determine_lengths(waste_data, network_record, estimator)
    item = merge_waste(waste_data, network_record.url, lengths)
    if bundle is None:
        return item

    sources_wasted_bytes = create_source_wasted_bytes(waste_data, bundle, lengths)
    if sources_wasted_bytes is not None:
        item.sources_wasted_bytes = sources_wasted_bytes

    return item


async def compute_all(
    coverage_by_url: dict[str, list[ScriptCoverage]],
    network_records: Optional[dict[str, NetworkRecord]] = None,
    bundles: Optional[dict[str, Bundle]] = None,
    *,
    estimator: TransferSizeEstimator = estimate_transfer_size,
) -> list[Summary]:
    """Summarize several resources, the result keeps the order of the input."""
    if network_records is None:
        network_records = {}
    if bundles is None:
        bundles = {}

    LOGGER.debug(f"Computing unused bytes of {len(coverage_by_url)} scripts.")
    return list(
        await asyncio.gather(
            *[
                compute(
                    network_records.get(url) or NetworkRecord(url),
                    script_coverages,
                    bundles.get(url),
                    estimator=estimator,
                )
                for url, script_coverages in coverage_by_url.items()
            ]
        )
    )
