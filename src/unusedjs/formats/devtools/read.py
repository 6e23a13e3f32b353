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
Handle parsing of DevTools coverage and network records.

Coverage files hold the result of ``Profiler.takePreciseCoverage``, either
as the raw protocol response ``{"result": [...]}``, as a plain list of script
coverages, or as an object mapping the script URL to a list of coverages.
"""

import json
import logging
from typing import Any

from ...data_model.coverage import CoverageRange, FunctionCoverage, ScriptCoverage
from ...exceptions import CoverageDataError
from ...transfer import NetworkRecord

LOGGER = logging.getLogger("unusedjs")


def read_coverage_files(filenames: list[str]) -> dict[str, list[ScriptCoverage]]:
    """Read the coverage files and group the executions by script URL.

    The order of the first appearance of an URL is kept.
    """
    coverage_by_url = dict[str, list[ScriptCoverage]]()
    for filename in filenames:
        LOGGER.debug(f"Processing coverage file: {filename}")
        with open(filename, encoding="utf-8") as json_file:
            json_data = json.load(json_file)

        for script_coverage in script_coverages_from_json(filename, json_data):
            coverage_by_url.setdefault(script_coverage.url, []).append(
                script_coverage
            )

    LOGGER.debug(f"Found coverage of {len(coverage_by_url)} scripts.")
    return coverage_by_url


def script_coverages_from_json(
    data_source: str, json_data: Any
) -> list[ScriptCoverage]:
    """Get the script coverages of one decoded coverage file."""
    if isinstance(json_data, dict) and "result" in json_data:
        json_data = json_data["result"]

    if isinstance(json_data, list):
        return [_script_from_json(data_source, s) for s in json_data]

    if isinstance(json_data, dict):
        return [
            _script_from_json(data_source, s, url=url)
            for url, scripts in json_data.items()
            for s in scripts
        ]

    raise CoverageDataError(
        f"{data_source}: expected a list or an object of script coverages."
    )


def _script_from_json(
    data_source: str, json_script: Any, url: str = ""
) -> ScriptCoverage:
    if not isinstance(json_script, dict) or "functions" not in json_script:
        raise CoverageDataError(
            f"{data_source}: script coverage without functions: {json_script!r:.80}"
        )
    script_id = json_script.get("scriptId")
    return ScriptCoverage(
        url=json_script.get("url", url) or url,
        functions=tuple(
            _function_from_json(data_source, f) for f in json_script["functions"]
        ),
        script_id=None if script_id is None else str(script_id),
    )


def _function_from_json(data_source: str, json_function: Any) -> FunctionCoverage:
    try:
        ranges = tuple(
            CoverageRange(
                start_offset=r["startOffset"],
                end_offset=r["endOffset"],
                count=r["count"],
            )
            for r in json_function["ranges"]
        )
    except (KeyError, TypeError) as e:
        raise CoverageDataError(
            f"{data_source}: malformed function coverage {json_function!r:.80}: {e!r}"
        ) from None

    return FunctionCoverage(
        function_name=json_function.get("functionName", ""),
        ranges=ranges,
    )


def read_network_records(filename: str) -> dict[str, NetworkRecord]:
    """Read network records, keyed by their URL."""
    LOGGER.debug(f"Processing network records: {filename}")
    with open(filename, encoding="utf-8") as json_file:
        json_data = json.load(json_file)

    if not isinstance(json_data, list):
        raise CoverageDataError(f"{filename}: expected a list of network records.")

    network_records = dict[str, NetworkRecord]()
    for json_record in json_data:
        try:
            url = json_record["url"]
        except (KeyError, TypeError):
            raise CoverageDataError(
                f"{filename}: network record without URL: {json_record!r:.80}"
            ) from None
        if url in network_records:
            LOGGER.warning(f"Duplicate network record for {url}, using the first one.")
            continue
        network_records[url] = NetworkRecord(
            url=url,
            resource_type=json_record.get("resourceType"),
            transfer_size=json_record.get("transferSize"),
            resource_size=json_record.get("resourceSize"),
        )

    return network_records
