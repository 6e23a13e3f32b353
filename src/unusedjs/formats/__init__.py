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

import logging

from ..data_model.bundle import Bundle
from ..data_model.coverage import ScriptCoverage
from ..data_model.stats import Summary
from ..options import ConfigOption, Options, ReportOutput
from ..transfer import NetworkRecord

# the handler
from .devtools import DevtoolsHandler
from .json import JsonHandler
from .sourcemap import SourcemapHandler
from .txt import TxtHandler

LOGGER = logging.getLogger("unusedjs")


def get_options() -> list[ConfigOption]:
    """Get the list of all options from the format handlers."""
    return [
        o
        for o in [
            *DevtoolsHandler.get_options(),
            *SourcemapHandler.get_options(),
            *JsonHandler.get_options(),
            *TxtHandler.get_options(),
        ]
        if isinstance(o, ConfigOption)
    ]


def validate_options(options: Options) -> None:
    """Validate the command line options of the format handlers."""
    for handler in [
        DevtoolsHandler,
        SourcemapHandler,
        JsonHandler,
        TxtHandler,
    ]:
        handler(options).validate_options()


def read_inputs(
    options: Options,
) -> tuple[
    dict[str, list[ScriptCoverage]], dict[str, NetworkRecord], dict[str, Bundle]
]:
    """Read the coverage, the network records and the bundles."""
    devtools_handler = DevtoolsHandler(options)
    coverage_by_url = devtools_handler.read_coverage()
    network_records = devtools_handler.read_network_records()
    bundles = SourcemapHandler(options).read_bundles()

    for url in bundles:
        if url not in coverage_by_url:
            LOGGER.warning(f"No coverage found for bundle {url}.")

    return coverage_by_url, network_records, bundles


def write_reports(summaries: list[Summary], options: Options) -> None:
    """Write the reports to the requested outputs."""
    generated = False
    if options.json_pretty and options.json is None:
        options.json = ReportOutput(None)
    if options.json is not None:
        JsonHandler(options).write_report(summaries, options.json.path)
        generated = True

    if options.txt is not None or not generated:
        output = options.txt or ReportOutput(None)
        TxtHandler(options).write_report(summaries, output.path)
