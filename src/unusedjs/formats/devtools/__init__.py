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
from typing import Union

from ...data_model.coverage import ScriptCoverage
from ...formats.base import BaseHandler
from ...options import ConfigOption, check_input_file
from ...transfer import NetworkRecord

LOGGER = logging.getLogger("unusedjs")


class DevtoolsHandler(BaseHandler):
    """Class to handle the DevTools coverage and network record files."""

    @classmethod
    def get_options(cls) -> list[Union[ConfigOption, str]]:
        return [
            ConfigOption(
                "coverage_files",
                config="coverage-file",
                nargs="*",
                metavar="COVERAGE_FILE",
                type=check_input_file,
                help=(
                    "JSON files with the result of the DevTools protocol "
                    "command Profiler.takePreciseCoverage. "
                    "Executions of the same script URL are combined."
                ),
            ),
            ConfigOption(
                "network_records",
                ["--network-records"],
                group="input_options",
                metavar="FILE",
                help=(
                    "JSON list of network records with the fields "
                    "url, resourceType, transferSize and resourceSize. "
                    "Scripts without a record get an estimated transfer size."
                ),
                type=check_input_file,
            ),
        ]

    def validate_options(self) -> None:
        if not self.options.coverage_files:
            raise RuntimeError("No coverage file given.")

    def read_coverage(self) -> dict[str, list[ScriptCoverage]]:
        """Read the coverage files, grouped by script URL."""
        from .read import read_coverage_files  # pylint: disable=import-outside-toplevel # Lazy loading is intended here

        return read_coverage_files(self.options.coverage_files)

    def read_network_records(self) -> dict[str, NetworkRecord]:
        """Read the network records, if any."""
        if self.options.network_records is None:
            return {}

        from .read import read_network_records  # pylint: disable=import-outside-toplevel # Lazy loading is intended here

        return read_network_records(self.options.network_records)
