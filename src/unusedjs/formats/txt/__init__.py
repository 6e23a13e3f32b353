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
from typing import Optional, Union

from ...data_model.stats import Summary
from ...formats.base import BaseHandler
from ...options import ConfigOption, ReportOutput

LOGGER = logging.getLogger("unusedjs")


class TxtHandler(BaseHandler):
    """Class to handle the text report."""

    @classmethod
    def get_options(cls) -> list[Union[ConfigOption, str]]:
        return [
            ConfigOption(
                "txt_sources",
                ["--txt-sources"],
                group="output_options",
                help=(
                    "List the unused bytes of each original source "
                    "below its script."
                ),
                action="store_true",
            ),
            ConfigOption(
                "txt",
                ["--txt"],
                group="output_options",
                metavar="OUTPUT",
                help=(
                    "Generate a text report. "
                    "OUTPUT is optional and defaults to STDOUT. "
                    "This is the default if no other report is requested."
                ),
                nargs="?",
                type=ReportOutput,
                const=ReportOutput(None),
            ),
        ]

    def write_report(
        self, summaries: list[Summary], output_file: Optional[str]
    ) -> None:
        from .write import write_report  # pylint: disable=import-outside-toplevel # Lazy loading is intended here

        write_report(summaries, output_file, self.options)
