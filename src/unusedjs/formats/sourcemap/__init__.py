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
import os
from typing import Union

from ...data_model.bundle import Bundle
from ...formats.base import BaseHandler
from ...options import ConfigOption

LOGGER = logging.getLogger("unusedjs")


class SourcemapHandler(BaseHandler):
    """Class to handle generated scripts with their source maps."""

    @classmethod
    def get_options(cls) -> list[Union[ConfigOption, str]]:
        return [
            ConfigOption(
                "bundles",
                ["--bundle"],
                config=False,
                group="input_options",
                metavar=("URL", "SCRIPT", "MAP"),
                help=(
                    "Attribute the unused bytes of the script URL to its "
                    "original sources using the generated SCRIPT file "
                    "and its source MAP file. "
                    "Option can be specified multiple times."
                ),
                nargs=3,
                action="append",
            ),
        ]

    def validate_options(self) -> None:
        urls = set[str]()
        for url, script_file, source_map_file in self.options.bundles:
            if url in urls:
                raise RuntimeError(f"Bad --bundle option.\n\tDuplicate URL {url!r}.")
            urls.add(url)
            for filename in (script_file, source_map_file):
                if not os.path.isfile(filename):
                    raise RuntimeError(
                        "Bad --bundle option.\n"
                        f"\tThe file {filename!r} does not exist."
                    )

    def read_bundles(self) -> dict[str, Bundle]:
        """Read the bundles, keyed by the script URL."""
        from .read import read_bundle  # pylint: disable=import-outside-toplevel # Lazy loading is intended here

        return {
            url: read_bundle(script_file, source_map_file)
            for url, script_file, source_map_file in self.options.bundles
        }
