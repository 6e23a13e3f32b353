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

"""Measure unused JavaScript from DevTools coverage data."""

from .data_model.bundle import Bundle, Mapping
from .data_model.coverage import (
    CoverageRange,
    FunctionCoverage,
    ScriptCoverage,
    WasteData,
)
from .data_model.stats import LengthSummary, Summary
from .exceptions import CoverageDataError, SourceMapError, UnusedJsError
from .sources import create_source_wasted_bytes
from .summary import compute, compute_all
from .transfer import NetworkRecord, estimate_transfer_size
from .version import __version__
from .waste import compute_waste, determine_lengths, merge_waste

__all__ = [
    "Bundle",
    "CoverageDataError",
    "CoverageRange",
    "FunctionCoverage",
    "LengthSummary",
    "Mapping",
    "NetworkRecord",
    "ScriptCoverage",
    "SourceMapError",
    "Summary",
    "UnusedJsError",
    "WasteData",
    "__version__",
    "compute",
    "compute_all",
    "compute_waste",
    "create_source_wasted_bytes",
    "determine_lengths",
    "estimate_transfer_size",
    "merge_waste",
]
