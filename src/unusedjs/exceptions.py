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

"""Exceptions used in unusedjs."""


class UnusedJsError(ValueError):
    """Base class for errors raised while computing unused bytes."""


class CoverageDataError(UnusedJsError):
    """Raised when coverage data is structurally invalid."""


class SourceMapError(UnusedJsError):
    """Raised when a source map can't be decoded or doesn't match its script."""
