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
from typing import Iterable, Optional, Protocol


@dataclass(frozen=True)
class Mapping:
    """A single entry of a source map.

    Lines and columns are zero based and refer to the generated script.
    ``last_generated_column`` is the column where the next mapping of the
    same generated line starts, ``None`` for the last mapping on the line.
    """

    generated_line: int
    generated_column: int
    last_generated_column: Optional[int]
    source: Optional[str]


class SourceMapLike(Protocol):  # pylint: disable=too-few-public-methods
    """Anything which can list its mappings in generated order."""

    def mappings(self) -> Iterable[Mapping]:
        """Get the mappings with resolved last generated columns."""


@dataclass(frozen=True)
class Bundle:
    """A generated script together with the map back to its sources."""

    raw_text: Optional[str]
    source_map: SourceMapLike
