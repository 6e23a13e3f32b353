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
The unusedjs coverage data model.

This module represents the core data structures
and should not have dependencies on any other unusedjs module.

The types ``ScriptCoverage``, ``FunctionCoverage`` and ``CoverageRange``
mirror one execution of the DevTools ``Profiler.takePreciseCoverage`` result.
Offsets are positions within the script text as it existed at execution time.

``WasteData`` is derived from a single ``ScriptCoverage``
and is never changed after it was built.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CoverageRange:
    """A contiguous span of a script together with its execution count."""

    start_offset: int
    end_offset: int
    count: int

    @property
    def is_unused(self) -> bool:
        """True if the span was never executed."""
        return self.count == 0


@dataclass(frozen=True)
class FunctionCoverage:
    """The ranges reported for a single function."""

    function_name: str
    ranges: tuple[CoverageRange, ...]


@dataclass(frozen=True)
class ScriptCoverage:
    """Coverage of one execution of a script."""

    url: str
    functions: tuple[FunctionCoverage, ...] = field(default_factory=tuple)
    script_id: Optional[str] = None

    @property
    def location(self) -> str:
        """Get a human readable name of the script for messages."""
        if self.script_id is None:
            return self.url or "<anonymous>"
        return f"{self.url or '<anonymous>'} (script {self.script_id})"


@dataclass(frozen=True)
class WasteData:
    """Per-offset usage of one execution.

    ``unused_by_index[i]`` is 1 if offset ``i`` was never executed, else 0.
    """

    unused_by_index: bytes
    unused_length: int
    content_length: int

    def is_unused(self, offset: int) -> bool:
        """Check an offset, anything outside of the instrumented bytes is used."""
        if 0 <= offset < self.content_length:
            return self.unused_by_index[offset] == 1
        return False
