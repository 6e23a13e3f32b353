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
Attribute unused bytes of a bundle to the original source files.

A byte is only attributed to a source if it is unused in every execution
of the script, in contrast to the plain sums of :mod:`unusedjs.waste`.
"""

import logging
from typing import Optional, Sequence

from .data_model.bundle import Bundle
from .data_model.coverage import WasteData
from .data_model.stats import LengthSummary
from .exceptions import SourceMapError

LOGGER = logging.getLogger("unusedjs")


def _utf16_length(text: str) -> int:
    """Get the length of the text in UTF-16 code units like in JavaScript.

    >>> _utf16_length("abc"), _utf16_length("\\U0001F600")
    (3, 2)
    """
    return len(text.encode("utf-16-le")) // 2


def _line_offsets(raw_text: str) -> tuple[list[int], list[int]]:
    """Get the length and the absolute start offset of each line.

    Coverage offsets and source map columns count UTF-16 code units,
    a character outside of the BMP takes two of them.

    >>> _line_offsets("ab\\ncde\\n")
    ([2, 3, 0], [0, 3, 7])
    >>> _line_offsets("\\U0001F600a\\nb")
    ([3, 1], [0, 4])
    """
    line_lengths = [_utf16_length(line) for line in raw_text.split("\n")]
    line_offsets = list[int]()
    total_so_far = 0
    for length in line_lengths:
        line_offsets.append(total_so_far)
        total_so_far += length + 1  # the line terminator
    return line_lengths, line_offsets


def _unused_everywhere(waste_data: Sequence[WasteData]) -> bytes:
    """Intersect the unused bytes of all executions.

    The result is as long as the shortest execution, offsets beyond the
    instrumented bytes of any execution count as used.

    >>> _unused_everywhere([
    ...     WasteData(b"\\x01\\x01\\x00\\x01", 3, 4),
    ...     WasteData(b"\\x01\\x00\\x00", 1, 3),
    ... ])
    b'\\x01\\x00\\x00'
    """
    if not waste_data:
        return b""

    length = min(len(data.unused_by_index) for data in waste_data)
    # Each byte is 0 or 1, so the AND of the integers is the AND per offset.
    unused = int.from_bytes(waste_data[0].unused_by_index[:length], "little")
    for data in waste_data[1:]:
        unused &= int.from_bytes(data.unused_by_index[:length], "little")
    return unused.to_bytes(length, "little")


def create_source_wasted_bytes(
    waste_data: Sequence[WasteData],
    bundle: Bundle,
    lengths: Optional[LengthSummary] = None,  # pylint: disable=unused-argument
) -> Optional[dict[str, int]]:
    """Count the bytes unused in every execution per original source.

    Returns ``None`` if the bundle has no script content. The result is
    sorted by the number of unused bytes, largest first.
    """
    if not bundle.raw_text:
        LOGGER.debug("No script content in bundle, skipping source attribution.")
        return None

    line_lengths, line_offsets = _line_offsets(bundle.raw_text)
    unused_by_index = _unused_everywhere(waste_data)

    files = dict[str, int]()
    for mapping in bundle.source_map.mappings():
        if mapping.source is None:
            continue
        line = mapping.generated_line
        if not 0 <= line < len(line_offsets):
            raise SourceMapError(
                f"Mapping for {mapping.source!r} refers to generated line {line}, "
                f"but the script has only {len(line_offsets)} lines."
            )
        if mapping.generated_column < 0:
            raise SourceMapError(
                f"Mapping for {mapping.source!r} on generated line {line} "
                f"starts at the negative column {mapping.generated_column}."
            )

        if mapping.last_generated_column is None:
            last_column = line_lengths[line]
        else:
            last_column = mapping.last_generated_column - 1

        start = line_offsets[line] + mapping.generated_column
        end = line_offsets[line] + last_column
        # The end of a mapping is inclusive.
        if unused := unused_by_index.count(1, start, end + 1):
            files[mapping.source] = files.get(mapping.source, 0) + unused

    LOGGER.debug(f"Attributed unused bytes to {len(files)} bundled sources.")

    return dict(sorted(files.items(), key=lambda item: item[1], reverse=True))
