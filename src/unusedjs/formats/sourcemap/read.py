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
Handle parsing of source maps (revision 3).

The behavior of this parser was informed by the *Source Map Revision 3
Proposal* <https://sourcemaps.info/spec.html>, including indexed maps
which are made of several sections.

Only the generated positions and the sources are kept, the original
lines, columns and names are not needed to attribute bytes to sources.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Iterator, Optional

from ...data_model.bundle import Bundle, Mapping
from ...exceptions import SourceMapError

LOGGER = logging.getLogger("unusedjs")

EXPECTED_VERSION = 3

BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_VALUES = {c: i for i, c in enumerate(BASE64_DIGITS)}
VLQ_BASE_SHIFT = 5
VLQ_BASE_MASK = (1 << VLQ_BASE_SHIFT) - 1
VLQ_CONTINUATION_BIT = 1 << VLQ_BASE_SHIFT


def decode_vlq(segment: str) -> list[int]:
    """Decode the base64 VLQ values of a single segment.

    >>> decode_vlq("AAAA")
    [0, 0, 0, 0]
    >>> decode_vlq("IAAMC")
    [4, 0, 0, 6, 1]
    >>> decode_vlq("2HwcrxB")
    [123, 456, -789]
    """
    values = list[int]()
    value = 0
    shift = 0
    for char in segment:
        try:
            digit = BASE64_VALUES[char]
        except KeyError:
            raise SourceMapError(
                f"Invalid base64 character {char!r} in mapping {segment!r}."
            ) from None
        value += (digit & VLQ_BASE_MASK) << shift
        if digit & VLQ_CONTINUATION_BIT:
            shift += VLQ_BASE_SHIFT
        else:
            # The lowest bit holds the sign.
            values.append(-(value >> 1) if value & 1 else value >> 1)
            value = 0
            shift = 0

    if shift:
        raise SourceMapError(f"Unterminated VLQ value in mapping {segment!r}.")

    return values


class SourceMap:
    """The generated positions of a source map and their sources."""

    def __init__(self, mappings: list[Mapping]) -> None:
        self._mappings = self._compute_last_generated_columns(mappings)

    @classmethod
    def from_json(cls, json_data: dict[str, Any]) -> SourceMap:
        """Create the source map from the decoded JSON."""
        return cls(list(_mappings_from_json(json_data, line_offset=0, column_offset=0)))

    @classmethod
    def loads(cls, text: str) -> SourceMap:
        """Create the source map from a JSON string."""
        # A map may be prefixed to prevent XSSI.
        if text.startswith(")]}'"):
            text = text.split("\n", maxsplit=1)[1] if "\n" in text else ""
        try:
            json_data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceMapError(f"Source map is not valid JSON: {e}") from None
        if not isinstance(json_data, dict):
            raise SourceMapError("Source map must be a JSON object.")
        return cls.from_json(json_data)

    @staticmethod
    def _compute_last_generated_columns(mappings: list[Mapping]) -> list[Mapping]:
        """Set the column where the next mapping of the same line starts."""
        mappings = sorted(
            mappings, key=lambda m: (m.generated_line, m.generated_column)
        )
        result = list[Mapping]()
        for index, mapping in enumerate(mappings):
            last_generated_column = None
            if index + 1 < len(mappings):
                next_mapping = mappings[index + 1]
                if next_mapping.generated_line == mapping.generated_line:
                    last_generated_column = next_mapping.generated_column
            result.append(
                Mapping(
                    generated_line=mapping.generated_line,
                    generated_column=mapping.generated_column,
                    last_generated_column=last_generated_column,
                    source=mapping.source,
                )
            )
        return result

    def mappings(self) -> list[Mapping]:
        """Get all mappings in generated order."""
        return self._mappings

    def sources(self) -> list[str]:
        """Get the sources referenced by at least one mapping."""
        return list(
            dict.fromkeys(m.source for m in self._mappings if m.source is not None)
        )


def _source_urls(json_data: dict[str, Any]) -> list[Optional[str]]:
    source_root = json_data.get("sourceRoot") or ""
    if source_root and not source_root.endswith("/"):
        source_root += "/"

    urls = list[Optional[str]]()
    for source in json_data.get("sources", []):
        if source is None:
            urls.append(None)
        elif "://" in source or source.startswith("/"):
            urls.append(source)
        else:
            urls.append(source_root + source)
    return urls


def _mappings_from_json(
    json_data: dict[str, Any], line_offset: int, column_offset: int
) -> Iterator[Mapping]:
    if (version := json_data.get("version")) != EXPECTED_VERSION:
        raise SourceMapError(
            f"Wrong source map version, got {version} expected {EXPECTED_VERSION}."
        )

    if "sections" in json_data:
        for section in json_data["sections"]:
            if "map" not in section:
                raise SourceMapError(
                    "Sections referring to a map URL are not supported."
                )
            offset = section.get("offset", {})
            section_line = offset.get("line", 0)
            section_column = offset.get("column", 0)
            if section_line < 0 or section_column < 0:
                raise SourceMapError(
                    f"Section offset must not be negative, got {offset!r}."
                )
            yield from _mappings_from_json(
                section["map"],
                line_offset=line_offset + section_line,
                column_offset=column_offset + section_column,
            )
        return

    sources = _source_urls(json_data)
    source_index = 0
    for line, encoded_line in enumerate(json_data.get("mappings", "").split(";")):
        generated_line = line_offset + line
        column = 0
        for segment in encoded_line.split(","):
            if not segment:
                continue
            fields = decode_vlq(segment)
            if len(fields) not in (1, 4, 5):
                raise SourceMapError(
                    f"Segment {segment!r} on generated line {generated_line} "
                    f"has {len(fields)} fields."
                )

            column += fields[0]
            if column < 0:
                raise SourceMapError(
                    f"Segment {segment!r} on generated line {generated_line} "
                    f"moves to the negative column {column}."
                )
            source = None
            if len(fields) > 1:
                source_index += fields[1]
                if not 0 <= source_index < len(sources):
                    raise SourceMapError(
                        f"Segment {segment!r} on generated line {generated_line} "
                        f"refers to unknown source #{source_index}."
                    )
                source = sources[source_index]

            # Only the first line of a section is shifted by the column offset.
            yield Mapping(
                generated_line=generated_line,
                generated_column=column + (column_offset if line == 0 else 0),
                last_generated_column=None,
                source=source,
            )


def read_bundle(script_file: str, source_map_file: str) -> Bundle:
    """Read a generated script and its source map."""
    LOGGER.debug(f"Processing source map: {source_map_file}")
    with open(source_map_file, encoding="utf-8") as fh_in:
        source_map = SourceMap.loads(fh_in.read())

    with open(script_file, encoding="utf-8", newline="") as fh_in:
        raw_text = fh_in.read()

    LOGGER.debug(
        f"Source map {source_map_file} maps {len(source_map.mappings())} positions "
        f"to {len(source_map.sources())} sources."
    )
    return Bundle(raw_text=raw_text, source_map=source_map)
