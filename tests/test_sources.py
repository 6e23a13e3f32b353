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

from typing import Optional

import pytest

from unusedjs.data_model.bundle import Bundle, Mapping
from unusedjs.data_model.coverage import (
    CoverageRange,
    FunctionCoverage,
    ScriptCoverage,
    WasteData,
)
from unusedjs.exceptions import SourceMapError
from unusedjs.formats.sourcemap.read import SourceMap
from unusedjs.sources import create_source_wasted_bytes
from unusedjs.waste import compute_waste

# Two lines of 49 characters and 50 characters, the first one ends at offset 49
# with the line terminator.
TWO_LINES = "a" * 49 + "\n" + "b" * 50


def waste(*ranges: tuple[int, int, int]) -> WasteData:
    return compute_waste(
        ScriptCoverage(
            url="bundle.js",
            functions=(
                FunctionCoverage("", tuple(CoverageRange(*r) for r in ranges)),
            ),
        )
    )


def mapping(line: int, column: int, source: Optional[str]) -> Mapping:
    return Mapping(
        generated_line=line,
        generated_column=column,
        last_generated_column=None,
        source=source,
    )


def bundle(raw_text: Optional[str], *mappings: Mapping) -> Bundle:
    return Bundle(raw_text=raw_text, source_map=SourceMap(list(mappings)))


def test_two_line_bundle() -> None:
    two_line_bundle = bundle(TWO_LINES, mapping(0, 0, "a.js"), mapping(1, 0, "b.js"))
    waste_data = [waste((0, 50, 0), (50, 100, 1))]

    assert create_source_wasted_bytes(waste_data, two_line_bundle) == {"a.js": 50}


def test_no_raw_text() -> None:
    for raw_text in (None, ""):
        assert (
            create_source_wasted_bytes(
                [waste((0, 50, 0))], bundle(raw_text, mapping(0, 0, "a.js"))
            )
            is None
        )


def test_attribution_uses_all_executions() -> None:
    # Fully unused in A, fully used in B: no byte is unused in both.
    raw_text = "x" * 99
    unused = waste((0, 100, 0))
    used = waste((0, 100, 5))
    single_line = bundle(raw_text, mapping(0, 0, "a.js"))

    assert create_source_wasted_bytes([unused], single_line) == {"a.js": 100}
    assert create_source_wasted_bytes([unused, used], single_line) == {}
    assert create_source_wasted_bytes([used, unused], single_line) == {}


def test_attribution_intersects_executions() -> None:
    raw_text = "x" * 99
    single_line = bundle(raw_text, mapping(0, 0, "a.js"))
    first = waste((0, 100, 1), (0, 60, 0))
    second = waste((0, 100, 1), (40, 100, 0))

    assert create_source_wasted_bytes([first, second], single_line) == {"a.js": 20}


def test_offsets_beyond_coverage_are_used() -> None:
    raw_text = "x" * 99
    single_line = bundle(raw_text, mapping(0, 0, "a.js"))
    long = waste((0, 100, 0))
    short = waste((0, 30, 0))

    assert create_source_wasted_bytes([short], single_line) == {"a.js": 30}
    assert create_source_wasted_bytes([long, short], single_line) == {"a.js": 30}


def test_no_executions() -> None:
    # Without any execution no byte is known to be unused, so nothing is
    # attributed instead of every mapped byte.
    assert create_source_wasted_bytes([], bundle("x" * 9, mapping(0, 0, "a.js"))) == {}


def test_mappings_on_one_line() -> None:
    # a.js covers columns 0-9, b.js 10-29, c.js 30 to the end of the line.
    raw_text = "x" * 40 + "\n" + "y" * 10
    line_bundle = bundle(
        raw_text,
        mapping(0, 0, "a.js"),
        mapping(0, 10, "b.js"),
        mapping(0, 30, "c.js"),
        mapping(1, 0, "a.js"),
    )
    waste_data = [waste((0, 51, 0))]

    # The last mapping of the line includes the line terminator.
    assert create_source_wasted_bytes(waste_data, line_bundle) == {
        "b.js": 20,
        "a.js": 20,
        "c.js": 11,
    }


def test_result_is_sorted_by_count() -> None:
    raw_text = "x" * 40
    line_bundle = bundle(
        raw_text,
        mapping(0, 0, "small.js"),
        mapping(0, 5, "large.js"),
        mapping(0, 25, "medium.js"),
    )
    result = create_source_wasted_bytes([waste((0, 40, 0))], line_bundle)
    assert list(result.items()) == [
        ("large.js", 20),
        ("medium.js", 15),
        ("small.js", 5),
    ]


def test_counts_of_a_source_are_summed() -> None:
    raw_text = "x" * 20
    line_bundle = bundle(
        raw_text,
        mapping(0, 0, "a.js"),
        mapping(0, 5, "b.js"),
        mapping(0, 10, "a.js"),
    )
    result = create_source_wasted_bytes([waste((0, 20, 0))], line_bundle)
    assert result == {"a.js": 15, "b.js": 5}


def test_mappings_without_source_are_skipped() -> None:
    raw_text = "x" * 20
    line_bundle = bundle(raw_text, mapping(0, 0, None), mapping(0, 10, "a.js"))
    result = create_source_wasted_bytes([waste((0, 20, 0))], line_bundle)
    assert result == {"a.js": 10}


def test_source_map_with_resolved_last_columns() -> None:
    class ResolvedSourceMap:
        def mappings(self) -> list[Mapping]:
            return [
                Mapping(0, 0, 4, "a.js"),
                Mapping(0, 4, None, "b.js"),
            ]

    result = create_source_wasted_bytes(
        [waste((0, 10, 0))], Bundle(raw_text="x" * 9, source_map=ResolvedSourceMap())
    )
    assert result == {"b.js": 6, "a.js": 4}


def test_mapping_beyond_last_line() -> None:
    with pytest.raises(SourceMapError, match="generated line 2"):
        create_source_wasted_bytes(
            [waste((0, 10, 0))], bundle("x\ny", mapping(2, 0, "a.js"))
        )


def test_mapping_at_negative_column() -> None:
    with pytest.raises(SourceMapError, match="negative column -1"):
        create_source_wasted_bytes(
            [waste((0, 10, 0))], bundle("x" * 9, mapping(0, -1, "a.js"))
        )


def test_lines_are_measured_in_utf16_code_units() -> None:
    # The emoji takes two code units, the first line is 5 units long.
    raw_text = "\U0001f600abc\n" + "x" * 5
    emoji_bundle = bundle(raw_text, mapping(0, 0, "a.js"), mapping(1, 0, "b.js"))
    waste_data = [waste((0, 6, 0), (6, 11, 1))]

    assert create_source_wasted_bytes(waste_data, emoji_bundle) == {"a.js": 6}


def test_intersection_of_large_executions() -> None:
    size = 3_000_000
    single_line = bundle("x" * (size - 1), mapping(0, 0, "a.js"))
    waste_data = [
        waste((0, size, 0)),
        waste((0, size, 1), (1_000_000, size, 0)),
        waste((0, size - 500_000, 0)),
    ]

    assert create_source_wasted_bytes(waste_data, single_line) == {
        "a.js": 1_500_000
    }
