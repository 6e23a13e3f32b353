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

import json

import pytest

from unusedjs.data_model.bundle import Mapping
from unusedjs.exceptions import SourceMapError
from unusedjs.formats.sourcemap.read import SourceMap, decode_vlq, read_bundle


@pytest.mark.parametrize(
    "segment,expected",
    [
        ("A", [0]),
        ("C", [1]),
        ("D", [-1]),
        ("oB", [20]),
        ("AAAA", [0, 0, 0, 0]),
        ("KACA", [5, 0, 1, 0]),
        ("2HwcrxB", [123, 456, -789]),
    ],
)
def test_decode_vlq(segment, expected) -> None:
    assert decode_vlq(segment) == expected


def test_decode_vlq_invalid_character() -> None:
    with pytest.raises(SourceMapError, match="Invalid base64 character '!'"):
        decode_vlq("A!")


def test_decode_vlq_unterminated() -> None:
    with pytest.raises(SourceMapError, match="Unterminated VLQ value"):
        decode_vlq("Ag")


def test_mappings_with_last_columns() -> None:
    source_map = SourceMap.from_json(
        {
            "version": 3,
            "sources": ["a.js", "b.js"],
            "mappings": "AAAA,KACA;AAAA",
        }
    )
    assert source_map.mappings() == [
        Mapping(0, 0, 5, "a.js"),
        Mapping(0, 5, None, "b.js"),
        Mapping(1, 0, None, "b.js"),
    ]
    assert source_map.sources() == ["a.js", "b.js"]


def test_relative_fields_continue_across_lines() -> None:
    # The generated column restarts on each line, the source index not.
    source_map = SourceMap.from_json(
        {
            "version": 3,
            "sources": ["a.js", "b.js", "c.js"],
            "mappings": "UACA;;UACA,KADA",
        }
    )
    assert source_map.mappings() == [
        Mapping(0, 10, None, "b.js"),
        Mapping(2, 10, 15, "c.js"),
        Mapping(2, 15, None, "b.js"),
    ]


def test_segments_without_source() -> None:
    source_map = SourceMap.from_json(
        {"version": 3, "sources": ["a.js"], "mappings": "AAAA,K,KAAA"}
    )
    assert [m.source for m in source_map.mappings()] == ["a.js", None, "a.js"]
    assert [m.last_generated_column for m in source_map.mappings()] == [5, 10, None]


def test_source_root() -> None:
    source_map = SourceMap.from_json(
        {
            "version": 3,
            "sourceRoot": "webpack://app",
            "sources": ["src/a.js", "/abs/b.js", "https://cdn.test/c.js"],
            "mappings": "AAAA,CACA,CACA",
        }
    )
    assert source_map.sources() == [
        "webpack://app/src/a.js",
        "/abs/b.js",
        "https://cdn.test/c.js",
    ]


def test_indexed_map() -> None:
    source_map = SourceMap.from_json(
        {
            "version": 3,
            "sections": [
                {
                    "offset": {"line": 0, "column": 0},
                    "map": {"version": 3, "sources": ["a.js"], "mappings": "AAAA"},
                },
                {
                    "offset": {"line": 0, "column": 20},
                    "map": {
                        "version": 3,
                        "sources": ["b.js"],
                        "mappings": "AAAA;KAAA",
                    },
                },
            ],
        }
    )
    assert source_map.mappings() == [
        Mapping(0, 0, 20, "a.js"),
        Mapping(0, 20, None, "b.js"),
        Mapping(1, 5, None, "b.js"),
    ]


def test_wrong_version() -> None:
    with pytest.raises(SourceMapError, match="got 2 expected 3"):
        SourceMap.from_json({"version": 2, "sources": [], "mappings": ""})


def test_unknown_source() -> None:
    with pytest.raises(SourceMapError, match="unknown source #1"):
        SourceMap.from_json({"version": 3, "sources": ["a.js"], "mappings": "ACAA"})


def test_wrong_number_of_fields() -> None:
    with pytest.raises(SourceMapError, match="has 2 fields"):
        SourceMap.from_json({"version": 3, "sources": ["a.js"], "mappings": "AA"})


def test_loads() -> None:
    source_map_json = {"version": 3, "sources": ["a.js"], "mappings": "AAAA"}
    text = ")]}'\n" + json.dumps(source_map_json)
    assert SourceMap.loads(text).mappings() == [Mapping(0, 0, None, "a.js")]

    with pytest.raises(SourceMapError, match="not valid JSON"):
        SourceMap.loads("{")
    with pytest.raises(SourceMapError, match="must be a JSON object"):
        SourceMap.loads("[]")


def test_read_bundle(tmp_path) -> None:
    script_file = tmp_path / "app.js"
    script_file.write_bytes(b"var a=1;\r\nvar b=2;")
    map_file = tmp_path / "app.js.map"
    map_file.write_text(
        json.dumps(
            {"version": 3, "sources": ["a.ts", "b.ts"], "mappings": "AAAA;ACAA"}
        ),
        encoding="utf-8",
    )

    bundle = read_bundle(str(script_file), str(map_file))
    # The carriage return is part of the first line.
    assert bundle.raw_text == "var a=1;\r\nvar b=2;"
    assert bundle.source_map.sources() == ["a.ts", "b.ts"]


def test_negative_column() -> None:
    with pytest.raises(SourceMapError, match="negative column -1"):
        SourceMap.loads('{"version": 3, "sources": ["a.js"], "mappings": "DAAA"}')

    # Relative columns may go back, but not before the start of the line.
    source_map = SourceMap.from_json(
        {"version": 3, "sources": ["a.js"], "mappings": "KAAA,DAAA"}
    )
    assert [m.generated_column for m in source_map.mappings()] == [4, 5]


def test_negative_section_offset() -> None:
    with pytest.raises(SourceMapError, match="must not be negative"):
        SourceMap.from_json(
            {
                "version": 3,
                "sections": [
                    {
                        "offset": {"line": 0, "column": -3},
                        "map": {"version": 3, "sources": [], "mappings": ""},
                    }
                ],
            }
        )
