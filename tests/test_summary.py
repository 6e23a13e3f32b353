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

import asyncio

import pytest

from unusedjs.data_model.bundle import Bundle, Mapping
from unusedjs.data_model.coverage import (
    CoverageRange,
    FunctionCoverage,
    ScriptCoverage,
)
from unusedjs.exceptions import CoverageDataError
from unusedjs.formats.sourcemap.read import SourceMap
from unusedjs.summary import compute, compute_all
from unusedjs.transfer import NetworkRecord

TWO_LINES = "a" * 49 + "\n" + "b" * 50

TWO_LINES_MAP = SourceMap(
    [
        Mapping(0, 0, None, "a.js"),
        Mapping(1, 0, None, "b.js"),
    ]
)


def script(*ranges: tuple[int, int, int], url: str = "app.js") -> ScriptCoverage:
    return ScriptCoverage(
        url=url,
        functions=(
            FunctionCoverage(
                function_name="",
                ranges=tuple(CoverageRange(*r) for r in ranges),
            ),
        ),
    )


def fixed_transfer(transfer: int):
    def estimator(network_record, total_bytes, resource_type):
        return transfer

    return estimator


def test_everything_unused() -> None:
    summary = asyncio.run(
        compute(
            NetworkRecord("app.js"),
            [script((0, 100, 0))],
            estimator=fixed_transfer(1000),
        )
    )
    assert summary.url == "app.js"
    assert summary.total_bytes == 1000
    assert summary.wasted_bytes == 1000
    assert summary.wasted_percent == 100
    assert summary.sources_wasted_bytes is None
    assert "sources_wasted_bytes" not in summary.serialize()


def test_with_bundle() -> None:
    summary = asyncio.run(
        compute(
            NetworkRecord("app.js"),
            [script((0, 100, 1), (0, 50, 0))],
            Bundle(raw_text=TWO_LINES, source_map=TWO_LINES_MAP),
            estimator=fixed_transfer(1000),
        )
    )
    assert summary.total_bytes == 1000
    assert summary.wasted_bytes == 500
    assert summary.wasted_percent == 50
    assert summary.sources_wasted_bytes == {"a.js": 50}
    assert summary.serialize()["sources_wasted_bytes"] == {"a.js": 50}


def test_bundle_without_text() -> None:
    summary = asyncio.run(
        compute(
            NetworkRecord("app.js"),
            [script((0, 100, 0))],
            Bundle(raw_text=None, source_map=TWO_LINES_MAP),
            estimator=fixed_transfer(1000),
        )
    )
    assert summary.wasted_bytes == 1000
    assert summary.sources_wasted_bytes is None


def test_sum_and_intersection_differ() -> None:
    # Each half is unused in one execution only.
    summary = asyncio.run(
        compute(
            NetworkRecord("app.js"),
            [script((0, 100, 1), (0, 50, 0)), script((0, 100, 1), (50, 100, 0))],
            Bundle(raw_text=TWO_LINES, source_map=TWO_LINES_MAP),
            estimator=fixed_transfer(1000),
        )
    )
    assert summary.wasted_percent == 50
    assert summary.wasted_bytes == 500
    assert summary.sources_wasted_bytes == {}


def test_default_estimator() -> None:
    summary = asyncio.run(compute(NetworkRecord("app.js"), [script((0, 1000, 0))]))
    assert summary.total_bytes == 330
    assert summary.wasted_bytes == 330


def test_invalid_coverage() -> None:
    with pytest.raises(CoverageDataError):
        asyncio.run(compute(NetworkRecord("app.js"), [script((10, 5, 0))]))


def test_compute_all() -> None:
    seen = []

    async def estimator(network_record, total_bytes, resource_type):
        seen.append(network_record)
        await asyncio.sleep(0)
        return total_bytes

    summaries = asyncio.run(
        compute_all(
            {
                "b.js": [script((0, 10, 0), url="b.js")],
                "a.js": [script((0, 100, 1), url="a.js")],
                "app.js": [script((0, 100, 1), (0, 50, 0))],
            },
            {"a.js": NetworkRecord("a.js", "Script", transfer_size=40)},
            {"app.js": Bundle(raw_text=TWO_LINES, source_map=TWO_LINES_MAP)},
            estimator=estimator,
        )
    )
    assert [s.url for s in summaries] == ["b.js", "a.js", "app.js"]
    assert [s.wasted_bytes for s in summaries] == [10, 0, 50]
    assert [s.sources_wasted_bytes for s in summaries] == [None, None, {"a.js": 50}]
    assert sorted(seen, key=lambda r: r.url) == [
        NetworkRecord("a.js", "Script", transfer_size=40),
        NetworkRecord("app.js"),
        NetworkRecord("b.js"),
    ]


def test_compute_all_without_scripts() -> None:
    assert asyncio.run(compute_all({})) == []
