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

import pytest

from unusedjs.transfer import NetworkRecord, estimate_transfer_size


@pytest.mark.parametrize(
    "resource_type,expected",
    [
        ("Stylesheet", 200),
        ("Script", 330),
        ("Document", 330),
        ("Image", 500),
    ],
)
def test_heuristic_ratio(resource_type, expected) -> None:
    assert estimate_transfer_size(None, 1000, resource_type) == expected


def test_record_without_transfer_size() -> None:
    network_record = NetworkRecord("a.js", resource_type="Script", resource_size=900)
    assert estimate_transfer_size(network_record, 1000, "Script") == 330


def test_heuristic_is_rounded_half_up() -> None:
    assert estimate_transfer_size(None, 5, "Image") == 3


def test_observed_transfer_size() -> None:
    network_record = NetworkRecord("a.js", "Script", transfer_size=420)
    assert estimate_transfer_size(network_record, 1000, "Script") == 420


def test_inlined_script() -> None:
    network_record = NetworkRecord(
        "index.html", "Document", transfer_size=300, resource_size=1200
    )
    assert estimate_transfer_size(network_record, 500, "Script") == 125


@pytest.mark.parametrize("resource_size", [None, 0, -1])
def test_inlined_script_without_resource_size(resource_size) -> None:
    network_record = NetworkRecord(
        "index.html", "Document", transfer_size=300, resource_size=resource_size
    )
    assert estimate_transfer_size(network_record, 500, "Script") == 500
