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
Estimation of the bytes sent over the network for a resource.

Without an observed transfer size the content length is scaled by the
typical gzip ratio of the resource type, see
<https://discuss.httparchive.org/t/file-size-and-compression-savings/145>.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from typing import Awaitable, Callable, Optional, Union

from .utils import round_half_up

LOGGER = logging.getLogger("unusedjs")

RESOURCE_TYPE_SCRIPT = "Script"

COMPRESSION_RATIOS = {
    "Stylesheet": 0.2,
    "Script": 0.33,
    "Document": 0.33,
}
DEFAULT_COMPRESSION_RATIO = 0.5

TransferSizeEstimator = Callable[
    ["NetworkRecord", int, str], Union[int, Awaitable[int]]
]


@dataclass(frozen=True)
class NetworkRecord:
    """The resource a coverage was taken for."""

    url: str
    resource_type: Optional[str] = None
    """DevTools resource type, e.g. ``Script`` or ``Document``."""

    transfer_size: Optional[int] = None
    """Observed bytes on the wire, including headers and compression."""

    resource_size: Optional[int] = None
    """Observed decoded body size of the resource."""


def estimate_transfer_size(
    network_record: Optional[NetworkRecord], total_bytes: int, resource_type: str
) -> int:
    """Estimate the transferred bytes of ``total_bytes`` of content.

    Example: nothing observed, a script compresses to a third:
    >>> estimate_transfer_size(None, 1000, "Script")
    330

    Example: a standalone script uses the observed size:
    >>> estimate_transfer_size(
    ...     NetworkRecord("a.js", "Script", transfer_size=420), 1000, "Script")
    420

    Example: a script inlined in a document uses the compression of the document:
    >>> estimate_transfer_size(
    ...     NetworkRecord("a.html", "Document", 250, 1000), 400, "Script")
    100
    """
    if network_record is None or network_record.transfer_size is None:
        ratio = COMPRESSION_RATIOS.get(resource_type, DEFAULT_COMPRESSION_RATIO)
        LOGGER.debug(
            f"No transfer size known for {getattr(network_record, 'url', None)!r}, "
            f"using compression ratio {ratio}."
        )
        return round_half_up(total_bytes * ratio)

    if network_record.resource_type == resource_type:
        return network_record.transfer_size

    # Inlined in a resource of another type, e.g. a script in a HTML document.
    resource_size = network_record.resource_size
    if (
        resource_size is not None
        and math.isfinite(resource_size)
        and resource_size > 0
    ):
        ratio = network_record.transfer_size / resource_size
    else:
        ratio = 1.0
    return round_half_up(total_bytes * ratio)
