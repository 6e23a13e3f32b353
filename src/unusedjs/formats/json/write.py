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

from typing import Any, Optional

from ...data_model.stats import Summary, sort_summaries, total_summary
from ...options import Options
from ...utils import write_json_output

FORMAT_VERSION = "1.0"
KEY_FORMAT_VERSION = "unusedjs/format_version"


def write_report(
    summaries: list[Summary], output_file: Optional[str], options: Options
) -> None:
    """Produce the JSON report of the unused bytes."""
    json_dict = dict[str, Any]()
    json_dict[KEY_FORMAT_VERSION] = FORMAT_VERSION
    json_dict["scripts"] = [
        summary.serialize()
        for summary in sort_summaries(
            summaries, options.sort_key, options.sort_reverse
        )
    ]
    json_dict.update(total_summary(summaries))

    write_json_output(
        json_dict,
        pretty=options.json_pretty,
        filename=output_file,
    )
