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
The settings of unusedjs and how they are read.

Settings come from the command line and from a TOML config file, either
``unusedjs.toml`` or the ``[tool.unusedjs]`` table of ``pyproject.toml``.
Values given on the command line win.
"""

from __future__ import annotations
from argparse import ArgumentParser, ArgumentTypeError
import logging
import os
import sys
from typing import Any, Optional

from . import formats
from .options import ConfigOption, Options, check_input_file

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

LOGGER = logging.getLogger("unusedjs")

CONFIG_FILE_NAME = "unusedjs.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"

CONFIG_OPTION_GROUPS = {
    "input_options": (
        "Input Options",
        "Coverage is read from DevTools JSON files. "
        "Network records and source maps refine the report.",
    ),
    "output_options": (
        "Output Options",
        "unusedjs prints a text report by default, but can switch to JSON.",
    ),
}

CONFIG_OPTIONS = [
    ConfigOption(
        "verbose",
        ["-v", "--verbose"],
        help="Print progress messages. Please include this output in bug reports.",
        action="store_true",
    ),
    ConfigOption(
        "no_color",
        ["--no-color"],
        help="Turn off colored logging. Ignored if --force-color is used.",
        action="store_true",
    ),
    ConfigOption(
        "force_color",
        ["--force-color"],
        help="Force colored logging even if STDERR is not a terminal.",
        action="store_true",
    ),
    ConfigOption(
        "config",
        ["--config"],
        config=False,
        help=(
            f"Load that configuration file. "
            f"Defaults to {CONFIG_FILE_NAME} or the [tool.unusedjs] table "
            f"of {PYPROJECT_FILE_NAME} in the current directory."
        ),
        metavar="CONFIG",
        type=check_input_file,
    ),
    ConfigOption(
        "sort_key",
        ["--sort"],
        group="output_options",
        help=(
            "Sort scripts by URL, by the number of wasted bytes "
            "or by the percentage of wasted bytes, the most waste first. "
            "Default is '{default}'."
        ),
        choices=("wasted-bytes", "wasted-percent", "url"),
        default="wasted-bytes",
    ),
    ConfigOption(
        "sort_reverse",
        ["--sort-reverse"],
        group="output_options",
        help="Reverse the sort order.",
        action="store_true",
    ),
    *formats.get_options(),
]


def argument_parser_setup(parser: ArgumentParser, default_group: Any) -> None:
    """Add the options to the parser, grouped like in the help."""
    groups = {
        key: parser.add_argument_group(name, description=description)
        for key, (name, description) in CONFIG_OPTION_GROUPS.items()
    }
    for option in CONFIG_OPTIONS:
        group = default_group if option.group is None else groups[option.group]
        if option.positional:
            group.add_argument(option.name, **option.argparse_kwargs())
        else:
            group.add_argument(*option.flags, **option.argparse_kwargs())


def load_config(filename: Optional[str] = None) -> dict[str, Any]:
    """Read the settings of a config file.

    Without a filename the default config files of the working directory
    are used if present.
    """
    if filename is None and os.path.isfile(CONFIG_FILE_NAME):
        filename = os.path.abspath(CONFIG_FILE_NAME)

    if filename is not None:
        LOGGER.debug(f"Loading configuration from {filename}")
        return parse_config(_read_toml(filename), filename)

    if os.path.isfile(PYPROJECT_FILE_NAME):
        filename = os.path.abspath(PYPROJECT_FILE_NAME)
        table = _read_toml(filename).get("tool", {}).get("unusedjs")
        if table is not None:
            LOGGER.debug(f"Loading configuration from [tool.unusedjs] of {filename}")
            return parse_config(table, filename)

    return {}


def _read_toml(filename: str) -> dict[str, Any]:
    with open(filename, "rb") as fh_in:
        try:
            return tomllib.load(fh_in)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"{filename}: {e}") from None


def parse_config(config: dict[str, Any], filename: str) -> dict[str, Any]:
    """Convert the entries of a config file to settings.

    Paths are relative to the directory of the config file.

    >>> parse_config({"sort": "url", "sort-reverse": True}, "unusedjs.toml")
    {'sort_key': 'url', 'sort_reverse': True}
    >>> parse_config({"sort": "size"}, "unusedjs.toml")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ValueError: unusedjs.toml: sort: must be one of ... but got 'size'
    """
    options_by_key = {
        option.config_key: option
        for option in CONFIG_OPTIONS
        if option.config_key is not None
    }
    basedir = os.path.dirname(filename)

    settings = dict[str, Any]()
    for key, value in config.items():
        if (option := options_by_key.get(key)) is None:
            raise ValueError(f"{filename}: {key}: unknown config option")
        try:
            settings[option.name] = _convert_value(option, value, basedir)
        except (ValueError, ArgumentTypeError) as e:
            raise ValueError(f"{filename}: {key}: {e}") from None

    return settings


def _convert_value(option: ConfigOption, value: Any, basedir: str) -> Any:
    if option.action == "store_true":
        if not isinstance(value, bool):
            raise ValueError("boolean option must be true or false")
        return value

    if option.is_list:
        values = value if isinstance(value, list) else [value]
        return [_convert_single_value(option, v, basedir) for v in values]

    return _convert_single_value(option, value, basedir)


def _convert_single_value(option: ConfigOption, value: Any, basedir: str) -> Any:
    if not isinstance(value, str):
        raise ValueError(f"expected a string but got {value!r}")

    if option.type is not None:
        value = option.type(value, basedir)

    if option.choices is not None and value not in option.choices:
        choices = ", ".join(repr(choice) for choice in option.choices)
        raise ValueError(f"must be one of {choices} but got {value!r}")

    return value


def merge_options(
    config_settings: dict[str, Any], cli_settings: dict[str, Any]
) -> Options:
    """Combine the settings, the command line wins over the config file.

    >>> options = merge_options({"sort_key": "url", "verbose": True},
    ...                         {"sort_key": "wasted-percent"})
    >>> options.sort_key, options.verbose, options.sort_reverse, options.bundles
    ('wasted-percent', True, False, [])
    """
    settings = dict[str, Any]()
    for option in CONFIG_OPTIONS:
        if option.name in cli_settings:
            settings[option.name] = cli_settings[option.name]
        elif option.name in config_settings:
            settings[option.name] = config_settings[option.name]
        elif option.is_list:
            settings[option.name] = []
        else:
            settings[option.name] = option.default

    return Options(**settings)
