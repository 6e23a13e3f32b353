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
Declarations of the unusedjs settings.

Each setting is declared once as a :class:`ConfigOption` and used for the
command line as well as for the config file.
"""

from __future__ import annotations
from argparse import SUPPRESS, ArgumentTypeError
from dataclasses import dataclass, field
import os
from typing import Any, Callable, Optional, Union


class Options:
    """The merged settings, one attribute per option name."""

    def __init__(self, **kwargs: Any) -> None:
        self.__dict__.update(kwargs)

    def get(self, name: str) -> Any:
        """Get a setting, ``None`` if it is unknown."""
        return self.__dict__.get(name)


def check_input_file(value: str, basedir: Optional[str] = None) -> str:
    """Get the absolute path of an existing input file.

    A relative path is resolved against ``basedir``, which defaults to the
    working directory.
    """
    path = os.path.normpath(os.path.join(basedir or os.getcwd(), value))
    if not os.path.isfile(path):
        raise ArgumentTypeError(f"Should be a file that already exists: {path!r}")
    return path


class ReportOutput:
    """Where to write a report, ``ReportOutput(None)`` and ``-`` mean STDOUT.

    >>> ReportOutput(None).path is None, ReportOutput("-").path is None
    (True, True)
    >>> ReportOutput("report.txt", "/tmp").path
    '/tmp/report.txt'
    """

    def __init__(self, value: Optional[str], basedir: Optional[str] = None) -> None:
        self.value = value
        self.path: Optional[str] = None
        if value in (None, "-"):
            return

        path = os.path.normpath(os.path.join(basedir or os.getcwd(), value))
        if not os.path.isdir(os.path.dirname(path)):
            raise ArgumentTypeError(
                f"Could not create output file {value!r}: "
                "the parent directory does not exist"
            )
        self.path = path

    def __repr__(self) -> str:
        return f"ReportOutput({self.value!r})"


@dataclass
class ConfigOption:  # pylint: disable=too-many-instance-attributes
    """A setting of the command line and of the config file.

    An option without flags is positional. The config key defaults to the
    long flag without the dashes, ``config=False`` keeps the option out of
    config files. ``{default}`` in the help is replaced by the default.

    >>> option = ConfigOption("sort_key", ["--sort"], help="Default {default}.",
    ...                       default="url")
    >>> option.config_key, option.help
    ('sort', 'Default url. Config key: sort.')
    """

    name: str
    flags: list[str] = field(default_factory=list)
    help: str = ""
    action: str = "store"
    choices: Optional[tuple[str, ...]] = None
    config: Union[str, bool] = True
    const: Any = None
    default: Any = None
    group: Optional[str] = None
    metavar: Union[str, tuple[str, ...], None] = None
    nargs: Union[int, str, None] = None
    type: Optional[Callable[..., Any]] = None
    config_key: Optional[str] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if not self.help:
            raise AssertionError(f"Help required for option {self.name!r}.")
        if self.action not in ("store", "store_true", "append"):
            raise AssertionError(f"Unknown action {self.action!r} of {self.name!r}.")

        if self.config is True:
            self.config_key = self.flags[-1].lstrip("-")
        elif self.config is not False:
            self.config_key = self.config

        if self.action == "store_true":
            self.default = False
        self.help = self.help.format(default=self.default)
        if self.config_key is not None:
            self.help += f" Config key: {self.config_key}."

    @property
    def positional(self) -> bool:
        """True if the option has no flags."""
        return not self.flags

    @property
    def is_list(self) -> bool:
        """True if the option collects several values."""
        return self.action == "append" or self.nargs == "*"

    def argparse_kwargs(self) -> dict[str, Any]:
        """Get the arguments of ``ArgumentParser.add_argument``."""
        # The defaults are set after merging with the config file.
        kwargs: dict[str, Any] = {
            "action": self.action,
            "default": SUPPRESS,
            "help": self.help,
        }
        if not self.positional:
            kwargs["dest"] = self.name
        if self.action == "store_true":
            return kwargs

        kwargs["metavar"] = self.metavar
        if self.nargs == "?":
            kwargs["const"] = self.const
        for name in ("choices", "nargs", "type"):
            if (value := getattr(self, name)) is not None:
                kwargs[name] = value
        return kwargs
