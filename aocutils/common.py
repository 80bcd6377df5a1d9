"""Command-line and filesystem helpers shared by the tools."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, NoReturn

FIRST_YEAR = 2015


def add_flag(
    parser: argparse.ArgumentParser, name: str, default: Any, usage: str
) -> argparse.Action:
    """Add ``--name`` with ``-n`` (its first letter) as shorthand."""
    options = [f"--{name}", f"-{name[0]}"]
    if isinstance(default, bool):
        return parser.add_argument(
            *options,
            dest=name,
            default=default,
            help=usage,
            action=argparse.BooleanOptionalAction,
        )
    kwargs: dict[str, Any] = {"dest": name, "default": default, "help": usage}
    if default is not None:
        kwargs["type"] = type(default)
    return parser.add_argument(*options, **kwargs)


def list_folders(path: str | os.PathLike[str]) -> list[str]:
    """Return the names of the directories in ``path``, in reverse order."""
    try:
        with os.scandir(path) as entries:
            folders = [entry.name for entry in entries if entry.is_dir()]
    except OSError as err:
        quit_if_error(err, "Error reading directory:")
    return sorted(folders, reverse=True)


def quit_if_error(err: BaseException | None, message: str) -> None | NoReturn:
    """Print ``message`` and ``err`` and exit with status 1 if ``err`` is set."""
    if err is None:
        return None
    print(message, err)
    sys.exit(1)