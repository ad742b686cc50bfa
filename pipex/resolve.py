"""Locating commands on the search path."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pipex.text import split


class PipexError(Exception):
    """An error that ends the program with ``status`` as its exit code."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class CommandNotFoundError(PipexError):
    """The command could not be located; exit code 127."""

    def __init__(self, message: str = "command not found") -> None:
        super().__init__(message, 127)


def split_command(text: str) -> list[str]:
    """Split a command line into words on spaces, dropping empty words."""
    return split(text, " ")


def find_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the path of ``cmd``, or None when it cannot be found.

    A command containing ``/`` is used as it is when it exists.  Otherwise
    every non-empty directory of ``PATH`` is tried in order and the first
    existing ``dir/cmd`` wins.  Without ``PATH`` nothing is found.
    """
    if env is None:
        env = os.environ
    if "/" in cmd and os.path.exists(cmd):
        return cmd
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(
    text: str, env: Optional[Mapping[str, str]] = None
) -> tuple[str, list[str]]:
    """Split a command line and locate its program.

    Returns the program path and the argument list.  Raises
    :class:`CommandNotFoundError` when the line is empty or the program
    cannot be found.
    """
    args = split_command(text)
    if not args:
        raise CommandNotFoundError()
    path = find_path(args[0], env)
    if path is None:
        raise CommandNotFoundError()
    return path, args