"""Ready-made completers for command names, options, files and directories."""

from __future__ import annotations

import os
from typing import Iterable

from bonzai.cmd import Cmd, Completer

__all__ = [
    "CmdsCompleter",
    "OptsCompleter",
    "FileDirCompleter",
    "Combine",
    "CMDS",
    "OPTS",
    "FILE_DIR",
    "CMDS_OPTS",
    "FILE_DIR_CMDS_OPTS",
]


def _has_prefix(items: Iterable[str], prefix: str) -> list[str]:
    return [item for item in items if item.startswith(prefix)]


def _dir_entries(directory: str) -> list[str]:
    """Return the sorted entries of directory, joined to it unless it is '.'."""
    try:
        names = sorted(os.listdir(directory or "."))
    except OSError:
        return []
    if directory in ("", "."):
        return names
    base = directory.rstrip("/") + "/"
    return [base + name for name in names]


def _add_slash(paths: Iterable[str]) -> list[str]:
    return [p + "/" if os.path.isdir(p) else p for p in paths]


class CmdsCompleter(Completer):
    """Completes the visible sub-command names of a command."""

    def complete(self, x: Cmd, *args: str) -> list[str]:
        names = [c.name for c in x.cmds if not c.is_hidden()]
        if not args:
            return names
        return _has_prefix(names, args[0])


class OptsCompleter(Completer):
    """Completes the options of a command."""

    def complete(self, x: Cmd, *args: str) -> list[str]:
        options = list(x.opts_slice())
        if not args:
            return options
        return _has_prefix(options, args[0])


class FileDirCompleter(Completer):
    """Completes file and directory paths much as bash does.

    Paths use forward slashes; directories get a trailing slash. With no
    argument the current directory is listed.
    """

    def complete(self, x: Cmd, *args: str) -> list[str]:
        if len(args) > 1:
            return []
        if not args or args[0] == "":
            return _add_slash(_dir_entries("."))

        first = args[0].rstrip("/")
        cut = first.rfind("/") + 1
        directory, prefix = first[:cut], first[cut:]

        if directory == "":
            matches = _has_prefix(_dir_entries("."), prefix)
            if len(matches) == 1 and os.path.isdir(matches[0]):
                return _add_slash(_dir_entries(matches[0]))
            return _add_slash(matches)

        while True:
            matches = [
                p for p in _dir_entries(directory)
                if os.path.basename(p).startswith(prefix)
            ]
            if len(matches) > 1 or not matches:
                return _add_slash(matches)
            if os.path.isdir(matches[0]):
                directory = matches[0]
                continue
            return _add_slash(matches)


class Combine(Completer):
    """Joins the results of several completers, dropping duplicates."""

    def __init__(self, *completers: Completer) -> None:
        self.completers = list(completers)

    def complete(self, x: Cmd, *args: str) -> list[str]:
        results: list[str] = []
        for completer in self.completers:
            results.extend(completer.complete(x, *args))
        return list(dict.fromkeys(results))


CMDS = CmdsCompleter()
OPTS = OptsCompleter()
FILE_DIR = FileDirCompleter()
CMDS_OPTS = Combine(CMDS, OPTS)
FILE_DIR_CMDS_OPTS = Combine(FILE_DIR, CMDS_OPTS)