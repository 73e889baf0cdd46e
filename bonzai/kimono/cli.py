"""The kimono command: tools for managing multi-module repositories."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, Sequence, TypeVar

from bonzai.cmd import Cmd
from bonzai.comp import CMDS, CMDS_OPTS
from bonzai.kimono.mod import tidy
from bonzai.kimono.tag import VerPart, tag_bump, tag_delete, tag_list
from bonzai.kimono.work import work_off, work_on

__all__ = [
    "CMD",
    "STATE",
    "TAG_PUSH_ENV",
    "TAG_SHORTEN_ENV",
    "TAG_VERSION_PART_ENV",
    "TAG_DELETE_REMOTE_ENV",
    "opts_to_ver_part",
    "state_var",
    "convert_value",
    "is_truthy",
    "main",
]

T = TypeVar("T")

TAG_PUSH_ENV = "KIMONO_PUSH_TAG"
TAG_SHORTEN_ENV = "KIMONO_SHORTEN_TAG"
TAG_VERSION_PART_ENV = "KIMONO_VERSION_PART"
TAG_DELETE_REMOTE_ENV = "KIMONO_DELETE_REMOTE_TAG"

STATE: dict[str, str] = {}
"""Stored settings consulted when the matching environment variable is unset."""


def is_truthy(val: str) -> bool:
    """Interpret "t"/"true" and positive integers as true, all else false."""
    val = val.strip().lower()
    if val in ("t", "true"):
        return True
    if val in ("f", "false"):
        return False
    try:
        return int(val) > 0
    except ValueError:
        return False


def convert_value(val: str, fallback: T) -> T:
    """Convert val to the type of fallback (str, bool or int)."""
    if isinstance(fallback, bool):
        return is_truthy(val)  # type: ignore[return-value]
    if isinstance(fallback, str):
        return val  # type: ignore[return-value]
    if isinstance(fallback, int):
        try:
            return int(val)  # type: ignore[return-value]
        except ValueError:
            return 0  # type: ignore[return-value]
    return fallback


def state_var(key: str, env_var: str, fallback: T) -> T:
    """Return env_var if set, else STATE[key], else fallback, typed like fallback."""
    if env_var in os.environ:
        return convert_value(os.environ[env_var], fallback)
    if key in STATE:
        return convert_value(STATE[key], fallback)
    return fallback


def opts_to_ver_part(x: str) -> VerPart:
    """Map an option name to a version part; unknown names mean minor."""
    if x in ("major", "M"):
        return VerPart.MAJOR
    if x in ("minor", "m"):
        return VerPart.MINOR
    if x in ("patch", "p"):
        return VerPart.PATCH
    return VerPart.MINOR


# ------------------------------ commands ------------------------------


def _sanitize(x: Cmd, *args: str) -> None:
    tidy()


def _work(x: Cmd, *args: str) -> None:
    if args[0] == "on":
        work_on()
    else:
        work_off()


def _tag_list(x: Cmd, *args: str) -> None:
    for tag in tag_list(state_var("shorten-tags", TAG_SHORTEN_ENV, False)):
        print(tag)


def _tag_bump(x: Cmd, *args: str) -> None:
    must_push = state_var("push-tags", TAG_PUSH_ENV, False)
    if args:
        part = opts_to_ver_part(args[0])
    else:
        part = opts_to_ver_part(
            state_var("version-part", TAG_VERSION_PART_ENV, "patch")
        )
    tag_bump(part, must_push)


def _tag_delete(x: Cmd, *args: Any) -> None:
    tag_delete(args[0], state_var("delete-remote-tag", TAG_DELETE_REMOTE_ENV, False))


_SANITIZE_CMD = Cmd(
    name="sanitize",
    short="run `go get -u` and `go mod tidy` on all modules",
    comp=CMDS,
    call=_sanitize,
)

_WORK_CMD = Cmd(
    name="work",
    alias="w",
    short="work allows you to toggle go work files on or off",
    comp=CMDS_OPTS,
    opts="on|off",
    min_args=1,
    max_args=1,
    match_args="on|off",
    call=_work,
)

_TAG_LIST_CMD = Cmd(
    name="list",
    alias="l",
    short="list the tags for the go module",
    comp=CMDS,
    call=_tag_list,
)

_TAG_BUMP_CMD = Cmd(
    name="bump",
    alias="b|up|i|inc",
    short="bump version tags by the given version part",
    comp=CMDS_OPTS,
    opts="major|minor|patch|m|M|p",
    max_args=1,
    call=_tag_bump,
)

_TAG_DELETE_CMD = Cmd(
    name="delete",
    alias="d|del|rm",
    short="delete the given tag from the go module",
    comp=CMDS,
    min_args=1,
    call=_tag_delete,
)

_TAG_CMD = Cmd(
    name="tag",
    alias="t",
    short="bump version tags and list the module's tags",
    comp=CMDS,
    cmds=[_TAG_LIST_CMD, _TAG_BUMP_CMD, _TAG_DELETE_CMD],
    default=_TAG_LIST_CMD,
)

CMD = Cmd(
    name="kimono",
    alias="kmono|km",
    short="kimono is a tool for managing module monorepos",
    vers="0.0.1",
    comp=CMDS,
    cmds=[_SANITIZE_CMD, _WORK_CMD, _TAG_CMD],
)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the kimono command with argv (default: the command line)."""
    args = sys.argv[1:] if argv is None else list(argv)
    CMD.run(*args)