"""Version tags for the Go module in the current directory of a git repo."""

from __future__ import annotations

import os
import re
import subprocess
from enum import IntEnum
from functools import cmp_to_key
from pathlib import Path
from typing import Optional

__all__ = [
    "VerPart",
    "tag_bump",
    "tag_list",
    "tag_delete",
    "version_bump",
    "is_valid_tag",
    "module_prefix",
]


class VerPart(IntEnum):
    """The part of a semantic version to bump."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2


# ------------------------------ helpers -------------------------------


def _here_or_above(name: str, start: Optional[str] = None) -> str:
    """Return the path of name in start (or cwd) or the nearest parent."""
    here = Path(start or os.getcwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / name
        if candidate.exists():
            return str(candidate)
    raise FileNotFoundError(f"{name} not found here or above {here}")


def _out(*cmd: str, cwd: Optional[str] = None) -> str:
    """Return the standard output of cmd without the final newline."""
    try:
        result = subprocess.run(
            list(cmd), capture_output=True, text=True, cwd=cwd, check=False
        )
    except OSError:
        return ""
    return (result.stdout or "").rstrip("\n")


def _exec(*cmd: str, cwd: Optional[str] = None) -> None:
    """Run cmd attached to the terminal; raise CalledProcessError on failure."""
    subprocess.run(list(cmd), cwd=cwd, check=True)


# ------------------------------- semver -------------------------------

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_NUM = r"(0|[1-9][0-9]*)"
_SEMVER = re.compile(
    rf"^v{_NUM}(?:\.{_NUM}(?:\.{_NUM}(?:-({_IDENT}))?(?:\+({_IDENT}))?)?)?$"
)


def _parse_semver(version: str) -> Optional[tuple[int, int, int, list[str]]]:
    match = _SEMVER.match(version)
    if match is None:
        return None
    major, minor, patch, pre, _build = match.groups()
    prerelease = pre.split(".") if pre else []
    for ident in prerelease:
        if ident.isdigit() and len(ident) > 1 and ident.startswith("0"):
            return None
    return int(major), int(minor or 0), int(patch or 0), prerelease


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_prerelease(a: list[str], b: list[str]) -> int:
    if a == b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    for x, y in zip(a, b):
        if x == y:
            continue
        x_num, y_num = x.isdigit(), y.isdigit()
        if x_num and y_num:
            return _cmp(int(x), int(y))
        if x_num != y_num:
            return -1 if x_num else 1
        return _cmp(x, y)
    return _cmp(len(a), len(b))


def _compare_versions(a: str, b: str) -> int:
    pa, pb = _parse_semver(a), _parse_semver(b)
    if pa is None or pb is None:
        return _cmp(pa is not None, pb is not None)
    result = _cmp(pa[:3], pb[:3])
    if result:
        return result
    return _compare_prerelease(pa[3], pb[3])


def _version_order(a: str, b: str) -> int:
    return _compare_versions(a, b) or _cmp(a, b)


# -------------------------------- tags --------------------------------


def is_valid_tag(tag: str, prefix: str) -> bool:
    """Return True if tag belongs to the module with this tag prefix."""
    if prefix:
        return tag.startswith(prefix)
    return _parse_semver(tag) is not None


def module_prefix() -> str:
    """Return the module's directory relative to the repo root plus '/'.

    Returns an empty string for a module at the repository root or when
    no repository or module is found.
    """
    try:
        root = _here_or_above(".git")
        module = _here_or_above("go.mod")
    except FileNotFoundError:
        return ""
    try:
        rel = os.path.relpath(os.path.dirname(module), os.path.dirname(root))
    except ValueError:
        return ""
    if rel == ".":
        return ""
    return rel.replace(os.sep, "/") + "/"


def tag_list(shorten: bool) -> list[str]:
    """Return the current module's tags in semantic version order.

    With shorten the module prefix is removed from each tag.
    """
    prefix = module_prefix()
    tags = []
    for tag in _out("git", "tag", "-l", "--no-column").split("\n"):
        if not is_valid_tag(tag, prefix):
            continue
        if shorten and tag.startswith(prefix):
            tag = tag[len(prefix):]
        tags.append(tag)
    return sorted(tags, key=cmp_to_key(_version_order))


def version_bump(version: str, part: VerPart) -> str:
    """Return version with the given part increased and later parts zeroed.

    A leading "v" is kept. Raises ValueError for a malformed version.
    """
    leading = "v" if version.startswith("v") else ""
    parts = version[len(leading):].split(".")
    if len(parts) != 3:
        raise ValueError(f"invalid version: {version}")
    index = VerPart(part).value
    try:
        number = int(parts[index])
    except ValueError:
        raise ValueError(f"invalid version part {parts[index]!r} in {version}") from None
    parts[index] = str(number + 1)
    for later in range(index + 1, 3):
        parts[later] = "0"
    return leading + ".".join(parts)


def tag_bump(part: VerPart, must_push: bool) -> None:
    """Create the next version tag for the module and optionally push it."""
    versions = tag_list(True)
    latest = versions[-1] if versions else "v0.0.0"
    prefix = module_prefix()
    try:
        new_version = version_bump(latest, part)
    except ValueError as err:
        raise ValueError(f"failed to bump version: {err}") from err
    tag = f"{prefix}{new_version}"
    print(tag)
    _exec("git", "tag", tag)
    if must_push:
        _exec("git", "push", "origin", tag)


def tag_delete(tag: str, remote: bool) -> None:
    """Delete tag from the local repository, and from origin if remote."""
    if tag not in tag_list(False):
        raise ValueError(f"tag '{tag}' not found")
    try:
        _exec("git", "tag", "-d", tag)
    except (subprocess.CalledProcessError, OSError) as err:
        raise RuntimeError(f"failed to delete local tag '{tag}': {err}") from err
    print("Deleted local tag:", tag)
    if remote:
        try:
            _exec("git", "push", "origin", "--delete", tag)
        except (subprocess.CalledProcessError, OSError) as err:
            raise RuntimeError(f"failed to delete remote tag '{tag}': {err}") from err
        print("Deleted remote tag:", tag)