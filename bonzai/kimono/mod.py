"""Maintenance of the Go modules found in the current git repository."""

from __future__ import annotations

import os
import subprocess

from bonzai.kimono.tag import _exec, _here_or_above, _out

__all__ = ["tidy", "list_dependents", "list_dependencies"]

_SKIP = (".git", "vendor")


def _raise(err: OSError) -> None:
    raise err


def _repo_top() -> str:
    return os.path.dirname(_here_or_above(".git"))


def _dependency_lines(path: str) -> list[str]:
    return _out("go", "list", "-m", "all", cwd=path).split("\n")


def _has_dependencies(path: str) -> bool:
    return len(_dependency_lines(path)) > 1


def tidy() -> None:
    """Run ``go get -u`` and ``go mod tidy`` in every module of the repo.

    Only directories holding a go.mod are descended into; modules without
    dependencies, ``.git`` and ``vendor`` are skipped. Failures of the two
    go commands are ignored.
    """
    for path, dirnames, _files in os.walk(_repo_top(), onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP)
        if not os.path.exists(os.path.join(path, "go.mod")):
            dirnames.clear()
            continue
        if not _has_dependencies(path):
            dirnames.clear()
            continue
        print(f"\n{path}:")
        for cmd in (("go", "get", "-u"), ("go", "mod", "tidy")):
            try:
                _exec(*cmd, cwd=path)
            except (subprocess.CalledProcessError, OSError):
                pass


def list_dependents() -> list[str]:
    """Return the directories of repo modules that require this module."""
    module = _out("go", "list", "-m")
    dependents = []
    for path, dirnames, _files in os.walk(_repo_top(), onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP)
        if not os.path.exists(os.path.join(path, "go.mod")):
            continue
        lines = _dependency_lines(path)
        if len(lines) <= 1:
            dirnames.clear()
            continue
        if any(line.split()[:1] == [module] for line in lines[1:]):
            dependents.append(path)
    return dependents


def list_dependencies() -> list[str]:
    """Return the lines of ``go list -m all`` for the current module.

    Raises CalledProcessError when the command fails.
    """
    result = subprocess.run(
        ["go", "list", "-m", "all"], capture_output=True, text=True, check=True
    )
    return result.stdout.splitlines()