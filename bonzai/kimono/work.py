"""Switch the go.work files of a git repository on and off."""

from __future__ import annotations

import os

from bonzai.kimono.tag import _here_or_above

__all__ = ["work_on", "work_off"]

_SKIP = (".git", "vendor")
WORK = "go.work"
WORK_OFF = "go.work.off"


def _raise(err: OSError) -> None:
    raise err


def _rename_all(source: str, target: str) -> list[str]:
    top = os.path.dirname(_here_or_above(".git"))
    changed = []
    for path, dirnames, _files in os.walk(top, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP)
        src = os.path.join(path, source)
        if os.path.exists(src):
            os.replace(src, os.path.join(path, target))
            changed.append(path)
    return changed


def work_on() -> list[str]:
    """Rename every go.work.off in the repo to go.work; return the dirs."""
    return _rename_all(WORK_OFF, WORK)


def work_off() -> list[str]:
    """Rename every go.work in the repo to go.work.off; return the dirs."""
    return _rename_all(WORK, WORK_OFF)