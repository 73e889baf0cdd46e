"""Command trees with delegation, aliases, argument checks and completion."""

from __future__ import annotations

import copy
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

__all__ = [
    "BonzaiError",
    "InvalidNameError",
    "IncorrectUsageError",
    "UncallableError",
    "CallOrDefError",
    "NotEnoughArgsError",
    "TooManyArgsError",
    "WrongNumArgsError",
    "InvalidShortError",
    "Completer",
    "Cmd",
    "is_valid_name",
]

MAX_SHORT = 50


def is_valid_name(name: str) -> bool:
    """Return True if name is non-empty lowercase ASCII letters and dashes."""
    return bool(name) and all("a" <= ch <= "z" or ch == "-" for ch in name)


# ------------------------------- errors -------------------------------


class BonzaiError(Exception):
    """Base class for errors raised while resolving or running commands."""


class InvalidNameError(BonzaiError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid name: {name}")


class IncorrectUsageError(BonzaiError):
    def __init__(self, cmd: Cmd) -> None:
        self.cmd = cmd
        if not cmd.usage:
            message = f'incorrect usage for "{cmd.name}" command'
        else:
            message = f"usage: {cmd.name} {cmd.usage}"
        super().__init__(message)


class UncallableError(BonzaiError):
    def __init__(self, cmd: Cmd) -> None:
        self.cmd = cmd
        super().__init__(f"Cmd requires Call or Def: {cmd.name}")


class CallOrDefError(BonzaiError):
    def __init__(self, cmd: Cmd) -> None:
        self.cmd = cmd
        super().__init__(f"Call or Def (not both): {cmd.name}")


class NotEnoughArgsError(BonzaiError):
    def __init__(self, count: int, minimum: int) -> None:
        self.count = count
        self.min = minimum
        super().__init__(f"{count} is not enough arguments, {minimum} required")


class TooManyArgsError(BonzaiError):
    def __init__(self, count: int, maximum: int) -> None:
        self.count = count
        self.max = maximum
        super().__init__(f"{count} is too many arguments, {maximum} maximum")


class WrongNumArgsError(BonzaiError):
    def __init__(self, count: int, num: int) -> None:
        self.count = count
        self.num = num
        super().__init__(f"{count} arguments, {num} required")


class InvalidShortError(BonzaiError):
    def __init__(self, cmd: Cmd) -> None:
        self.cmd = cmd
        super().__init__(f"short length >{MAX_SHORT} {cmd}: {cmd.short}")


# ------------------------------ completer -----------------------------


class Completer:
    """Completes the arguments of a command.

    Subclasses override ``complete``; it must never raise and always
    returns a list, empty when there is nothing to offer.
    """

    def complete(self, x: Cmd, *args: str) -> list[str]:
        """Return possible completions for args of command x."""
        return []


# -------------------------------- Cmd ---------------------------------


def _split(value: str) -> list[str]:
    return value.split("|") if value else []


def _exe_name() -> str:
    if not sys.argv or not sys.argv[0]:
        return ""
    return os.path.splitext(os.path.basename(sys.argv[0]))[0]


def _args_from(line: str) -> list[str]:
    args = line.split()
    if line and line[-1].isspace():
        args.append("")
    return args


@dataclass(eq=False, repr=False)
class Cmd:
    """A command: either does work through ``call`` or delegates to
    ``default`` and to its sub-commands in ``cmds``."""

    name: str = ""
    alias: str = ""
    opts: str = ""
    call: Optional[Callable[..., Any]] = None
    default: Optional[Cmd] = None
    cmds: list[Cmd] = field(default_factory=list)
    hide: str = ""
    usage: str = ""
    vers: str = ""
    short: str = ""
    long: str = ""
    min_args: int = 0
    max_args: int = 0
    num_args: int = 0
    match_args: str = ""
    comp: Optional[Completer] = None
    caller: Optional[Cmd] = None

    _aliases: Optional[list[str]] = field(default=None, init=False)
    _opts: Optional[list[str]] = field(default=None, init=False)
    _hidden: Optional[list[str]] = field(default=None, init=False)
    _cmd_alias: Optional[dict[str, Cmd]] = field(default=None, init=False)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Cmd(name={self.name!r})"

    def with_name(self, name: str) -> Cmd:
        """Return a shallow copy of this command with a different name."""
        clone = copy.copy(self)
        clone.name = name
        return clone

    def names(self) -> list[str]:
        """Return all non-empty aliases followed by the name."""
        return [a for a in self.alias_slice() if a] + [self.name]

    # ------------------------------ caches ------------------------------

    def cache_cmd_alias(self) -> None:
        """Rebuild the map of sub-command aliases to sub-commands."""
        self._cmd_alias = {}
        if not self.cmds or not self.name:
            return
        for c in self.cmds:
            for a in c.alias_slice():
                self._cmd_alias[a] = c

    def cmd_alias_map(self) -> dict[str, Cmd]:
        """Return the sub-command alias map, building it if needed."""
        if self._cmd_alias is None:
            self.cache_cmd_alias()
        return self._cmd_alias

    def cache_opts(self) -> None:
        """Rebuild the cached list of options from ``opts``."""
        self._opts = _split(self.opts)

    def opts_slice(self) -> list[str]:
        """Return the options as a list, building the cache if needed."""
        if self._opts is None:
            self.cache_opts()
        return self._opts

    def cache_alias(self) -> None:
        """Rebuild the cached alias list; raise InvalidNameError on a bad alias."""
        aliases = _split(self.alias)
        self._aliases = aliases
        for a in aliases:
            if not is_valid_name(a):
                raise InvalidNameError(a)

    def alias_slice(self) -> list[str]:
        """Return the aliases as a list, building the cache if needed."""
        if self._aliases is None:
            self.cache_alias()
        return self._aliases

    def cache_hide(self) -> None:
        """Rebuild the cached list of hidden names from ``hide``."""
        self._hidden = _split(self.hide)

    def hide_slice(self) -> list[str]:
        """Return the hidden names as a list, building the cache if needed."""
        if self._hidden is None:
            self.cache_hide()
        return self._hidden

    # ------------------------------- run --------------------------------

    def run(self, *args: str) -> None:
        """Resolve and execute the leaf command, then exit the program.

        Uses ``sys.argv[1:]`` when no args are given. Exits with status 0
        on success and 1 (after printing the error) on any failure.
        Handles bash self-completion when COMP_LINE is set and multicall
        invocation through the executable's name.
        """
        try:
            self._check_valid_name()
            self._check_valid_short()
            self._recurse_if_multi(list(args))
            self._detect_completion()
            argv = list(args) if args else sys.argv[1:]
            c, rest = self.seek(argv)
            c._check_callable()
            c._check_args(rest)
            c._call(rest)
        except Exception as err:  # noqa: BLE001 - every failure ends the program
            print(err, file=sys.stderr)
            raise SystemExit(1) from err
        raise SystemExit(0)

    def is_hidden(self) -> bool:
        """Return True if the name is among the hidden names."""
        return self.name in self.hide_slice()

    def _has(self, c: Cmd) -> bool:
        return any(this.name == c.name for this in self.cmds)

    def _call(self, args: list[str]) -> None:
        if self.caller is None:
            self.caller = self
        if self.call is not None:
            self.call(self, *args)
            return
        if self.default is not None:
            self.default._call(args)

    def _check_callable(self) -> None:
        if self.call is None and self.default is None:
            raise UncallableError(self)
        if self.call is not None and self.default is not None:
            raise CallOrDefError(self)

    def _check_args(self, args: list[str]) -> None:
        count = len(args)
        if count < self.min_args:
            raise NotEnoughArgsError(count, self.min_args)
        if self.max_args > 0 and count > self.max_args:
            raise TooManyArgsError(count, self.max_args)
        if self.num_args > 0 and count != self.num_args:
            raise WrongNumArgsError(count, self.num_args)

    def _check_valid_name(self) -> None:
        if not is_valid_name(self.name):
            raise InvalidNameError(self.name)

    def _check_valid_short(self) -> None:
        if len(self.short.encode("utf-8")) > MAX_SHORT:
            raise InvalidShortError(self)

    def _recurse_if_multi(self, args: list[str]) -> None:
        name = _exe_name()
        if name == self.name:
            return
        c = self.can(name)
        if c is not None:
            c.run(*args)
            return
        if "-" in name:
            parts = name.split("-")
            if parts[0] == self.name:
                parts = parts[1:]
            c = self.can(parts[0])
            if c is not None:
                if len(parts) > 1:
                    args = parts[1:] + args
                c.run(*args)

    def _detect_completion(self) -> None:
        line = os.environ.get("COMP_LINE", "")
        if not line:
            return
        cmd, args = self.seek(_args_from(line)[1:])
        if cmd.comp is None:
            raise SystemExit(0)
        if not args:
            print(cmd.name)
            raise SystemExit(0)
        for item in cmd.comp.complete(cmd, *args):
            print(item)
        raise SystemExit(0)

    # ---------------------------- structure -----------------------------

    def root(self) -> Optional[Cmd]:
        """Return the root command found by walking the callers."""
        cmds = self.path_cmds()
        if cmds:
            return cmds[0].caller
        return self.caller

    def is_root(self) -> bool:
        """Return True if this command is its own caller."""
        return self.caller is self

    def prepend_cmd(self, cmd: Cmd) -> None:
        """Insert cmd at the start of the sub-commands."""
        self.cmds.insert(0, cmd)

    def append_cmd(self, cmd: Cmd) -> None:
        """Add cmd at the end of the sub-commands."""
        self.cmds.append(cmd)

    def add(self, name: str, *args: str) -> Cmd:
        """Create a sub-command with name and aliases, add and return it."""
        c = Cmd(name=name, alias="|".join(args))
        self.cmds.append(c)
        return c

    def resolve(self, name: str) -> Optional[Cmd]:
        """Return the sub-command with this name or alias, or None."""
        if not self.cmds:
            return None
        return self._lookup(name)

    def can(self, *args: str) -> Optional[Cmd]:
        """Return the sub-command reached by following each name in turn."""
        if not args:
            return None
        c = self._lookup(args[0])
        if c is None or len(args) == 1:
            return c
        return c.can(*args[1:])

    def _lookup(self, name: str) -> Optional[Cmd]:
        for c in self.cmds:
            if c.name == name:
                return c
        return self.cmd_alias_map().get(name)

    def cmd_names(self) -> list[str]:
        """Return the non-empty names of all sub-commands."""
        return [c.name for c in self.cmds if c.name]

    def opt(self, p: str) -> str:
        """Return p if it is one of the options, otherwise an empty string."""
        return p if p in self.opts_slice() else ""

    def seek(self, args: list[str]) -> tuple[Cmd, list[str]]:
        """Return the deepest command named by args and the remaining args.

        Sets ``caller`` on each command passed through.
        """
        args = list(args)
        if (len(args) == 1 and args[0] == "") or not self.cmds:
            return self, args
        cur = self
        n = 0
        for arg in args:
            nxt = cur.resolve(arg)
            if nxt is None:
                break
            nxt.caller = cur
            cur = nxt
            n += 1
        return cur, args[n:]

    def _path(self) -> list[Cmd]:
        path = [self]
        p = self.caller
        while p is not None:
            path.insert(0, p)
            if p is p.caller:
                break
            p = p.caller
        return path[1:]

    def path_cmds(self) -> list[Cmd]:
        """Return the commands from below the top caller down to this one."""
        return self._path()

    def path_names(self) -> list[str]:
        """Return the names of the commands given by ``path_cmds``."""
        return [c.name for c in self._path()]