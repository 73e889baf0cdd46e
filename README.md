# bonzai

Build command-line programs as trees of commands. Each `Cmd` has a
name, may carry aliases and options, and either does its own work
(`call`) or hands off to a default subcommand (`default`). Running the
tree resolves the words on the command line down to the deepest
matching command. It then checks the argument counts and calls that
command.

Bash self-completion (`complete -C prog prog`) is built in. When
`COMP_LINE` is set, the resolved command's completer prints the
candidates, one per line, and nothing is run. A program started under
the name of one of its subcommands runs that subcommand directly. This
happens when the program is reached through a link or a copy. A name
such as `prog-sub` is split on dashes and treated the same way.

## Commands

Two programs are installed with the package.

### sunrise

Fills the terminal with a slowly shifting wall of 24-bit background
colours. It runs until it is interrupted.

```
sunrise        # 10 ms between lines
sunrise 40     # 40 ms between lines
```

A delay that is not a number is taken as 0. Press Ctrl-C to stop. The
screen and cursor are then restored.

### kimono

Helps manage a git repository that holds several Go modules. It runs
`git` and `go`, so both must be on the `PATH`.

```
kimono sanitize          # `go get -u` and `go mod tidy` in every module with dependencies
kimono work on           # rename every go.work.off to go.work
kimono work off          # rename every go.work to go.work.off
kimono tag               # list the version tags of the current module
kimono tag list
kimono tag bump          # bump the configured part (patch by default)
kimono tag bump minor    # or: major, minor, patch, M, m, p
kimono tag delete TAG    # delete a tag of the current module
```

`sanitize`, `work` and the module search skip `.git` and `vendor`
directories.

The current module's tags carry its directory relative to the
repository root as a prefix, for example `sub/mod/v1.2.3`. A module at
the root uses plain semantic-version tags such as `v1.2.3`. Tags are
listed in semantic-version order.

Some settings are read from the environment:

| Variable                   | Effect                                      |
|----------------------------|---------------------------------------------|
| `KIMONO_PUSH_TAG`          | push a newly created tag to `origin`        |
| `KIMONO_SHORTEN_TAG`       | list tags without the module path prefix    |
| `KIMONO_VERSION_PART`      | part to bump when none is given             |
| `KIMONO_DELETE_REMOTE_TAG` | also delete the tag from `origin`           |

Boolean values accept `t`, `true`, `f` or `false`, in any case. An
integer also works: a positive one means true. If a variable is unset,
the value is looked up in the in-process mapping
`bonzai.kimono.cli.STATE`, under the keys `push-tags`, `shorten-tags`,
`version-part` and `delete-remote-tag`. If it is not there either, the
default is used.

## Library

### Command trees

```python
from bonzai.cmd import Cmd
from bonzai.comp import CmdsCompleter

def hello(x, *args):
    print("hello", *args)

root = Cmd(name="greet", comp=CmdsCompleter())
root.add("hello", "hi").call = hello

leaf, rest = root.seek(["hi", "world"])
print(leaf.name, rest)              # hello ['world']
print(root.can("hello").names())    # ['hi', 'hello']
```

`Cmd.run(*args)` is the entry point of a program. It reads
`sys.argv[1:]` when no arguments are given. It always ends with
`SystemExit`: status 0 on success, status 1 after printing the error on
any failure.

Other methods:

- `resolve` and `can` look commands up by name or alias.
- `seek` finds the deepest command and the remaining arguments, setting
  `caller` on the way.
- `path_cmds`, `path_names`, `root` and `is_root` inspect the caller
  chain.
- `add`, `append_cmd` and `prepend_cmd` build the tree.
- `alias_slice`, `opts_slice`, `hide_slice`, `opt`, `names`,
  `cmd_names` and `is_hidden` read the `|`-separated fields.
- `with_name` makes a renamed copy.

`is_valid_name` accepts non-empty names made of lowercase ASCII letters
and dashes. Problems with a command's definition or its arguments raise
subclasses of `BonzaiError`:

- `InvalidNameError`
- `IncorrectUsageError`
- `UncallableError`
- `CallOrDefError`
- `NotEnoughArgsError`
- `TooManyArgsError`
- `WrongNumArgsError`
- `InvalidShortError` (for a `short` longer than 50 bytes)

### Completers

`bonzai.comp` provides these completers:

- `CmdsCompleter` completes the visible subcommand names.
- `OptsCompleter` completes the command's options.
- `FileDirCompleter` completes files and directories, bash style, with
  a trailing `/` on directories.
- `Combine` merges the results of several completers, dropping
  duplicates.

Ready-made instances are `CMDS`, `OPTS`, `FILE_DIR`, `CMDS_OPTS` and
`FILE_DIR_CMDS_OPTS`. A custom completer subclasses
`bonzai.cmd.Completer` and overrides `complete(x, *args)` to return a
list of strings.

### Data structures

- `bonzai.qstack.QS` is a combined queue and stack. It has `push`,
  `pop`, `shift`, `unshift`, `peek`, `items`, `scan`/`current`, `copy`
  and `to_json`, and supports `len()` and iteration.
  `bonzai.qstack.fields(text)` splits text on whitespace into a `QS`.
- `bonzai.tree.Node` is a rooted tree node with an integer type `t`, a
  value `v`, a `parent` and a `count` of child nodes. It has `add`,
  `append`, `cut`, `take`, `morph`, `copy`, `init`, `nodes`,
  `walk_levels`, `walk_deep_pre` and `to_json`, which produces
  `{"T":..,"V":..,"N":[..]}`.
- `bonzai.sets.minus(items, removed)` returns the string forms of
  `items` that do not appear among `removed`.

### Small helpers

- `bonzai.choose.choose(choices)` prints a numbered menu and returns
  the index and value picked. It returns `(-1, None)` when the user
  types `q`.
- `bonzai.anim.simple_animation_screen()` switches to the alternate
  screen and hides the cursor. Both are restored on SIGINT or SIGTERM.

## What it does not do

- Commands have no built-in help or version subcommand. The `usage`,
  `vers`, `short` and `long` fields are stored and appear only in error
  messages.
- `match_args` is stored but not checked against the arguments.
- kimono's settings are not stored anywhere. `STATE` lives only in the
  running process, and there is no command to view or change it.

## Testing

The test suite uses pytest. Install the `test` extra to get it.