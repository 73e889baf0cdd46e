"""Command trees with bash self-completion, completers, a queue-stack, a node tree and two commands."""

__version__ = "0.1.0"