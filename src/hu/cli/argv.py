"""Argument preprocessing applied before Typer parses ``sys.argv``."""

from __future__ import annotations

# Flags accepted anywhere on the command line but owned by the root callback
_GLOBAL_FLAGS = frozenset({"--debug"})


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer.

    Applied rules (in order):
    1. ``--version`` / ``-V`` as first arg → ``version`` subcommand
    2. Global flags hoisted before the subcommand, so ``hu read x.py --debug``
       works like ``hu --debug read x.py``. Tokens after ``--`` are
       positional and left alone.
    """
    if not argv:
        return argv

    if argv[0] in ("--version", "-V"):
        return ["version"]

    if "--" in argv:
        split = argv.index("--")
        options, positional = argv[:split], argv[split:]
    else:
        options, positional = argv, []

    hoisted = [flag for flag in sorted(_GLOBAL_FLAGS) if flag in options]
    rest = [token for token in options if token not in _GLOBAL_FLAGS]
    return [*hoisted, *rest, *positional]
