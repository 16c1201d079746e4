"""
Hu CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from hu import __version__
from hu.cli import read, utils
from hu.cli.argv import preprocess_argv
from hu.core.config import load_layered_env

app = typer.Typer(
    name="hu",
    help="Developer workflow tool: file outlines, grep and docs search",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Hu - read, outline and search source code and docs.

    Common Workflows:
        hu read src/lib.rs --outline           # What's in this file?
        hu read src/lib.rs --around 42         # Show me line 42
        hu utils grep "fn parse" --signature   # Where is it declared?
        hu utils docs-search installation      # Which doc covers it?
    """
    setup_logging(debug)

    # Precedence: OS env > project .env > user .env
    loaded = load_layered_env()
    if loaded:
        logging.getLogger(__name__).debug("Loaded from .env files: %s", sorted(loaded))

    ctx.obj = {"debug": debug}


app.command(name="read")(read.main)
app.add_typer(utils.app, name="utils")


@app.command()
def version() -> None:
    """Show hu version and exit."""
    console.print(f"hu version {__version__}", highlight=False)
    raise typer.Exit(0)


def cli_main() -> None:
    """
    Main CLI entry point.

    The argv preprocessor normalizes common patterns before Typer
    parses them (e.g. ``hu --version``, ``hu read x.py --debug``).
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()


__all__ = ["app", "cli_main"]
