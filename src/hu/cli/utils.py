"""
Hu CLI - Utility commands.

Text search helpers that work without any external service:
- grep: regex search with dedup, ranking and signature output
- docs-index: build a heading index of markdown docs
- docs-search: ranked search over doc headings
- docs-section: print one section of a markdown file
"""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from hu.cli.errors import (
    ExitCode,
    print_error,
    print_file_not_found_error,
    print_not_text_error,
)
from hu.core.config import load_config
from hu.core.search import (
    DocsIndex,
    GrepFormat,
    GrepOptions,
    InvalidPatternError,
    SearchRootNotFoundError,
    SectionNotFoundError,
    build_index,
    extract_section_from_file,
    format_matches,
    format_results,
    load_index,
    save_index,
    search_files,
    search_index,
)

app = typer.Typer(
    name="utils",
    help="Local search utilities (grep, docs search)",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@app.command()
def grep(
    pattern: str = typer.Argument(..., help="Regular expression to search for"),
    path: str = typer.Argument(".", help="Directory or file to search"),
    refs: bool = typer.Option(
        False,
        "--refs",
        help="Print file:line references only",
    ),
    signature: bool = typer.Option(
        False,
        "--signature",
        help="Print the function/type signature on matching lines",
    ),
    unique: bool = typer.Option(
        False,
        "--unique",
        help="Collapse lines with the same content",
    ),
    ranked: bool = typer.Option(
        False,
        "--ranked",
        help="Sort by matches per line, then by line length",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        help="Maximum number of results",
    ),
    glob: str | None = typer.Option(
        None,
        "--glob",
        "-g",
        help="Only search files matching this glob (e.g. '*.rs')",
    ),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        "-i",
        help="Case-insensitive search",
    ),
    hidden: bool | None = typer.Option(
        None,
        "--hidden/--no-hidden",
        help="Include hidden files and directories (default from config)",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Search files for a regex, skipping binaries and build directories.

    Examples:
        hu utils grep "fn main"                     # Search current directory
        hu utils grep "TODO" src -g "*.py"          # Only Python files
        hu utils grep "config" --unique --ranked    # Densest lines first
        hu utils grep "def " --signature -n 20      # Signatures only
    """
    if refs and signature:
        print_error("--refs and --signature cannot be used together")
        raise typer.Exit(ExitCode.USER_ERROR)

    config = load_config()
    options = GrepOptions(
        ignore_case=ignore_case,
        glob=glob,
        hidden=hidden if hidden is not None else config.grep.hidden,
        unique=unique,
        ranked=ranked,
        limit=limit if limit is not None else config.grep.limit,
    )

    try:
        matches = search_files(pattern, path, options)
    except InvalidPatternError as e:
        print_error(
            f"Invalid pattern: {e.pattern}",
            reason=e.reason,
            solution="escape regex metacharacters with a backslash",
        )
        raise typer.Exit(ExitCode.USER_ERROR)
    except SearchRootNotFoundError:
        print_file_not_found_error(path)
        raise typer.Exit(ExitCode.USER_ERROR)

    if json_output:
        print(json.dumps([m.model_dump(mode="json") for m in matches], indent=2))
        return

    if not matches:
        err_console.print("No matches found.", highlight=False)
        return

    if refs:
        mode = GrepFormat.REFS
    elif signature:
        mode = GrepFormat.SIGNATURE
    else:
        mode = GrepFormat.DEFAULT

    print(format_matches(matches, mode))


@app.command(name="docs-index")
def docs_index(
    path: str = typer.Argument(".", help="Directory containing markdown docs"),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the index to this JSON file instead of stdout",
    ),
) -> None:
    """
    Index the headings of every markdown file under a directory.

    Examples:
        hu utils docs-index docs                      # Print index as JSON
        hu utils docs-index docs -o .hu/docs.json     # Save for docs-search
    """
    try:
        index = build_index(path)
    except SearchRootNotFoundError:
        print_error(f"Not a directory: {path}")
        raise typer.Exit(ExitCode.USER_ERROR)

    if output is None:
        print(index.model_dump_json(indent=2))
        return

    try:
        save_index(index, output)
    except OSError as e:
        print_error(f"Cannot write index to {output}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    err_console.print(
        f"[green]✓[/green] Indexed {index.section_count()} sections "
        f"in {len(index.files)} files → {output}",
        highlight=False,
    )


def _load_docs_index(path: str | None, index_file: str | None) -> DocsIndex:
    """Load a saved index or build one on the fly."""
    if index_file is not None:
        try:
            return load_index(index_file)
        except FileNotFoundError:
            print_file_not_found_error(index_file)
            raise typer.Exit(ExitCode.USER_ERROR)
        except ValueError as e:
            print_error(
                f"Invalid docs index: {index_file}",
                reason=str(e),
                solution=f"hu utils docs-index <dir> -o {index_file}",
            )
            raise typer.Exit(ExitCode.USER_ERROR)

    root = path if path is not None else "."
    try:
        return build_index(root)
    except SearchRootNotFoundError:
        print_error(f"Not a directory: {root}")
        raise typer.Exit(ExitCode.USER_ERROR)


@app.command(name="docs-search")
def docs_search(
    query: str = typer.Argument(..., help="Heading text to search for"),
    path: str | None = typer.Option(
        None,
        "--path",
        help="Directory to index and search (default: current directory)",
    ),
    index_file: str | None = typer.Option(
        None,
        "--index",
        help="Search a saved index from docs-index -o",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Maximum number of results",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Find markdown sections by heading.

    Exact heading matches rank first, then headings containing the query,
    then partial word matches.

    Examples:
        hu utils docs-search installation
        hu utils docs-search "api auth" --path docs -n 5
        hu utils docs-search config --index .hu/docs.json
    """
    if path is not None and index_file is not None:
        print_error("--path and --index cannot be used together")
        raise typer.Exit(ExitCode.USER_ERROR)

    index = _load_docs_index(path, index_file)
    results = search_index(index, query)
    if limit is None:
        limit = load_config().docs.limit

    if json_output:
        shown = results[:limit] if limit is not None else results
        print(json.dumps([r.model_dump(mode="json") for r in shown], indent=2))
        return

    print(format_results(results, limit))


@app.command(name="docs-section")
def docs_section(
    file: str = typer.Argument(..., help="Markdown file"),
    heading: str = typer.Argument(..., help="Heading to extract (case-insensitive, partial)"),
) -> None:
    """
    Print one section of a markdown file, including its subsections.

    Examples:
        hu utils docs-section README.md installation
    """
    try:
        section = extract_section_from_file(file, heading)
    except FileNotFoundError:
        print_file_not_found_error(file)
        raise typer.Exit(ExitCode.USER_ERROR)
    except UnicodeDecodeError:
        print_not_text_error(file)
        raise typer.Exit(ExitCode.USER_ERROR)
    except SectionNotFoundError:
        print_error(
            f"Section not found: {heading}",
            solution=f"hu read {Path(file).as_posix()} --outline",
        )
        raise typer.Exit(ExitCode.USER_ERROR)
    except OSError as e:
        print_error(f"Cannot read {file}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    print(section)
