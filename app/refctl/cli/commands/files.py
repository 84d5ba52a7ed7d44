"""Source file filtering commands.

Provides commands to classify individual paths, scan a WordPress
checkout the way the documentation parser would, and inspect or
initialize the exclusion lists.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from refctl.core.paths import get_exclusions_path
from refctl.filters.classifier import PathClassifier
from refctl.filters.config import (
    ExclusionConfigError,
    resolve_exclusion_lists,
    save_exclusion_lists,
)
from refctl.filters.lists import ExclusionLists
from refctl.filters.models import ClassifiedFile, Rule
from refctl.filters.scanner import SourceScanner
from refctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Decide which source files the documentation parser imports.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for file listings."""

    TABLE = "table"
    JSON = "json"


ListsOption = Annotated[
    Path | None,
    typer.Option(
        "--lists",
        "-L",
        help="Exclusion lists TOML file (default: user file, else built-in lists).",
    ),
]


@app.command()
def check(
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths relative to the WordPress root."),
    ],
    lists_path: ListsOption = None,
    prior: Annotated[
        bool,
        typer.Option("--prior/--no-prior", help="Decision of earlier filter stages."),
    ] = True,
) -> None:
    """Classify one or more paths."""
    classifier = PathClassifier(_load_lists(lists_path))
    results = [classifier.explain(prior, path) for path in paths]
    _print_table(results, title="Classification")


@app.command()
def scan(
    root: Annotated[
        Path,
        typer.Argument(help="WordPress root directory."),
    ],
    lists_path: ListsOption = None,
    excluded: Annotated[
        bool,
        typer.Option("--excluded", "-x", help="List excluded files instead of included ones."),
    ] = False,
    all_files: Annotated[
        bool,
        typer.Option("--all-files", help="Consider every file, not only PHP sources."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of results.",
        ),
    ] = None,
) -> None:
    """Scan a WordPress checkout and list the files the parser would import."""
    scanner = SourceScanner(
        root,
        PathClassifier(_load_lists(lists_path)),
        extensions=() if all_files else (".php",),
    )

    try:
        results = list(scanner.scan())
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    selected = [r for r in results if r.included != excluded]
    display = selected[:limit] if limit else selected

    if output_format == OutputFormat.JSON:
        _print_json(display)
        return

    if not selected:
        label = "excluded" if excluded else "included"
        print_info(f"No {label} files found under {root}.")
        return

    _print_table(display, title="Excluded Files" if excluded else "Included Files")

    included_count = sum(1 for r in results if r.included)
    console.print(
        f"\n[dim]Scanned {len(results)} files: "
        f"{included_count} included, {len(results) - included_count} excluded[/dim]"
    )
    if limit and len(display) < len(selected):
        console.print(f"[dim](showing {len(display)} of {len(selected)}, limited to {limit})[/dim]")


@app.command("lists")
def show_lists(
    lists_path: ListsOption = None,
    init: Annotated[
        bool,
        typer.Option("--init", help="Write the built-in lists to the lists file."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing lists file with --init."),
    ] = False,
) -> None:
    """Show the active exclusion lists, or write the built-in ones."""
    if init:
        target = lists_path or get_exclusions_path()
        if target.exists() and not force:
            print_error(f"Lists file already exists: {target} (use --force to overwrite)")
            raise typer.Exit(code=1)
        try:
            written = save_exclusion_lists(ExclusionLists.default(), target)
        except ExclusionConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_success(f"Wrote built-in exclusion lists to {written}")
        return

    lists = _load_lists(lists_path)
    table = Table(
        title="Exclusion Lists",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("List", no_wrap=True)
    table.add_column("Match", width=7)
    table.add_column("Entry")

    sections = (
        ("exclude files", "exact", "excluded", lists.exclude_files),
        ("exclude dirs", "prefix", "excluded", lists.exclude_dirs),
        ("include content files", "exact", "included", lists.include_content_files),
        ("include content dirs", "prefix", "included", lists.include_content_dirs),
    )
    for name, match, style, entries in sections:
        for entry in entries:
            table.add_row(name, match, f"[{style}]{entry}[/{style}]")

    console.print(table)
    console.print(f"\n[dim]{lists.total} entries[/dim]")


# === Private helper functions ===


def _load_lists(path: Path | None) -> ExclusionLists:
    """Resolve exclusion lists or exit with an error."""
    try:
        return resolve_exclusion_lists(path)
    except ExclusionConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


_RULE_LABELS: dict[Rule, str] = {
    Rule.NO_PATH: "no path given",
    Rule.EXCLUDED_FILE: "excluded file",
    Rule.EXCLUDED_DIR: "excluded directory",
    Rule.PASS_THROUGH: "outside wp-content/",
    Rule.WHITELISTED: "whitelisted content",
    Rule.NOT_WHITELISTED: "content not whitelisted",
}


def _print_table(results: list[ClassifiedFile], title: str) -> None:
    """Display classification results as a Rich table."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Decision", width=9, justify="center")
    table.add_column("Rule", style="muted")

    for r in results:
        table.add_row(r.path or "-", _decision_markup(r), _RULE_LABELS[r.rule])

    console.print(table)


def _decision_markup(result: ClassifiedFile) -> str:
    """Style a decision; prior decisions left standing use the passed colour."""
    word = "include" if result.included else "exclude"
    if result.rule in (Rule.PASS_THROUGH, Rule.NO_PATH):
        style = "passed"
    else:
        style = "included" if result.included else "excluded"
    return f"[{style}]{word}[/{style}]"


def _print_json(results: list[ClassifiedFile]) -> None:
    """Display classification results as JSON."""
    data = [{"path": r.path, "included": r.included, "rule": r.rule.value} for r in results]
    console.print_json(json.dumps(data))
