"""CLI command implementation for the ``spectree show`` workflow."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from spectree.constants import OutputFormat
from spectree.presentation import CollapsedState
from spectree.renderers import TreeRenderer, tree_to_dict

from .common import TreeParams, build_tree, tree_options

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@tree_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--summary/--no-summary", default=False, help="Show per-directory spec counts and names")
@click.option(
    "--directories-first/--files-first",
    default=None,
    help="Order directories before files (default from config)",
)
def show(
    *,
    search: str | None,
    separator: str | None,
    collapse: tuple[str, ...],
    specs_file: Path | None,
    config_path: Path | None,
    paths: tuple[str, ...],
    fmt: str,
    summary: bool,
    directories_first: bool | None,
) -> None:
    """Print the directory tree derived from a list of specs."""
    built = build_tree(
        TreeParams(
            search=search,
            separator=separator,
            collapse=collapse,
            specs_file=specs_file,
            config_path=config_path,
            paths=paths,
        )
    )
    dirs_first = built.directories_first if directories_first is None else directories_first

    if OutputFormat(fmt.lower()) is OutputFormat.JSON:
        payload = tree_to_dict(built.tree, directories_first=dirs_first)
        click.echo(json.dumps(payload, indent=2))
        return

    renderer = TreeRenderer(
        built.tree,
        collapsed=CollapsedState.from_tree(built.tree),
        show_summary=summary,
        directories_first=dirs_first,
    )
    click.echo(renderer.render(), nl=False)
