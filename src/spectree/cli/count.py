"""CLI command summarising spec counts per top-level directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from spectree.tree import collect_files, group_children

from .common import TreeParams, build_tree, tree_options

if TYPE_CHECKING:
    from pathlib import Path

ROOT_LABEL = "(root)"


@click.command()
@tree_options
def count(
    *,
    search: str | None,
    separator: str | None,
    collapse: tuple[str, ...],
    specs_file: Path | None,
    config_path: Path | None,
    paths: tuple[str, ...],
) -> None:
    """Print the number of specs under each top-level directory."""
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
    grouped = group_children(built.tree.root)

    table = Table(show_edge=False, box=None, pad_edge=False)
    table.add_column("Directory", style="cyan", no_wrap=True)
    table.add_column("Specs", justify="right")
    if grouped.files:
        table.add_row(ROOT_LABEL, str(len(grouped.files)))
    for directory in grouped.directories:
        table.add_row(directory.relative_path, str(len(collect_files(directory))))
    table.add_row("Total", str(len(collect_files(built.tree.root))), style="bold")

    Console().print(table)
