"""Shared CLI helpers used by multiple subcommands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from spectree.config import (
    directories_first_from_config,
    options_from_config,
    read_config,
    spec_extensions_from_config,
)
from spectree.constants import EXIT_CONFIG, EXIT_INPUT
from spectree.errors import ConfigLoadError, ReservedPathError, SpecLoadError
from spectree.loader import load_specs_file, specs_from_lines
from spectree.tree import derive_spec_tree

if TYPE_CHECKING:
    from spectree.models import Spec
    from spectree.tree import SpecTree, TreeOptions


@dataclass(frozen=True, slots=True)
class TreeParams:
    """Options shared by commands that build a tree."""

    search: str | None
    separator: str | None
    collapse: tuple[str, ...]
    specs_file: Path | None
    config_path: Path | None
    paths: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BuiltTree:
    tree: SpecTree
    directories_first: bool


def tree_options(func: Any) -> Any:
    """Attach the tree-building options to a click command."""
    decorators = (
        click.option("--search", "-s", default=None, help="Only keep specs whose path contains this text"),
        click.option("--separator", default=None, help="Path segment separator (default '/')"),
        click.option("--collapse", multiple=True, help="Directory path to render collapsed (repeatable)"),
        click.option(
            "--specs-file",
            type=click.Path(path_type=Path, dir_okay=False),
            help="Read specs from a JSON array or a file of relative paths",
        ),
        click.option("--config", "config_path", type=click.Path(path_type=Path), help="Explicit config file path"),
        click.argument("paths", nargs=-1),
    )
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _read_specs(params: TreeParams, *, separator: str, extensions: tuple[str, ...]) -> list[Spec]:
    if params.specs_file is not None:
        return load_specs_file(params.specs_file, separator=separator, extensions=extensions)
    if params.paths:
        return specs_from_lines(params.paths, separator=separator, extensions=extensions)
    if sys.stdin.isatty():
        return []
    return specs_from_lines(sys.stdin.read().splitlines(), separator=separator, extensions=extensions)


def _load_options(params: TreeParams) -> tuple[TreeOptions, tuple[str, ...], bool]:
    cfg = read_config(base_path=Path(), explicit_config=params.config_path)
    options = options_from_config(
        cfg,
        search=params.search,
        separator=params.separator,
        collapsed=params.collapse,
    )
    return options, spec_extensions_from_config(cfg), directories_first_from_config(cfg)


def build_tree(params: TreeParams) -> BuiltTree:
    """Load config and specs, then derive the tree; exit on config/input errors."""
    try:
        options, extensions, directories_first = _load_options(params)
    except ConfigLoadError as err:
        print(err, file=sys.stderr)
        raise SystemExit(EXIT_CONFIG) from err

    try:
        specs = _read_specs(params, separator=options.separator, extensions=extensions)
    except SpecLoadError as err:
        print(err, file=sys.stderr)
        raise SystemExit(EXIT_INPUT) from err

    try:
        tree = derive_spec_tree(specs, options)
    except ReservedPathError as err:
        print(err, file=sys.stderr)
        raise SystemExit(EXIT_INPUT) from err

    return BuiltTree(tree=tree, directories_first=directories_first)
