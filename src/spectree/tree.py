"""Derivation of a directory/file tree from a flat list of specs.

The tree is rebuilt wholesale on every call to :func:`derive_spec_tree`; no
node of a previously returned tree is reused or mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from time import perf_counter

from .constants import DEFAULT_SEPARATOR, ROOT_PATH
from .errors import (
    ERROR_MSG_EMPTY_SEPARATOR,
    ERROR_MSG_MISSING_PARENT,
    ERROR_MSG_MISSING_ROOT,
    ERROR_MSG_RESERVED_PREFIX,
    DirectoryNotFoundError,
    ReservedPathError,
    TreeConsistencyError,
)
from .logging_utils import StructuredLogEvent, get_logger, log_event
from .models import DirectoryNode, FileNode, Node, Spec
from .paths import iter_prefixes, split_into_parts

logger = get_logger(__name__)

type DirectoryRegistry = dict[str, DirectoryNode]


@dataclass(frozen=True, slots=True)
class TreeOptions:
    """Inputs that, together with the specs, fully determine a tree."""

    separator: str = DEFAULT_SEPARATOR
    search: str | None = None
    # Directory paths whose fresh nodes start with ``collapsed`` set.
    collapsed: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError(ERROR_MSG_EMPTY_SEPARATOR)


@dataclass(frozen=True, slots=True)
class SpecTree:
    """Result of one derivation: the root plus the path->directory registry.

    The registry holds the root under ``"/"`` and every other directory under
    its full relative path.
    """

    root: DirectoryNode
    registry: Mapping[str, DirectoryNode]
    options: TreeOptions = field(default_factory=TreeOptions)

    def directories(self) -> list[DirectoryNode]:
        """Return all non-root directories sorted by relative path."""
        return sorted(
            (node for node in self.registry.values() if node is not self.root),
            key=lambda n: n.relative_path,
        )

    def files(self) -> list[FileNode]:
        return collect_files(self.root)


@dataclass(frozen=True, slots=True)
class GroupedChildren:
    files: list[FileNode]
    directories: list[DirectoryNode]


def filter_specs(specs: Iterable[Spec], search: str | None) -> list[Spec]:
    """Keep specs whose relative path contains ``search`` (case-sensitive)."""
    if not search:
        return list(specs)
    return [spec for spec in specs if search in spec.relative_path]


def filter_file_nodes(nodes: Iterable[Node]) -> list[FileNode]:
    return [node for node in nodes if isinstance(node, FileNode)]


def filter_directory_nodes(nodes: Iterable[Node]) -> list[DirectoryNode]:
    return [node for node in nodes if isinstance(node, DirectoryNode)]


def group_children(node: DirectoryNode) -> GroupedChildren:
    """Split ``node``'s children by kind, each group sorted by name.

    Children are stored in a set; this is the place that fixes a display order.
    """
    files = sorted(filter_file_nodes(node.children), key=lambda n: (n.name, n.data.relative_path))
    directories = sorted(filter_directory_nodes(node.children), key=lambda n: n.name)
    return GroupedChildren(files=files, directories=directories)


def _make_root() -> DirectoryNode:
    return DirectoryNode(name=ROOT_PATH, relative_path=ROOT_PATH, parent=None)


def _register_directories(
    parent_path: str,
    *,
    spec_path: str,
    sep: str,
    root: DirectoryNode,
    registry: DirectoryRegistry,
) -> None:
    """Create any missing directory nodes for each prefix of ``parent_path``.

    The root is never found through a prefix lookup: a prefix equal to the
    root key raises :class:`ReservedPathError`.
    """
    parent = root
    for segment, prefix in iter_prefixes(parent_path, sep):
        if prefix == ROOT_PATH:
            raise ReservedPathError(ERROR_MSG_RESERVED_PREFIX.format(spec=spec_path, root=ROOT_PATH))
        existing = registry.get(prefix)
        if existing is None:
            existing = DirectoryNode(name=segment, relative_path=prefix, parent=parent)
            registry[prefix] = existing
        parent = existing


def _wire_children(registry: DirectoryRegistry, root: DirectoryNode) -> None:
    """Insert every directory into its ancestors' ``children`` sets.

    Walking up from each node revisits shared ancestors; set insertion is
    idempotent so this never produces duplicates.
    """
    for node in registry.values():
        if node is root:
            continue
        child = node
        while child.parent is not None:
            child.parent.children.add(child)
            child = child.parent


def _attach_files(
    specs: Iterable[Spec],
    *,
    sep: str,
    root: DirectoryNode,
    registry: DirectoryRegistry,
) -> None:
    for spec in specs:
        parts = split_into_parts(spec.relative_path, sep)
        parent = root if parts.is_root_level else registry.get(parts.path)
        if parent is None:
            raise TreeConsistencyError(ERROR_MSG_MISSING_PARENT.format(path=parts.path))
        parent.children.add(FileNode(name=parts.name, data=spec, parent=parent))


def derive_spec_tree(specs: Iterable[Spec], options: TreeOptions | None = None) -> SpecTree:
    """Build a fresh tree from ``specs``.

    Specs are filtered by ``options.search`` before any directory is derived,
    so directories without a matching descendant never appear. Raises
    :class:`TreeConsistencyError` if construction breaks its own invariants.
    """
    opts = TreeOptions() if options is None else options
    sep = opts.separator
    start = perf_counter()
    all_specs = list(specs)
    retained = filter_specs(all_specs, opts.search)

    log_event(
        logger,
        StructuredLogEvent(
            name="tree.derive.start",
            message="deriving spec tree",
            level=logging.DEBUG,
            context={
                "spec_count": len(all_specs),
                "search_active": bool(opts.search),
                "separator": sep,
            },
        ),
    )

    root = _make_root()
    registry: DirectoryRegistry = {ROOT_PATH: root}

    for spec in retained:
        parts = split_into_parts(spec.relative_path, sep)
        if parts.is_root_level:
            continue
        _register_directories(parts.path, spec_path=spec.relative_path, sep=sep, root=root, registry=registry)

    _wire_children(registry, root)
    _attach_files(retained, sep=sep, root=root, registry=registry)

    root_node = registry.get(ROOT_PATH)
    if root_node is None:
        raise TreeConsistencyError(ERROR_MSG_MISSING_ROOT)

    for path in opts.collapsed:
        node = registry.get(path)
        if node is not None:
            node.collapsed = True

    log_event(
        logger,
        StructuredLogEvent(
            name="tree.derive.complete",
            message="derived spec tree",
            level=logging.DEBUG,
            context={
                "retained_specs": len(retained),
                "directory_count": len(registry) - 1,
                "duration_seconds": perf_counter() - start,
            },
        ),
    )
    return SpecTree(root=root_node, registry=registry, options=opts)


def iter_files(node: Node) -> Iterator[FileNode]:
    """Yield every file leaf beneath ``node`` depth-first."""
    if isinstance(node, FileNode):
        yield node
        return
    for child in node.children:
        yield from iter_files(child)


def collect_files(node: DirectoryNode) -> list[FileNode]:
    """Return every file node in the subtree rooted at ``node``.

    Order follows set iteration and is unspecified.
    """
    return list(iter_files(node))


def collect_specs(node: DirectoryNode) -> list[Spec]:
    return [file.data for file in iter_files(node)]


def tree_signature(node: DirectoryNode) -> tuple[tuple[str, str, str], ...]:
    """Return sorted ``(kind, parent path, path)`` triples for the subtree of ``node``.

    Two trees built from identical inputs have equal signatures even though
    their node objects differ.
    """
    entries: list[tuple[str, str, str]] = []
    pending: list[DirectoryNode] = [node]
    while pending:
        current = pending.pop()
        for child in current.children:
            if isinstance(child, FileNode):
                entries.append((child.kind.value, current.relative_path, child.data.relative_path))
            else:
                entries.append((child.kind.value, current.relative_path, child.relative_path))
                pending.append(child)
    return tuple(sorted(entries))


def find_directory(tree: SpecTree, relative_path: str) -> DirectoryNode:
    """Look up the directory at ``relative_path`` (``"/"`` for root)."""
    node = tree.registry.get(relative_path)
    if node is None:
        raise DirectoryNotFoundError(relative_path)
    return node


__all__ = [
    "DirectoryRegistry",
    "GroupedChildren",
    "SpecTree",
    "TreeOptions",
    "collect_files",
    "collect_specs",
    "derive_spec_tree",
    "filter_directory_nodes",
    "filter_file_nodes",
    "filter_specs",
    "find_directory",
    "group_children",
    "iter_files",
    "tree_signature",
]
