"""Renderers turning a derived tree into text lines or JSON-ready dicts.

Rendering reads the tree only; collapsed directories are still present in the
tree and are simply not descended into.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constants import NodeKind
from .presentation import CollapsedState
from .tree import collect_files, group_children

if TYPE_CHECKING:
    from .models import DirectoryNode, FileNode, Node
    from .tree import SpecTree

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
COLLAPSED_MARKER = "[+]"


def directory_summary(node: DirectoryNode) -> str:
    """Return ``"(Contains N specs: a, b)"`` for ``node``'s whole subtree."""
    names = sorted(f.data.display_name for f in collect_files(node))
    noun = "spec" if len(names) == 1 else "specs"
    if not names:
        return f"(Contains 0 {noun})"
    return f"(Contains {len(names)} {noun}: {', '.join(names)})"


@dataclass(slots=True)
class TreeRenderer:
    """Responsible for turning a derived tree into display lines."""

    tree: SpecTree
    collapsed: CollapsedState | None = None
    show_summary: bool = False
    directories_first: bool = False

    def __post_init__(self) -> None:
        if self.collapsed is None:
            self.collapsed = CollapsedState.from_tree(self.tree)

    def _is_collapsed(self, node: DirectoryNode) -> bool:
        return self.collapsed is not None and self.collapsed.is_collapsed(node)

    def _ordered(self, node: DirectoryNode) -> list[Node]:
        grouped = group_children(node)
        if self.directories_first:
            return [*grouped.directories, *grouped.files]
        return [*grouped.files, *grouped.directories]

    def _directory_label(self, node: DirectoryNode) -> str:
        label = f"{node.name}{self.tree.options.separator}"
        if self._is_collapsed(node):
            label = f"{label} {COLLAPSED_MARKER}"
        if self.show_summary:
            label = f"{label} {directory_summary(node)}"
        return label

    def _walk(self, node: DirectoryNode, prefix: str, out: list[str]) -> None:
        children = self._ordered(node)
        for idx, child in enumerate(children):
            is_last = idx == len(children) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            if child.kind is NodeKind.FILE:
                out.append(f"{prefix}{connector}{child.name}")
                continue
            out.append(f"{prefix}{connector}{self._directory_label(child)}")
            if not self._is_collapsed(child):
                self._walk(child, prefix + (SPACE if is_last else PIPE), out)

    def lines(self) -> list[str]:
        """Return the tree lines, starting with the root line."""
        root = self.tree.root
        head = root.name
        if self.show_summary:
            head = f"{head} {directory_summary(root)}"
        out = [head]
        if not self._is_collapsed(root):
            self._walk(root, "", out)
        return out

    def render(self) -> str:
        return "\n".join(self.lines()) + "\n"


def _file_to_dict(node: FileNode) -> dict[str, Any]:
    return {
        "type": NodeKind.FILE.value,
        "name": node.name,
        "relative": node.data.relative_path,
    }


def directory_to_dict(node: DirectoryNode, *, directories_first: bool = False) -> dict[str, Any]:
    """Return a nested, name-sorted dict for ``node`` and its subtree."""
    grouped = group_children(node)
    files = [_file_to_dict(f) for f in grouped.files]
    dirs = [directory_to_dict(d, directories_first=directories_first) for d in grouped.directories]
    return {
        "type": NodeKind.DIRECTORY.value,
        "name": node.name,
        "relative": node.relative_path,
        "collapsed": node.collapsed,
        "spec_count": len(collect_files(node)),
        "children": [*dirs, *files] if directories_first else [*files, *dirs],
    }


def tree_to_dict(tree: SpecTree, *, directories_first: bool = False) -> dict[str, Any]:
    """Build the JSON payload for a whole tree."""
    return {
        "separator": tree.options.separator,
        "search": tree.options.search or "",
        "root": directory_to_dict(tree.root, directories_first=directories_first),
    }


__all__ = ["TreeRenderer", "directory_summary", "directory_to_dict", "tree_to_dict"]
