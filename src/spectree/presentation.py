"""Collapse/expand state kept outside the rebuilt tree.

Nodes are recreated on every derivation, so collapsed directories are tracked
by relative path rather than by node identity.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .models import DirectoryNode

if TYPE_CHECKING:
    from .tree import SpecTree


@dataclass(slots=True)
class CollapsedState:
    """Set of collapsed directory paths owned by a renderer."""

    _paths: set[str] = field(default_factory=set)

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> CollapsedState:
        return cls(set(paths))

    @classmethod
    def from_tree(cls, tree: SpecTree) -> CollapsedState:
        """Seed the state from the nodes flagged collapsed in ``tree``."""
        return cls({path for path, node in tree.registry.items() if node.collapsed})

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def collapse(self, path: str) -> None:
        self._paths.add(path)

    def expand(self, path: str) -> None:
        self._paths.discard(path)

    def toggle(self, target: DirectoryNode | str) -> bool:
        """Flip the state of ``target`` and return whether it is now collapsed."""
        path = _path_of(target)
        if path in self._paths:
            self._paths.remove(path)
            return False
        self._paths.add(path)
        return True

    def is_collapsed(self, target: DirectoryNode | str) -> bool:
        """Answer from the tracked paths only; node flags are written by :meth:`apply`."""
        return _path_of(target) in self._paths

    def as_frozenset(self) -> frozenset[str]:
        return frozenset(self._paths)

    def apply(self, tree: SpecTree) -> None:
        """Set ``collapsed`` on the nodes of ``tree`` to mirror this state."""
        for path, node in tree.registry.items():
            node.collapsed = path in self._paths

    def prune(self, tree: SpecTree) -> set[str]:
        """Forget paths with no directory in ``tree``; return the removed paths.

        A search-filtered tree hides directories that may come back once the
        search is cleared, so callers usually prune only unfiltered trees.
        """
        stale = {path for path in self._paths if path not in tree.registry}
        self._paths -= stale
        return stale


def _path_of(target: DirectoryNode | str) -> str:
    if isinstance(target, DirectoryNode):
        return target.relative_path
    return target


__all__ = ["CollapsedState"]
