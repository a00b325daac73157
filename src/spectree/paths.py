"""Splitting of separator-delimited relative paths.

Paths are treated as opaque text: no ``.``/``..`` normalization happens and
repeated separators yield empty segments.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .constants import DEFAULT_SEPARATOR


@dataclass(frozen=True, slots=True)
class PathParts:
    """Leaf name and parent prefix of a relative path.

    For a path with no separator both ``name`` and ``path`` hold the whole
    path and ``root_level`` is set. The flag is kept explicitly because
    ``name == path`` also holds for nested paths such as ``"a/a"``.
    """

    name: str
    path: str
    root_level: bool = False

    @property
    def is_root_level(self) -> bool:
        return self.root_level


def split_into_parts(path: str, sep: str = DEFAULT_SEPARATOR) -> PathParts:
    """Split ``path`` at the last occurrence of ``sep``."""
    if sep not in path:
        return PathParts(name=path, path=path, root_level=True)
    parent, _, name = path.rpartition(sep)
    return PathParts(name=name, path=parent)


def iter_prefixes(path: str, sep: str = DEFAULT_SEPARATOR) -> Iterator[tuple[str, str]]:
    """Yield ``(segment, accumulated prefix)`` pairs walking ``path`` left to right.

    >>> list(iter_prefixes("cypress/e2e/hello"))
    [('cypress', 'cypress'), ('e2e', 'cypress/e2e'), ('hello', 'cypress/e2e/hello')]
    """
    prefix = ""
    for idx, segment in enumerate(path.split(sep)):
        prefix = segment if idx == 0 else f"{prefix}{sep}{segment}"
        yield segment, prefix


__all__ = ["PathParts", "iter_prefixes", "split_into_parts"]
