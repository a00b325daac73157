"""Data models for specs and the directory/file tree derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .constants import (
    DEFAULT_SEPARATOR,
    DEFAULT_SPEC_EXTENSIONS,
    DEFAULT_SPEC_TYPE,
    ROOT_PATH,
    NodeKind,
)
from .paths import split_into_parts


@dataclass(frozen=True, slots=True)
class Spec:
    """Descriptor of one discoverable test file.

    ``relative_path`` drives placement in the tree; the remaining fields are
    display variants carried through untouched.
    """

    relative_path: str
    name: str
    base_name: str
    file_name: str
    spec_file_extension: str
    file_extension: str
    absolute_path: str
    spec_type: str = DEFAULT_SPEC_TYPE

    @property
    def display_name(self) -> str:
        return f"{self.file_name}{self.spec_file_extension}"


# Nodes compare and hash by identity (eq=False) so that ``children`` sets hold
# one entry per node object, even when two specs share a path.
@dataclass(eq=False, slots=True)
class DirectoryNode:
    """Internal vertex grouping the files and directories under a path prefix."""

    kind: ClassVar[NodeKind] = NodeKind.DIRECTORY

    name: str
    relative_path: str
    parent: DirectoryNode | None = field(default=None, repr=False)
    children: set[Node] = field(default_factory=set, repr=False)
    collapsed: bool = False

    @property
    def is_root(self) -> bool:
        return self.parent is None and self.relative_path == ROOT_PATH


@dataclass(eq=False, slots=True)
class FileNode:
    """Leaf vertex wrapping exactly one :class:`Spec`."""

    kind: ClassVar[NodeKind] = NodeKind.FILE

    name: str
    data: Spec
    parent: DirectoryNode = field(repr=False)


type Node = DirectoryNode | FileNode


def _file_extension(file_name: str) -> str:
    stem, dot, ext = file_name.rpartition(".")
    if not dot or not stem:
        return ""
    return f".{ext}"


def _spec_extension(file_name: str, extensions: tuple[str, ...]) -> str:
    matches = [ext for ext in extensions if file_name.endswith(ext) and file_name != ext]
    if matches:
        return max(matches, key=len)
    return _file_extension(file_name)


def spec_from_relative_path(
    relative_path: str,
    *,
    separator: str = DEFAULT_SEPARATOR,
    extensions: tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS,
    spec_type: str = DEFAULT_SPEC_TYPE,
    project_root: str = "",
) -> Spec:
    """Build a :class:`Spec` whose display fields are derived from ``relative_path``."""
    leaf = split_into_parts(relative_path, separator).name
    spec_ext = _spec_extension(leaf, extensions)
    base = leaf[: -len(spec_ext)] if spec_ext else leaf
    return Spec(
        relative_path=relative_path,
        name=relative_path,
        base_name=base,
        file_name=base,
        spec_file_extension=spec_ext,
        file_extension=_file_extension(leaf),
        absolute_path=f"{project_root.rstrip(separator)}{separator}{relative_path}",
        spec_type=spec_type,
    )


def create_spec(
    prefix: str,
    name: str,
    extension: str = ".cy.ts",
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> Spec:
    """Return a spec named ``name + extension`` placed under directory ``prefix``.

    An empty ``prefix`` yields a root-level spec.
    """
    leaf = f"{name}{extension}"
    relative = f"{prefix}{separator}{leaf}" if prefix else leaf
    return spec_from_relative_path(relative, separator=separator, extensions=(extension,))


__all__ = [
    "DirectoryNode",
    "FileNode",
    "Node",
    "Spec",
    "create_spec",
    "spec_from_relative_path",
]
