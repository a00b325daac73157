"""Custom exception classes and error messages."""

from __future__ import annotations

ERROR_MSG_EMPTY_SEPARATOR = "The path separator must be a non-empty string"
ERROR_MSG_MISSING_ROOT = "Could not find root node"
ERROR_MSG_MISSING_PARENT = "Could not find directory node with key '{path}'. This should never happen."
ERROR_MSG_DIRECTORY_NOT_FOUND = "No directory with relative path '{path}' in tree"
ERROR_MSG_RESERVED_PREFIX = "Spec path '{spec}' has a directory prefix equal to the root key '{root}'"


class TreeConsistencyError(RuntimeError):
    """Raised when a derived tree violates its own construction guarantees.

    This signals a defect in the builder rather than bad input and aborts the
    build; callers are not expected to recover from it.
    """


class DirectoryNotFoundError(LookupError):
    """Raised when a relative path has no directory node in a tree."""

    def __init__(self, path: str) -> None:
        super().__init__(ERROR_MSG_DIRECTORY_NOT_FOUND.format(path=path))
        self.path = path


class ReservedPathError(ValueError):
    """Raised when a spec path would create a directory keyed like the root."""


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be loaded."""


class SpecLoadError(Exception):
    """Raised when a list of specs cannot be read from its source."""


__all__ = [
    "ERROR_MSG_DIRECTORY_NOT_FOUND",
    "ERROR_MSG_EMPTY_SEPARATOR",
    "ERROR_MSG_MISSING_PARENT",
    "ERROR_MSG_MISSING_ROOT",
    "ERROR_MSG_RESERVED_PREFIX",
    "ConfigLoadError",
    "DirectoryNotFoundError",
    "ReservedPathError",
    "SpecLoadError",
    "TreeConsistencyError",
]
