"""Project-wide constants, enums, and small helpers."""

from __future__ import annotations

from enum import StrEnum


class NodeKind(StrEnum):
    """Discriminator for the two kinds of tree vertices."""

    DIRECTORY = "directory"
    FILE = "file"


class OutputFormat(StrEnum):
    """Valid output formats for the ``show`` command."""

    TEXT = "text"
    JSON = "json"


DEFAULT_SEPARATOR = "/"
# Name and relative path of the synthetic root directory.
ROOT_PATH = "/"
DEFAULT_SPEC_TYPE = "integration"

# Longest suffix wins when deriving a spec's extension from its file name.
DEFAULT_SPEC_EXTENSIONS: tuple[str, ...] = (
    ".cy.ts",
    ".cy.js",
    ".cy.tsx",
    ".cy.jsx",
    ".spec.ts",
    ".spec.js",
    ".test.ts",
    ".test.js",
)

CONFIG_SEPARATOR = "separator"
CONFIG_SEARCH = "search"
CONFIG_COLLAPSED = "collapsed"
CONFIG_SPEC_EXTENSIONS = "spec_extensions"
CONFIG_DIRECTORIES_FIRST = "directories_first"

# Process exit codes used by the CLI
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_INPUT = 4
