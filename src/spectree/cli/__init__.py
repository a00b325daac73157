"""CLI exports.

This package exposes `cli` and `main` from `root.py` so that
`python -m spectree` and the console entry point work.
"""

from .root import cli, main

__all__ = ["cli", "main"]
