"""Reading spec lists handed over by an upstream discovery step.

Two input shapes are accepted: a JSON array whose items are either relative
path strings or spec objects, and plain newline-separated relative paths.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_SEPARATOR, DEFAULT_SPEC_EXTENSIONS, DEFAULT_SPEC_TYPE
from .errors import SpecLoadError
from .logging_utils import StructuredLogEvent, get_logger, log_event
from .models import Spec, spec_from_relative_path

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

# Accepted spellings for each Spec field in JSON objects.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "relative_path": ("relative_path", "relativePath", "relative"),
    "name": ("name",),
    "base_name": ("base_name", "baseName"),
    "file_name": ("file_name", "fileName"),
    "spec_file_extension": ("spec_file_extension", "specFileExtension"),
    "file_extension": ("file_extension", "fileExtension"),
    "absolute_path": ("absolute_path", "absolutePath", "absolute"),
    "spec_type": ("spec_type", "specType"),
}


def _lookup(raw: Mapping[str, Any], field_name: str) -> Any:
    for alias in _FIELD_ALIASES[field_name]:
        if alias in raw:
            return raw[alias]
    return None


def spec_from_mapping(
    raw: Mapping[str, Any],
    *,
    separator: str = DEFAULT_SEPARATOR,
    extensions: tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS,
) -> Spec:
    """Build a spec from a JSON object, deriving any missing display fields."""
    relative = _lookup(raw, "relative_path")
    if not isinstance(relative, str):
        msg = f"spec object is missing a string relative path: {dict(raw)!r}"
        raise SpecLoadError(msg)
    derived = spec_from_relative_path(
        relative,
        separator=separator,
        extensions=extensions,
        spec_type=str(_lookup(raw, "spec_type") or DEFAULT_SPEC_TYPE),
    )
    overrides: dict[str, str] = {}
    for field_name in _FIELD_ALIASES:
        value = _lookup(raw, field_name)
        if field_name == "relative_path" or value is None:
            continue
        if not isinstance(value, str):
            msg = f"spec field '{field_name}' must be a string, got {type(value).__name__}"
            raise SpecLoadError(msg)
        overrides[field_name] = value
    return replace(derived, **overrides)


def specs_from_json(
    text: str,
    *,
    separator: str = DEFAULT_SEPARATOR,
    extensions: tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS,
) -> list[Spec]:
    """Parse a JSON array of path strings and/or spec objects."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        msg = f"Invalid spec list JSON: {err}"
        raise SpecLoadError(msg) from err
    if not isinstance(data, list):
        msg = f"Spec list JSON must be an array, got {type(data).__name__}"
        raise SpecLoadError(msg)
    specs: list[Spec] = []
    for item in data:
        if isinstance(item, str):
            specs.append(spec_from_relative_path(item, separator=separator, extensions=extensions))
        elif isinstance(item, Mapping):
            specs.append(spec_from_mapping(item, separator=separator, extensions=extensions))
        else:
            msg = f"Unsupported spec entry: {item!r}"
            raise SpecLoadError(msg)
    return specs


def specs_from_lines(
    lines: Iterable[str],
    *,
    separator: str = DEFAULT_SEPARATOR,
    extensions: tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS,
) -> list[Spec]:
    """Build specs from relative paths, one per line; blanks and ``#`` comments are skipped."""
    specs: list[Spec] = []
    for line in lines:
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        specs.append(spec_from_relative_path(s, separator=separator, extensions=extensions))
    return specs


def load_specs_file(
    path: Path,
    *,
    separator: str = DEFAULT_SEPARATOR,
    extensions: tuple[str, ...] = DEFAULT_SPEC_EXTENSIONS,
) -> list[Spec]:
    """Load specs from ``path``; ``.json`` files are parsed as JSON, others as lines."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        msg = f"Could not read spec list {path}: {err}"
        raise SpecLoadError(msg) from err
    if path.suffix.lower() == ".json":
        specs = specs_from_json(text, separator=separator, extensions=extensions)
    else:
        specs = specs_from_lines(text.splitlines(), separator=separator, extensions=extensions)
    log_event(
        logger,
        StructuredLogEvent(
            name="specs.loaded",
            message="loaded spec list",
            context={"path": path, "spec_count": len(specs)},
        ),
    )
    return specs


__all__ = ["load_specs_file", "spec_from_mapping", "specs_from_json", "specs_from_lines"]
