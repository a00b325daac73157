"""Utilities for loading configuration files and turning them into tree options."""

from __future__ import annotations

import importlib.resources
import os
import tomllib
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from spectree.constants import (
    CONFIG_COLLAPSED,
    CONFIG_DIRECTORIES_FIRST,
    CONFIG_SEARCH,
    CONFIG_SEPARATOR,
    CONFIG_SPEC_EXTENSIONS,
    DEFAULT_SPEC_EXTENSIONS,
)
from spectree.errors import ConfigLoadError
from spectree.logging_utils import StructuredLogEvent, get_logger, log_event
from spectree.tree import TreeOptions

TOML_CONFIG = ".spectree.toml"
ENV_CONFIG_PATH = "SPECTREE_CONFIG_PATH"

logger = get_logger(__name__)


def load_default_config() -> dict[str, Any]:
    """Return the bundled default configuration as a Python dict."""
    try:
        cfg_path = importlib.resources.files("spectree.resources").joinpath("default_config.toml")
        with cfg_path.open("r", encoding="utf-8") as f:  # type: ignore[attr-defined]
            text = f.read()
    except OSError as err:  # pragma: no cover - packaging problem
        msg = f"Error loading default configuration: {err}"
        raise ConfigLoadError(msg) from err
    return tomllib.loads(text)


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as err:
        msg = f"Error reading {path}: {err}"
        raise ConfigLoadError(msg) from err
    try:
        data = tomlkit.loads(raw)
    except TOMLKitError as e:
        msg = f"Error parsing {path.name}: {e}"
        raise ConfigLoadError(msg) from e
    return data.unwrap()


def _xdg_config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    xdg_dir = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return xdg_dir / "spectree" / "config.toml"


def _merge_pyproject_cfg(pyproject_path: Path, cfg: dict[str, Any]) -> dict[str, Any]:
    if not pyproject_path.exists():
        return cfg
    try:
        data = tomlkit.loads(pyproject_path.read_text(encoding="utf-8")).unwrap()
    except TOMLKitError as e:
        msg = f"Error parsing pyproject.toml: {e}"
        raise ConfigLoadError(msg) from e
    tool = data.get("tool", {})
    if isinstance(tool, dict):
        spectree_cfg = tool.get("spectree")
        if isinstance(spectree_cfg, dict):
            cfg |= spectree_cfg
    return cfg


def read_config(
    *,
    base_path: Path,
    ignore_default: bool = False,
    explicit_config: Path | None = None,
) -> dict[str, Any]:
    """Read configuration merging multiple sources with clear precedence.

    Precedence (low -> high):
      1. bundled defaults (unless ``ignore_default``)
      2. XDG config: $XDG_CONFIG_HOME/spectree/config.toml (or ~/.config/spectree/config.toml)
      3. local project file in ``base_path``: .spectree.toml
      4. [tool.spectree] table in pyproject.toml at ``base_path``
      5. $SPECTREE_CONFIG_PATH (if set)
      6. ``explicit_config`` (from --config)
    Later sources override earlier ones.
    """
    cfg: dict[str, Any] = {} if ignore_default else load_default_config()
    sources: list[Path] = []

    for p in (_xdg_config_path(), base_path / TOML_CONFIG):
        if p.exists():
            cfg |= load_toml_config(p)
            sources.append(p)

    pyproject = base_path / "pyproject.toml"
    cfg = _merge_pyproject_cfg(pyproject, cfg)
    if pyproject.exists():
        sources.append(pyproject)

    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        p = Path(env_path)
        if p.exists():
            cfg |= load_toml_config(p)
            sources.append(p)

    if explicit_config:
        if not explicit_config.exists():
            msg = f"Explicit config file not found: {explicit_config}"
            raise ConfigLoadError(msg)
        cfg |= load_toml_config(explicit_config)
        sources.append(explicit_config)

    log_event(
        logger,
        StructuredLogEvent(
            name="config.loaded",
            message="configuration sources merged",
            context={"sources": sources, "defaults": not ignore_default},
        ),
    )
    return cfg


def _string_list(cfg: dict[str, Any], key: str) -> list[str]:
    value = cfg.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"Config key '{key}' must be a list of strings"
        raise ConfigLoadError(msg)
    return list(value)


def spec_extensions_from_config(cfg: dict[str, Any]) -> tuple[str, ...]:
    if CONFIG_SPEC_EXTENSIONS not in cfg:
        return DEFAULT_SPEC_EXTENSIONS
    return tuple(_string_list(cfg, CONFIG_SPEC_EXTENSIONS))


def directories_first_from_config(cfg: dict[str, Any]) -> bool:
    value = cfg.get(CONFIG_DIRECTORIES_FIRST, False)
    if not isinstance(value, bool):
        msg = f"Config key '{CONFIG_DIRECTORIES_FIRST}' must be a boolean"
        raise ConfigLoadError(msg)
    return value


def options_from_config(
    cfg: dict[str, Any],
    *,
    search: str | None = None,
    separator: str | None = None,
    collapsed: tuple[str, ...] = (),
) -> TreeOptions:
    """Build :class:`TreeOptions` from ``cfg``; keyword arguments override it."""
    sep = cfg.get(CONFIG_SEPARATOR, "/") if separator is None else separator
    if not isinstance(sep, str) or not sep:
        msg = f"Config key '{CONFIG_SEPARATOR}' must be a non-empty string"
        raise ConfigLoadError(msg)
    query = cfg.get(CONFIG_SEARCH, "") if search is None else search
    if not isinstance(query, str):
        msg = f"Config key '{CONFIG_SEARCH}' must be a string"
        raise ConfigLoadError(msg)
    paths = {*_string_list(cfg, CONFIG_COLLAPSED), *collapsed}
    return TreeOptions(separator=sep, search=query or None, collapsed=frozenset(paths))


__all__ = [
    "ENV_CONFIG_PATH",
    "TOML_CONFIG",
    "directories_first_from_config",
    "load_default_config",
    "load_toml_config",
    "options_from_config",
    "read_config",
    "spec_extensions_from_config",
]
