from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from spectree.cli import cli
from spectree.constants import EXIT_CONFIG, EXIT_INPUT, EXIT_USAGE

pytestmark = pytest.mark.medium

if TYPE_CHECKING:
    from pathlib import Path


def test_usage_error_invalid_format() -> None:
    res = CliRunner().invoke(cli, ["show", "--format", "yaml", "a.cy.ts"])
    assert res.exit_code == EXIT_USAGE


def test_missing_explicit_config(tmp_path: Path) -> None:
    res = CliRunner().invoke(cli, ["show", "--config", str(tmp_path / "missing.toml"), "a.cy.ts"])
    assert res.exit_code == EXIT_CONFIG
    assert "missing.toml" in res.output


def test_empty_separator_is_a_config_error() -> None:
    res = CliRunner().invoke(cli, ["show", "--separator", "", "a.cy.ts"])
    assert res.exit_code == EXIT_CONFIG


def test_bad_specs_file(tmp_path: Path) -> None:
    bad = tmp_path / "specs.json"
    bad.write_text("{oops", encoding="utf-8")
    res = CliRunner().invoke(cli, ["show", "--specs-file", str(bad)])
    assert res.exit_code == EXIT_INPUT
    assert "Invalid spec list JSON" in res.output


def test_missing_specs_file(tmp_path: Path) -> None:
    res = CliRunner().invoke(cli, ["count", "--specs-file", str(tmp_path / "nope.txt")])
    assert res.exit_code == EXIT_INPUT


def test_prefix_equal_to_root_key_is_an_input_error() -> None:
    res = CliRunner().invoke(cli, ["show", "--separator", ".", "/.x.cy.ts"])
    assert res.exit_code == EXIT_INPUT
    assert "root key" in res.output
