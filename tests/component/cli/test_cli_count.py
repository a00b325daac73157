from __future__ import annotations

import pytest
from click.testing import CliRunner

from spectree.cli import cli

pytestmark = pytest.mark.medium


def _rows(output: str) -> dict[str, str]:
    rows: dict[str, str] = {}
    for line in output.splitlines():
        parts = line.split()
        if len(parts) == 2:  # noqa: PLR2004 - directory and count columns
            rows[parts[0]] = parts[1]
    return rows


def test_count_reports_top_level_directories() -> None:
    res = CliRunner().invoke(
        cli,
        ["count", "smoke.cy.ts", "cypress/q1.cy.ts", "cypress/e2e/foo.cy.ts", "docs/a.cy.ts"],
    )
    assert res.exit_code == 0, res.output
    rows = _rows(res.output)
    assert rows["(root)"] == "1"
    assert rows["cypress"] == "2"
    assert rows["docs"] == "1"
    assert rows["Total"] == "4"


def test_count_respects_search() -> None:
    res = CliRunner().invoke(cli, ["count", "--search", "e2e", "cypress/q1.cy.ts", "cypress/e2e/foo.cy.ts"])
    assert res.exit_code == 0, res.output
    rows = _rows(res.output)
    assert rows["cypress"] == "1"
    assert "(root)" not in rows
