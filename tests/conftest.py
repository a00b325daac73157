from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spectree.models import Spec, create_spec

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_specs() -> list[Spec]:
    """A mix of root-level, shallow and deeply nested specs."""
    return [
        create_spec("", "smoke"),
        create_spec("cypress/e2e", "foo"),
        create_spec("cypress/e2e/hello", "bar"),
        create_spec("cypress", "q1"),
        create_spec("cypress", "q2"),
        create_spec("cypress/foo/bar/bax/merp", "loz"),
    ]


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user-level config files from leaking into tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("SPECTREE_CONFIG_PATH", raising=False)
