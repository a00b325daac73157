from __future__ import annotations

import pytest

from spectree.constants import NodeKind
from spectree.models import DirectoryNode, FileNode, create_spec, spec_from_relative_path

pytestmark = pytest.mark.small


def test_create_spec_populates_display_variants() -> None:
    spec = create_spec("cypress/e2e", "foo")
    assert spec.relative_path == "cypress/e2e/foo.cy.ts"
    assert spec.name == "cypress/e2e/foo.cy.ts"
    assert spec.absolute_path == "/cypress/e2e/foo.cy.ts"
    assert spec.base_name == "foo"
    assert spec.file_name == "foo"
    assert spec.spec_file_extension == ".cy.ts"
    assert spec.file_extension == ".ts"
    assert spec.spec_type == "integration"
    assert spec.display_name == "foo.cy.ts"


def test_create_spec_without_prefix_is_root_level() -> None:
    spec = create_spec("", "smoke")
    assert spec.relative_path == "smoke.cy.ts"
    assert spec.absolute_path == "/smoke.cy.ts"


def test_spec_extension_prefers_longest_known_suffix() -> None:
    spec = spec_from_relative_path("src/button.spec.ts", extensions=(".ts", ".spec.ts"))
    assert spec.spec_file_extension == ".spec.ts"
    assert spec.base_name == "button"


def test_unknown_suffix_falls_back_to_file_extension() -> None:
    spec = spec_from_relative_path("docs/readme.md")
    assert spec.spec_file_extension == ".md"
    assert spec.file_extension == ".md"
    assert spec.base_name == "readme"


def test_names_without_extension_and_dotfiles() -> None:
    plain = spec_from_relative_path("bin/Makefile")
    assert plain.spec_file_extension == ""
    assert plain.file_extension == ""
    assert plain.base_name == "Makefile"

    dotfile = spec_from_relative_path(".eslintrc")
    assert dotfile.file_extension == ""
    assert dotfile.base_name == ".eslintrc"


def test_project_root_and_separator_shape_absolute_path() -> None:
    spec = spec_from_relative_path("e2e\\a.cy.ts", separator="\\", project_root="C:\\proj\\")
    assert spec.absolute_path == "C:\\proj\\e2e\\a.cy.ts"
    assert spec.base_name == "a"


def test_nodes_hash_by_identity_and_repr_does_not_recurse() -> None:
    root = DirectoryNode(name="/", relative_path="/")
    spec = create_spec("", "smoke")
    first = FileNode(name="smoke.cy.ts", data=spec, parent=root)
    second = FileNode(name="smoke.cy.ts", data=spec, parent=root)
    root.children.update({first, second})

    assert len(root.children) == 2
    assert first.kind is NodeKind.FILE
    assert root.kind is NodeKind.DIRECTORY
    assert root.is_root
    assert "children" not in repr(root)
    assert "parent" not in repr(first)
