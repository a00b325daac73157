from __future__ import annotations

import pytest

from spectree.paths import PathParts, iter_prefixes, split_into_parts

pytestmark = pytest.mark.small


def test_root_level_path_returns_itself_for_both_parts() -> None:
    parts = split_into_parts("smoke.cy.ts")
    assert parts == PathParts(name="smoke.cy.ts", path="smoke.cy.ts", root_level=True)
    assert parts.is_root_level


def test_nested_path_splits_at_last_separator() -> None:
    parts = split_into_parts("cypress/e2e/foo.cy.ts")
    assert parts.name == "foo.cy.ts"
    assert parts.path == "cypress/e2e"
    assert not parts.is_root_level


def test_nested_path_with_repeated_name_is_not_root_level() -> None:
    parts = split_into_parts("a/a")
    assert parts.name == parts.path == "a"
    assert not parts.is_root_level


@pytest.mark.parametrize(
    ("path", "sep", "name", "parent"),
    [
        ("cypress\\e2e\\foo.cy.ts", "\\", "foo.cy.ts", "cypress\\e2e"),
        ("a::b::c", "::", "c", "a::b"),
        ("a/./../b", "/", "b", "a/./.."),
        ("dir/", "/", "", "dir"),
    ],
)
def test_custom_separators_and_opaque_segments(path: str, sep: str, name: str, parent: str) -> None:
    parts = split_into_parts(path, sep)
    assert (parts.name, parts.path) == (name, parent)


def test_separator_other_than_default_leaves_slashes_alone() -> None:
    parts = split_into_parts("cypress/e2e/foo.cy.ts", "\\")
    assert parts.is_root_level
    assert parts.name == "cypress/e2e/foo.cy.ts"


def test_iter_prefixes_accumulates_left_to_right() -> None:
    prefixes = iter_prefixes("cypress/e2e/hello")
    assert iter(prefixes) is prefixes
    assert list(prefixes) == [
        ("cypress", "cypress"),
        ("e2e", "cypress/e2e"),
        ("hello", "cypress/e2e/hello"),
    ]
    assert list(iter_prefixes("a::b", "::")) == [("a", "a"), ("b", "a::b")]
