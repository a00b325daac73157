from __future__ import annotations

import pytest

from spectree.models import Spec
from spectree.presentation import CollapsedState
from spectree.tree import TreeOptions, derive_spec_tree, find_directory

pytestmark = pytest.mark.small


def test_toggle_flips_state_by_path(sample_specs: list[Spec]) -> None:
    tree = derive_spec_tree(sample_specs)
    state = CollapsedState()
    e2e = find_directory(tree, "cypress/e2e")

    assert state.toggle(e2e) is True
    assert state.is_collapsed("cypress/e2e")
    assert state.toggle("cypress/e2e") is False
    assert not state.is_collapsed(e2e)


def test_state_survives_rebuild_because_it_is_keyed_by_path(sample_specs: list[Spec]) -> None:
    state = CollapsedState()
    state.collapse("cypress/e2e")

    rebuilt = derive_spec_tree(sample_specs, TreeOptions(collapsed=state.as_frozenset()))
    assert find_directory(rebuilt, "cypress/e2e").collapsed is True

    fresh = derive_spec_tree(sample_specs)
    assert state.is_collapsed(find_directory(fresh, "cypress/e2e"))


def test_apply_mirrors_state_onto_nodes(sample_specs: list[Spec]) -> None:
    tree = derive_spec_tree(sample_specs, TreeOptions(collapsed=frozenset({"cypress"})))
    state = CollapsedState.from_paths(["cypress/foo"])
    state.apply(tree)
    assert find_directory(tree, "cypress/foo").collapsed is True
    assert find_directory(tree, "cypress").collapsed is False


def test_prune_drops_paths_missing_from_tree(sample_specs: list[Spec]) -> None:
    state = CollapsedState.from_paths(["cypress", "gone/away"])
    removed = state.prune(derive_spec_tree(sample_specs))
    assert removed == {"gone/away"}
    assert list(state) == ["cypress"]
    assert len(state) == 1
    assert "cypress" in state


def test_expand_is_a_no_op_for_unknown_paths() -> None:
    state = CollapsedState()
    state.expand("never/collapsed")
    assert len(state) == 0


def test_toggle_result_agrees_with_is_collapsed_on_flagged_tree(sample_specs: list[Spec]) -> None:
    tree = derive_spec_tree(sample_specs, TreeOptions(collapsed=frozenset({"cypress"})))
    cypress = find_directory(tree, "cypress")
    state = CollapsedState()

    assert not state.is_collapsed(cypress)
    for _ in range(2):
        now_collapsed = state.toggle(cypress)
        assert now_collapsed == state.is_collapsed(cypress)
    assert not state.is_collapsed(cypress)


def test_from_tree_picks_up_flagged_nodes(sample_specs: list[Spec]) -> None:
    tree = derive_spec_tree(sample_specs, TreeOptions(collapsed=frozenset({"cypress", "cypress/e2e"})))
    state = CollapsedState.from_tree(tree)
    assert list(state) == ["cypress", "cypress/e2e"]
    assert state.toggle("cypress") is False
    state.apply(tree)
    assert find_directory(tree, "cypress").collapsed is False
