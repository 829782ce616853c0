# tests/test_category_selector.py
import pytest

from sellerbot.services.category_selector import (
    CategorySelector, SelectorState, on_mount, on_search, on_toggle, on_activate,
    on_open, on_close, visible_rows
)
from sellerbot.services.expansion_state import ExpansionState
from sellerbot.services.selection_policy import Commit, ToggleExpansion

@pytest.fixture
def selected():
    """Collects categories passed to on_select."""
    return []

class TestTransitions:

    def test_mount_without_selection(self, index):
        assert on_mount(index) == SelectorState()

    def test_mount_reveals_preselected_category(self, index):
        state = on_mount(index, "cnc_machines")
        assert state.selected_id == "cnc_machines"
        assert "industrial_equipment" in state.expansion
        assert "manufacturing_machinery" in state.expansion
        assert "cnc_machines" not in state.expansion

    def test_mount_clears_stale_selection(self, index):
        state = on_mount(index, "discontinued_category")
        assert state.selected_id is None
        assert len(state.expansion) == 0

    def test_open_and_close(self):
        state = on_open(SelectorState())
        assert state.is_open
        assert not on_close(state).is_open

    def test_search_expands_matching_branches(self, catalog):
        state = on_search(SelectorState(), catalog, "CNC")
        assert state.query == "CNC"
        assert state.expansion.expanded == {"industrial_equipment", "manufacturing_machinery"}

    def test_clearing_search_keeps_expansion(self, catalog):
        searched = on_search(SelectorState(), catalog, "CNC")
        cleared = on_search(searched, catalog, "")
        assert cleared.query == ""
        assert cleared.expansion == searched.expansion

    def test_transitions_do_not_modify_input(self, catalog):
        state = SelectorState()
        on_search(state, catalog, "CNC")
        on_toggle(state, "industrial_equipment")
        assert state == SelectorState()

    def test_activate_parent_in_strict_mode(self, index):
        state, action = on_activate(on_open(SelectorState()), index, "manufacturing_machinery")
        assert isinstance(action, ToggleExpansion)
        assert "manufacturing_machinery" in state.expansion
        assert state.selected_id is None
        assert state.is_open

    def test_commit_closes_and_clears_query(self, index, catalog):
        state = on_open(on_search(SelectorState(), catalog, "lathe"))
        state, action = on_activate(state, index, "lathes")
        assert isinstance(action, Commit)
        assert state.selected_id == "lathes"
        assert state.query == ""
        assert not state.is_open

    def test_activate_unknown_id_is_noop(self, index):
        state = on_open(SelectorState())
        new_state, action = on_activate(state, index, "ghost")
        assert action is None
        assert new_state == state

class TestVisibleRows:

    def test_only_roots_when_nothing_is_expanded(self, small_tree):
        rows = visible_rows(small_tree, ExpansionState())
        assert [(c.id, depth) for c, depth in rows] == [("tools", 0), ("garden", 0)]

    def test_expanded_children_follow_their_parent(self, small_tree):
        expansion = ExpansionState().toggle("tools").toggle("power_tools")
        rows = visible_rows(small_tree, expansion)
        assert [(c.id, depth) for c, depth in rows] == [
            ("tools", 0), ("power_tools", 1), ("drills", 2), ("saws", 2),
            ("hand_tools", 1), ("garden", 0)
        ]

    def test_collapsed_parent_hides_expanded_descendants(self, small_tree):
        expansion = ExpansionState().toggle("power_tools")
        rows = visible_rows(small_tree, expansion)
        assert [c.id for c, _ in rows] == ["tools", "garden"]

class TestCategorySelector:

    def test_preselected_category_is_displayed(self, catalog):
        selector = CategorySelector(catalog, selected_category_id="cnc_machines")
        assert selector.expanded == {"industrial_equipment", "manufacturing_machinery"}
        assert selector.display_value() == "CNC Machines"
        assert selector.display_value(rtl=True) == "آلات CNC"
        assert selector.breadcrumb() == ["Industrial Equipment", "Manufacturing Machinery", "CNC Machines"]

    def test_placeholder_when_nothing_selected(self, catalog):
        assert CategorySelector(catalog).display_value() == "Select Category"
        assert CategorySelector(catalog).display_value(rtl=True) == "اختر الفئة"
        assert CategorySelector(catalog, placeholder="Select parent category").display_value() == "Select parent category"

    def test_stale_selection_shows_placeholder(self, catalog):
        selector = CategorySelector(catalog, selected_category_id="discontinued_category")
        assert selector.selected is None
        assert selector.path == []
        assert selector.display_value() == "Select Category"

    def test_search_filters_and_expands(self, catalog):
        selector = CategorySelector(catalog)
        selector.open()
        selector.search("CNC")

        assert [c.id for c in selector.categories] == ["industrial_equipment"]
        assert [c.id for c, _ in selector.visible_rows()] == [
            "industrial_equipment", "manufacturing_machinery", "cnc_machines"
        ]

    def test_clear_search_restores_full_tree(self, catalog):
        selector = CategorySelector(catalog)
        selector.search("CNC")
        expanded = selector.expanded
        selector.clear_search()

        assert selector.categories is catalog
        assert selector.expanded == expanded
        assert selector.query == ""

    def test_strict_mode_parent_click_only_toggles(self, catalog, selected):
        selector = CategorySelector(catalog, on_select=selected.append)
        selector.open()
        action = selector.activate("manufacturing_machinery")

        assert isinstance(action, ToggleExpansion)
        assert selected == []
        assert "manufacturing_machinery" in selector.expanded
        assert selector.is_open

    def test_permissive_mode_parent_click_commits(self, catalog, selected, index):
        selector = CategorySelector(catalog, on_select=selected.append, allow_parent_selection=True)
        selector.open()
        action = selector.activate("manufacturing_machinery")

        assert isinstance(action, Commit)
        assert selected == [index.find_by_id("manufacturing_machinery")]
        assert not selector.is_open
        assert [c.id for c in selector.path] == ["industrial_equipment", "manufacturing_machinery"]

    def test_commit_after_search_resets_query_and_tree(self, catalog, selected):
        selector = CategorySelector(catalog, on_select=selected.append)
        selector.open()
        selector.search("forklift")
        selector.activate("forklifts")

        assert [c.id for c in selected] == ["forklifts"]
        assert selector.query == ""
        assert selector.categories is catalog
        assert selector.display_value() == "Forklifts"

    def test_toggle_twice_restores_expansion(self, catalog):
        selector = CategorySelector(catalog)
        before = selector.expanded
        selector.toggle("electrical_equipment")
        selector.toggle("electrical_equipment")
        assert selector.expanded == before

    def test_unknown_activation_does_not_call_back(self, catalog, selected):
        selector = CategorySelector(catalog, on_select=selected.append)
        assert selector.activate("ghost") is None
        assert selected == []
