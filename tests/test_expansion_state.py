# tests/test_expansion_state.py
from sellerbot.services.expansion_state import ExpansionState
from sellerbot.services.filter_engine import filter_categories

def test_starts_empty():
    state = ExpansionState()
    assert len(state) == 0
    assert "tools" not in state

def test_toggle_adds_then_removes():
    state = ExpansionState().toggle("tools")
    assert "tools" in state
    assert state.is_expanded("tools")
    assert "tools" not in state.toggle("tools")

def test_toggle_twice_is_identity():
    state = ExpansionState(expanded=frozenset({"a", "b"}))
    for category_id in ["a", "c"]:
        assert state.toggle(category_id).toggle(category_id) == state

def test_operations_return_new_values():
    state = ExpansionState()
    state.toggle("tools")
    assert len(state) == 0

def test_expand_ancestors_excludes_the_category_itself(catalog):
    state = ExpansionState().expand_ancestors(catalog, "cnc_machines")
    assert state.expanded == {"industrial_equipment", "manufacturing_machinery"}

def test_expand_ancestors_of_unknown_id_changes_nothing(catalog):
    state = ExpansionState(expanded=frozenset({"x"}))
    assert state.expand_ancestors(catalog, "spaceships") == state

def test_expand_all_opens_every_parent_in_the_forest(small_tree):
    state = ExpansionState().expand_all(small_tree)
    assert state.expanded == {"tools", "power_tools"}

def test_expand_all_on_filtered_forest(catalog):
    state = ExpansionState().expand_all(filter_categories(catalog, "CNC"))
    assert state.expanded == {"industrial_equipment", "manufacturing_machinery"}

def test_expand_all_keeps_existing_ids(small_tree):
    state = ExpansionState(expanded=frozenset({"elsewhere"})).expand_all(small_tree)
    assert "elsewhere" in state

def test_collapsing_parent_keeps_descendants():
    state = ExpansionState().toggle("tools").toggle("power_tools")
    collapsed = state.toggle("tools")
    assert "power_tools" in collapsed
    assert state == collapsed.toggle("tools")
