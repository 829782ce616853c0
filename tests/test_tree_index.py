# tests/test_tree_index.py
from sellerbot.services.tree_index import TreeIndex, flatten_categories

def test_flatten_is_depth_first_pre_order(small_tree):
    ids = [c.id for c in flatten_categories(small_tree)]
    assert ids == ["tools", "power_tools", "drills", "saws", "hand_tools", "garden"]

def test_find_by_id(small_tree):
    index = TreeIndex.build(small_tree)
    assert index.find_by_id("saws").label == "Saws"
    assert index.find_by_id("tools") is small_tree[0]

def test_find_missing_id_returns_none(small_tree):
    index = TreeIndex.build(small_tree)
    assert index.find_by_id("nope") is None
    assert index.find_by_id(None) is None

def test_parent_of(small_tree):
    index = TreeIndex.build(small_tree)
    assert index.parent_of("drills") == "power_tools"
    assert index.parent_of("power_tools") == "tools"
    assert index.parent_of("tools") is None
    assert index.parent_of("garden") is None
    assert index.parent_of("nope") is None

def test_size_and_membership(catalog):
    index = TreeIndex(catalog)
    assert len(index) == 28
    assert "forklifts" in index
    assert "spaceships" not in index
    assert index.roots == catalog

def test_every_child_level_is_parent_level_plus_one(catalog, index):
    for category in flatten_categories(catalog):
        parent_id = index.parent_of(category.id)
        if parent_id is None:
            assert category.level == 0
        else:
            assert category.level == index.find_by_id(parent_id).level + 1
