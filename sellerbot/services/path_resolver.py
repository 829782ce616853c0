# sellerbot/services/path_resolver.py
from typing import List, Union
from ..models.category import Category
from .tree_index import TreeIndex, flatten_categories

def _as_index(tree: Union[TreeIndex, List[Category]]) -> TreeIndex:
    return tree if isinstance(tree, TreeIndex) else TreeIndex.build(tree)

def get_path(tree: Union[TreeIndex, List[Category]], category_id: str) -> List[Category]:
    """Root-first ancestor chain ending at the category; empty if the id is unknown"""
    index = _as_index(tree)
    category = index.find_by_id(category_id)
    if category is None:
        return []

    path = [category]
    parent_id = index.parent_of(category.id)
    while parent_id is not None:
        parent = index.find_by_id(parent_id)
        if parent is None:
            break
        path.insert(0, parent)
        parent_id = index.parent_of(parent.id)
    return path

def get_leaf_categories(tree: List[Category]) -> List[Category]:
    """Categories without children, in depth-first order"""
    return [category for category in flatten_categories(tree) if category.is_leaf]
