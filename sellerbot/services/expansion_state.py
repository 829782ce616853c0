# sellerbot/services/expansion_state.py
from typing import FrozenSet, Iterable, List, Union
from pydantic import BaseModel, ConfigDict
from ..models.category import Category
from .path_resolver import get_path
from .tree_index import TreeIndex, flatten_categories

class ExpansionState(BaseModel):
    """Ids of the categories whose children are currently shown.

    Membership is per category: collapsing a parent leaves its descendants'
    ids in place, so they reappear expanded when the parent is reopened.
    Every operation returns a new state.
    """
    expanded: FrozenSet[str] = frozenset()

    model_config = ConfigDict(frozen=True)

    def __contains__(self, category_id) -> bool:
        return category_id in self.expanded

    def __len__(self) -> int:
        return len(self.expanded)

    def is_expanded(self, category_id: str) -> bool:
        return category_id in self.expanded

    def expand(self, category_ids: Iterable[str]) -> 'ExpansionState':
        return ExpansionState(expanded=self.expanded | frozenset(category_ids))

    def toggle(self, category_id: str) -> 'ExpansionState':
        return ExpansionState(expanded=self.expanded ^ {category_id})

    def expand_ancestors(self, tree: Union[TreeIndex, List[Category]], category_id: str) -> 'ExpansionState':
        """Open every ancestor of the category, but not the category itself"""
        path = get_path(tree, category_id)
        return self.expand(category.id for category in path[:-1])

    def expand_all(self, categories: List[Category]) -> 'ExpansionState':
        """Open every category in the forest that has children"""
        return self.expand(
            category.id for category in flatten_categories(categories) if category.children
        )
