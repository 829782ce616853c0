# sellerbot/services/tree_index.py
import logging
from typing import Dict, Iterable, List, Optional
from ..models.category import Category

logger = logging.getLogger(__name__)

def flatten_categories(categories: Iterable[Category]) -> List[Category]:
    """Depth-first, pre-order list of every category in the forest"""
    flattened: List[Category] = []
    stack = list(reversed(list(categories)))
    while stack:
        category = stack.pop()
        flattened.append(category)
        stack.extend(reversed(category.children))
    return flattened

class TreeIndex:
    """id -> category and id -> parent id lookups over a catalog snapshot.

    The index is built once; any change to the tree requires building a new one.
    """

    def __init__(self, tree: List[Category]):
        self.roots: List[Category] = list(tree)
        self._by_id: Dict[str, Category] = {}
        self._parent_by_id: Dict[str, str] = {}

        for category in flatten_categories(self.roots):
            self._by_id[category.id] = category
            for child in category.children:
                self._parent_by_id[child.id] = category.id

        logger.debug(f"Indexed {len(self._by_id)} categories ({len(self.roots)} roots)")

    @classmethod
    def build(cls, tree: List[Category]) -> 'TreeIndex':
        return cls(tree)

    def find_by_id(self, category_id: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        return self._by_id.get(category_id)

    def parent_of(self, category_id: Optional[str]) -> Optional[str]:
        if category_id is None:
            return None
        return self._parent_by_id.get(category_id)

    def __contains__(self, category_id) -> bool:
        return category_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)
