# sellerbot/services/category_selector.py
"""Category selector used by the add-product wizard and the category request form.

The selector's UI state lives in a frozen ``SelectorState``. The ``on_*``
functions are the transitions; ``CategorySelector`` wires them to a catalog,
a ``TreeIndex`` and the caller's ``on_select`` callback.
"""
import logging
from typing import Callable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from ..models.category import Category
from .expansion_state import ExpansionState
from .filter_engine import filter_categories
from .path_resolver import get_path
from .selection_policy import Commit, SelectionAction, activate
from .tree_index import TreeIndex

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Select Category"
DEFAULT_PLACEHOLDER_AR = "اختر الفئة"

class SelectorState(BaseModel):
    query: str = ""
    expansion: ExpansionState = ExpansionState()
    selected_id: Optional[str] = None
    is_open: bool = False

    model_config = ConfigDict(frozen=True)

def on_mount(index: TreeIndex, selected_id: Optional[str] = None) -> SelectorState:
    """Initial state; reveals a pre-selected category by opening its ancestors"""
    state = SelectorState()
    if not selected_id:
        return state

    if index.find_by_id(selected_id) is None:
        logger.warning(f"Pre-selected category {selected_id!r} is not in the catalog, clearing selection")
        return state

    return state.model_copy(update={
        "selected_id": selected_id,
        "expansion": state.expansion.expand_ancestors(index, selected_id)
    })

def on_open(state: SelectorState) -> SelectorState:
    return state.model_copy(update={"is_open": True})

def on_close(state: SelectorState) -> SelectorState:
    return state.model_copy(update={"is_open": False})

def on_search(
    state: SelectorState,
    tree: List[Category],
    query: str,
    filtered: Optional[List[Category]] = None
) -> SelectorState:
    """New search text. A non-empty query opens every branch left after filtering."""
    if not query:
        return state.model_copy(update={"query": ""})

    if filtered is None:
        filtered = filter_categories(tree, query)
    return state.model_copy(update={
        "query": query,
        "expansion": state.expansion.expand_all(filtered)
    })

def on_toggle(state: SelectorState, category_id: str) -> SelectorState:
    return state.model_copy(update={"expansion": state.expansion.toggle(category_id)})

def on_activate(
    state: SelectorState,
    index: TreeIndex,
    category_id: str,
    allow_parent_selection: bool = False
) -> Tuple[SelectorState, Optional[SelectionAction]]:
    """Click on a category: commit it or open/close it, depending on the policy"""
    category = index.find_by_id(category_id)
    if category is None:
        logger.warning(f"Activated unknown category {category_id!r}")
        return state, None

    action = activate(category, allow_parent_selection)
    if isinstance(action, Commit):
        return state.model_copy(update={
            "selected_id": category.id,
            "is_open": False,
            "query": ""
        }), action

    return on_toggle(state, action.category_id), action

def visible_rows(categories: List[Category], expansion: ExpansionState) -> List[Tuple[Category, int]]:
    """(category, depth) pairs shown on screen, in display order"""
    rows: List[Tuple[Category, int]] = []
    stack = [(category, 0) for category in reversed(categories)]
    while stack:
        category, depth = stack.pop()
        rows.append((category, depth))
        if category.children and category.id in expansion:
            stack.extend((child, depth + 1) for child in reversed(category.children))
    return rows

class CategorySelector:
    """Tree selector over a static catalog"""

    def __init__(
        self,
        catalog: List[Category],
        on_select: Optional[Callable[[Category], None]] = None,
        selected_category_id: Optional[str] = None,
        allow_parent_selection: bool = False,
        placeholder: Optional[str] = None,
        error: Optional[str] = None,
        index: Optional[TreeIndex] = None
    ):
        self.catalog = catalog
        self.index = index or TreeIndex.build(catalog)
        self.on_select = on_select
        self.allow_parent_selection = allow_parent_selection
        self.placeholder = placeholder
        self.error = error

        self.state = on_mount(self.index, selected_category_id)
        self._filtered = catalog
        self.path: List[Category] = get_path(self.index, self.state.selected_id) if self.state.selected_id else []

    @property
    def categories(self) -> List[Category]:
        """The forest to render: filtered by the current query, or the whole catalog"""
        return self._filtered

    @property
    def expanded(self) -> frozenset:
        return self.state.expansion.expanded

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def selected(self) -> Optional[Category]:
        return self.index.find_by_id(self.state.selected_id)

    def display_value(self, rtl: bool = False) -> str:
        selected = self.selected
        if selected is not None:
            return selected.display_label(rtl)
        if self.placeholder:
            return self.placeholder
        return DEFAULT_PLACEHOLDER_AR if rtl else DEFAULT_PLACEHOLDER

    def breadcrumb(self, rtl: bool = False) -> List[str]:
        return [category.display_label(rtl) for category in self.path]

    def visible_rows(self) -> List[Tuple[Category, int]]:
        return visible_rows(self._filtered, self.state.expansion)

    def open(self):
        self.state = on_open(self.state)

    def close(self):
        self.state = on_close(self.state)

    def search(self, query: str):
        self._filtered = filter_categories(self.catalog, query)
        self.state = on_search(self.state, self.catalog, query, self._filtered)

    def clear_search(self):
        self.search("")

    def toggle(self, category_id: str):
        self.state = on_toggle(self.state, category_id)

    def activate(self, category_id: str) -> Optional[SelectionAction]:
        self.state, action = on_activate(
            self.state, self.index, category_id, self.allow_parent_selection
        )
        if isinstance(action, Commit):
            self._filtered = self.catalog
            self.path = get_path(self.index, action.category.id)
            logger.debug(f"Selected category {action.category.id}")
            if self.on_select is not None:
                self.on_select(action.category)
        return action
