# sellerbot/services/selection_policy.py
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict
from ..models.category import Category

class Commit(BaseModel):
    """The category becomes the selection"""
    kind: Literal["commit"] = "commit"
    category: Category

    model_config = ConfigDict(frozen=True)

class ToggleExpansion(BaseModel):
    """The category is only opened or closed"""
    kind: Literal["toggle"] = "toggle"
    category_id: str

    model_config = ConfigDict(frozen=True)

SelectionAction = Union[Commit, ToggleExpansion]

def is_leaf(category: Category) -> bool:
    return not category.children

def can_select(category: Category, allow_parent_selection: bool = False) -> bool:
    """Strict mode accepts leaves only; permissive mode accepts any category"""
    return allow_parent_selection or is_leaf(category)

def activate(category: Category, allow_parent_selection: bool = False) -> SelectionAction:
    if can_select(category, allow_parent_selection):
        return Commit(category=category)
    return ToggleExpansion(category_id=category.id)
