# sellerbot/services/filter_engine.py
"""Text search over the category forest.

A matching category is kept together with its whole subtree. A category that
does not match is kept only when something below it matches, and then only
with the matching branches under it.
"""
import logging
from typing import List
from ..models.category import Category

logger = logging.getLogger(__name__)

def matches(category: Category, query: str) -> bool:
    """Case-insensitive match on label and value, literal match on the Arabic label"""
    if not query:
        return True
    folded = query.lower()
    return (
        folded in category.label.lower()
        or query in category.label_ar
        or folded in category.value.lower()
    )

def _filter(categories: List[Category], query: str) -> List[Category]:
    filtered: List[Category] = []
    for category in categories:
        if matches(category, query):
            filtered.append(category)
        elif category.children:
            children = _filter(category.children, query)
            if children:
                filtered.append(category.model_copy(update={"children": children}))
    return filtered

def filter_categories(categories: List[Category], query: str) -> List[Category]:
    """Prune the forest down to the branches that match the query"""
    if not query:
        return categories

    filtered = _filter(categories, query)
    logger.debug(f"Query {query!r} kept {len(filtered)} of {len(categories)} top-level categories")
    return filtered
