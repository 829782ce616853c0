# sellerbot/services/catalog_stats.py
from typing import List
from ..models.category import Category
from ..models.stats import CatalogStats
from .tree_index import flatten_categories

def compute_stats(tree: List[Category]) -> CatalogStats:
    """Counts over the whole tree"""
    categories = flatten_categories(tree)
    active = sum(1 for c in categories if c.is_active)
    return CatalogStats(
        total=len(categories),
        active=active,
        inactive=len(categories) - active,
        roots=len(tree),
        leaves=sum(1 for c in categories if c.is_leaf),
        max_depth=max((c.level for c in categories), default=0),
        with_specifications=sum(1 for c in categories if c.specifications)
    )
