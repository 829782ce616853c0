# sellerbot/models/stats.py
from pydantic import BaseModel

class CatalogStats(BaseModel):
    """Summary figures for the category tree"""
    total: int = 0
    active: int = 0
    inactive: int = 0
    roots: int = 0
    leaves: int = 0
    max_depth: int = 0
    with_specifications: int = 0
