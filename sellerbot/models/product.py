# sellerbot/models/product.py
from typing import Optional, List
from pydantic import BaseModel

class SpecificationEntry(BaseModel):
    """A product attribute to be filled in by the seller"""
    key: str
    key_ar: str
    value: str = ""
    value_ar: str = ""
    required: bool = False

    @property
    def is_filled(self) -> bool:
        return bool(self.value.strip() or self.value_ar.strip())

class ProductDraft(BaseModel):
    """Product being built in the add-product wizard"""
    name: Optional[str] = None
    category_id: Optional[str] = None
    category_path: List[str] = []
    specifications: List[SpecificationEntry] = []
