# sellerbot/services/product_service.py
from typing import List
from ..models.category import Category
from ..models.product import ProductDraft, SpecificationEntry

class ProductService:
    """Product draft handling for the add-product wizard"""

    def apply_category(self, draft: ProductDraft, category: Category, path: List[Category]) -> ProductDraft:
        """Attach the category and pre-fill the specification checklist from its template"""
        update = {
            'category_id': category.id,
            'category_path': [c.id for c in path]
        }
        if category.specifications:
            update['specifications'] = [
                SpecificationEntry(key=spec.key, key_ar=spec.key_ar, required=spec.required)
                for spec in category.specifications
            ]
        return draft.model_copy(update=update)

    def missing_required(self, draft: ProductDraft) -> List[SpecificationEntry]:
        """Required attributes that are still empty"""
        return [spec for spec in draft.specifications if spec.required and not spec.is_filled]
