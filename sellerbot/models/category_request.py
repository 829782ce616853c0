# sellerbot/models/category_request.py
from enum import Enum
from typing import Optional
from .base import TimeStampedModel

class RequestStatus(str, Enum):
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"

class CategoryRequest(TimeStampedModel):
    """Seller's request for a new subcategory"""
    request_id: int
    parent_category_id: str
    category_name: str
    category_name_ar: str
    description: str
    description_ar: Optional[str] = None
    business_justification: str
    expected_product_count: int = 1
    target_market: Optional[str] = None
    requested_by: Optional[int] = None
    status: RequestStatus = RequestStatus.PENDING
