# sellerbot/services/category_request_service.py
import logging
from datetime import datetime, timezone
from typing import Dict, List, Any, Optional
from ..models.category_request import CategoryRequest, RequestStatus

class CategoryRequestService:
    """Collects sellers' requests for new categories"""

    def __init__(self):
        self.requests: List[CategoryRequest] = []
        self.logger = logging.getLogger(__name__)

    def submit(self, request_data: Dict[str, Any], requested_by: Optional[int] = None) -> CategoryRequest:
        """Register a new category request"""
        request = CategoryRequest(
            request_id=len(self.requests) + 1,
            created_at=datetime.now(timezone.utc),
            requested_by=requested_by,
            **request_data
        )
        self.requests.append(request)
        self.logger.info(
            f"Category request #{request.request_id} submitted by {requested_by}: "
            f"{request.category_name} under {request.parent_category_id}"
        )
        return request

    def list_requests(self, status: Optional[RequestStatus] = None) -> List[CategoryRequest]:
        """Requests submitted in this session, newest first"""
        requests = [r for r in self.requests if status is None or r.status == status]
        return sorted(requests, key=lambda r: r.request_id, reverse=True)

    def count_by_status(self) -> Dict[RequestStatus, int]:
        counts = {status: 0 for status in RequestStatus}
        for request in self.requests:
            counts[request.status] += 1
        return counts
