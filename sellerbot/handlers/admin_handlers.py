# sellerbot/handlers/admin_handlers.py
from typing import List, Optional
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..models.category import Category
from ..services.catalog_stats import compute_stats
from ..services.category_request_service import CategoryRequestService
from ..services.path_resolver import get_path
from ..services.tree_index import TreeIndex

class AdminHandler(BaseHandler):
    """Admin commands"""

    def __init__(
        self,
        catalog: List[Category],
        index: Optional[TreeIndex] = None,
        request_service: Optional[CategoryRequestService] = None
    ):
        super().__init__(catalog, index)
        self.request_service = request_service or CategoryRequestService()

    async def show_catalog_stats(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /catalog"""
        language = self.language(context)
        if not await self.is_admin(update.effective_user.id):
            await update.message.reply_text(self.messages.text('access_denied', language))
            return

        stats = compute_stats(self.catalog)
        await update.message.reply_text(self.messages.format_stats(stats, language))

    async def show_category_requests(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /requests"""
        language = self.language(context)
        if not await self.is_admin(update.effective_user.id):
            await update.message.reply_text(self.messages.text('access_denied', language))
            return

        requests = self.request_service.list_requests()
        parent_paths = {
            request.request_id: get_path(self.index, request.parent_category_id)
            for request in requests
        }
        await update.message.reply_text(
            self.messages.format_request_list(
                requests, parent_paths, self.request_service.count_by_status(), language
            )
        )
