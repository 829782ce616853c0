# sellerbot/handlers/product_management.py
import logging
from typing import Any, Dict, List
from telegram import Update
from telegram.ext import (
    ContextTypes, ConversationHandler, CommandHandler,
    MessageHandler, CallbackQueryHandler, filters
)
from .category_selector import CategorySelectorHandler
from ..constants import (
    WAITING_PRODUCT_NAME, WAITING_PRODUCT_CATEGORY,
    PRODUCT_DRAFT_KEY, SELECTOR_PATTERN
)
from ..models.category import Category
from ..models.product import ProductDraft
from ..services.path_resolver import get_path
from ..services.product_service import ProductService

logger = logging.getLogger(__name__)

class ProductManagementHandler(CategorySelectorHandler):
    """Add-product wizard; products go to leaf categories only"""
    allow_parent_selection = False
    prompt_key = 'select_category'

    def __init__(self, catalog, index=None):
        super().__init__(catalog, index)
        self.product_service = ProductService()

    async def start_add_product(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Start the add-product wizard"""
        context.user_data[PRODUCT_DRAFT_KEY] = ProductDraft()
        await update.message.reply_text(self.messages.text('product_name', self.language(context)))
        return WAITING_PRODUCT_NAME

    async def handle_product_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Receive the product name"""
        draft = context.user_data.get(PRODUCT_DRAFT_KEY) or ProductDraft()
        draft = draft.model_copy(update={'name': update.message.text.strip()})
        context.user_data[PRODUCT_DRAFT_KEY] = draft

        await self.open_selector(update, context, selected_category_id=draft.category_id)
        return WAITING_PRODUCT_CATEGORY

    def select_category(self, user_data: Dict[str, Any], category: Category):
        draft = user_data.get(PRODUCT_DRAFT_KEY) or ProductDraft()
        path = get_path(self.index, category.id)
        user_data[PRODUCT_DRAFT_KEY] = self.product_service.apply_category(draft, category, path)

    async def after_selection(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        category: Category,
        path: List[Category]
    ):
        language = self.language(context)
        draft = context.user_data.pop(PRODUCT_DRAFT_KEY, ProductDraft())
        logger.info(f"Product draft {draft.name!r} assigned to category {draft.category_id}")

        await self.reply(
            update,
            f"{self.messages.format_product_category(draft, path, language)}\n\n"
            f"{self.messages.format_specifications(category, language)}"
            f"{self._missing_required_note(draft, language)}"
        )
        return ConversationHandler.END

    def _missing_required_note(self, draft: ProductDraft, language: str) -> str:
        note = self.messages.format_missing_required(self.product_service.missing_required(draft), language)
        return f"\n\n{note}" if note else ""

def product_conversation_handler(handler: ProductManagementHandler) -> ConversationHandler:
    """Conversation for adding a product"""
    return ConversationHandler(
        entry_points=[CommandHandler('addproduct', handler.start_add_product)],
        states={
            WAITING_PRODUCT_NAME: [
                MessageHandler(filters.TEXT & ~filters.COMMAND, handler.handle_product_name)
            ],
            WAITING_PRODUCT_CATEGORY: [
                CallbackQueryHandler(handler.handle_selector_callback, pattern=SELECTOR_PATTERN),
                MessageHandler(filters.TEXT & ~filters.COMMAND, handler.handle_selector_search)
            ]
        },
        fallbacks=[CommandHandler('cancel', handler.cancel_conversation)]
    )
