# sellerbot/handlers/category_request.py
import logging
from typing import Any, Dict, List, Optional
from telegram import Update
from telegram.ext import (
    ContextTypes, ConversationHandler, CommandHandler,
    MessageHandler, CallbackQueryHandler, filters
)
from .category_selector import CategorySelectorHandler
from ..constants import (
    WAITING_PARENT_CATEGORY, WAITING_CATEGORY_NAME, WAITING_CATEGORY_NAME_AR,
    WAITING_CATEGORY_DESCRIPTION, WAITING_CATEGORY_DESCRIPTION_AR,
    WAITING_BUSINESS_JUSTIFICATION, WAITING_EXPECTED_PRODUCT_COUNT,
    WAITING_TARGET_MARKET, CATEGORY_REQUEST_KEY, SELECTOR_PATTERN
)
from ..models.category import Category
from ..services.category_request_service import CategoryRequestService
from ..services.path_resolver import get_path

logger = logging.getLogger(__name__)

class CategoryRequestHandler(CategorySelectorHandler):
    """Request a new subcategory; any category may be chosen as the parent"""
    allow_parent_selection = True
    prompt_key = 'select_parent'

    def __init__(self, catalog, index=None, request_service: Optional[CategoryRequestService] = None):
        super().__init__(catalog, index)
        self.request_service = request_service or CategoryRequestService()

    async def start_request(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Start the category request form"""
        context.user_data[CATEGORY_REQUEST_KEY] = {}
        await self.open_selector(update, context)
        return WAITING_PARENT_CATEGORY

    def select_category(self, user_data: Dict[str, Any], category: Category):
        user_data.setdefault(CATEGORY_REQUEST_KEY, {})['parent_category_id'] = category.id

    async def after_selection(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        category: Category,
        path: List[Category]
    ):
        await self.reply(update, self.messages.text('category_name', self.language(context)))
        return WAITING_CATEGORY_NAME

    async def _store_and_ask(self, update, context, field: str, value, prompt_key: str, next_state: int):
        context.user_data.setdefault(CATEGORY_REQUEST_KEY, {})[field] = value
        await update.message.reply_text(self.messages.text(prompt_key, self.language(context)))
        return next_state

    async def handle_category_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return await self._store_and_ask(
            update, context, 'category_name', update.message.text.strip(),
            'category_name_ar', WAITING_CATEGORY_NAME_AR
        )

    async def handle_category_name_ar(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return await self._store_and_ask(
            update, context, 'category_name_ar', update.message.text.strip(),
            'description', WAITING_CATEGORY_DESCRIPTION
        )

    async def handle_description(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return await self._store_and_ask(
            update, context, 'description', update.message.text.strip(),
            'description_ar', WAITING_CATEGORY_DESCRIPTION_AR
        )

    async def handle_description_ar(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        text = update.message.text.strip()
        value = None if text == "/skip" else text
        return await self._store_and_ask(
            update, context, 'description_ar', value,
            'business_justification', WAITING_BUSINESS_JUSTIFICATION
        )

    async def handle_business_justification(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        return await self._store_and_ask(
            update, context, 'business_justification', update.message.text.strip(),
            'expected_product_count', WAITING_EXPECTED_PRODUCT_COUNT
        )

    async def handle_expected_product_count(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        try:
            count = int(update.message.text.strip())
            if count < 1:
                raise ValueError(count)
        except ValueError:
            await update.message.reply_text(self.messages.text('invalid_count', self.language(context)))
            return WAITING_EXPECTED_PRODUCT_COUNT

        return await self._store_and_ask(
            update, context, 'expected_product_count', count,
            'target_market', WAITING_TARGET_MARKET
        )

    async def handle_target_market(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Last field; submit the request"""
        text = update.message.text.strip()
        request_data = context.user_data.pop(CATEGORY_REQUEST_KEY, {})
        request_data['target_market'] = None if text == "/skip" else text

        language = self.language(context)
        request = self.request_service.submit(request_data, requested_by=update.effective_user.id)
        parent_path = get_path(self.index, request.parent_category_id)

        await update.message.reply_text(
            f"{self.messages.text('request_submitted', language)}\n\n"
            f"{self.messages.format_category_request(request, parent_path, language)}"
        )
        return ConversationHandler.END

def category_request_conversation_handler(handler: CategoryRequestHandler) -> ConversationHandler:
    """Conversation for requesting a new category"""
    text_only = filters.TEXT & ~filters.COMMAND
    text_or_skip = filters.TEXT & (~filters.COMMAND | filters.Regex(r'^/skip$'))

    return ConversationHandler(
        entry_points=[CommandHandler('requestcategory', handler.start_request)],
        states={
            WAITING_PARENT_CATEGORY: [
                CallbackQueryHandler(handler.handle_selector_callback, pattern=SELECTOR_PATTERN),
                MessageHandler(text_only, handler.handle_selector_search)
            ],
            WAITING_CATEGORY_NAME: [MessageHandler(text_only, handler.handle_category_name)],
            WAITING_CATEGORY_NAME_AR: [MessageHandler(text_only, handler.handle_category_name_ar)],
            WAITING_CATEGORY_DESCRIPTION: [MessageHandler(text_only, handler.handle_description)],
            WAITING_CATEGORY_DESCRIPTION_AR: [MessageHandler(text_or_skip, handler.handle_description_ar)],
            WAITING_BUSINESS_JUSTIFICATION: [MessageHandler(text_only, handler.handle_business_justification)],
            WAITING_EXPECTED_PRODUCT_COUNT: [MessageHandler(text_only, handler.handle_expected_product_count)],
            WAITING_TARGET_MARKET: [MessageHandler(text_or_skip, handler.handle_target_market)]
        },
        fallbacks=[CommandHandler('cancel', handler.cancel_conversation)]
    )
