# sellerbot/handlers/base_handler.py
import logging
from typing import List, Optional
from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from ..config import Config
from ..constants import LANGUAGE_KEY, SELECTOR_KEY, PRODUCT_DRAFT_KEY, CATEGORY_REQUEST_KEY
from ..models.category import Category
from ..services.tree_index import TreeIndex
from ..utils.keyboards import Keyboards
from ..utils.messages import Messages

logger = logging.getLogger(__name__)

class BaseHandler:
    """Base class for handlers"""
    def __init__(self, catalog: List[Category], index: Optional[TreeIndex] = None):
        self.catalog = catalog
        self.index = index or TreeIndex.build(catalog)
        self.keyboards = Keyboards()
        self.messages = Messages()

    @staticmethod
    def language(context: ContextTypes.DEFAULT_TYPE) -> str:
        return context.user_data.get(LANGUAGE_KEY, Config.DEFAULT_LANGUAGE)

    async def reply(self, update: Update, text: str, reply_markup=None):
        """Edit the message behind a button press, or answer a typed message"""
        if update.callback_query:
            await update.callback_query.edit_message_text(text, reply_markup=reply_markup)
        else:
            await update.message.reply_text(text, reply_markup=reply_markup)

    async def cancel_conversation(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Cancel the conversation; a button press must already be answered"""
        for key in (SELECTOR_KEY, PRODUCT_DRAFT_KEY, CATEGORY_REQUEST_KEY):
            context.user_data.pop(key, None)

        await self.reply(update, self.messages.text('cancelled', self.language(context)))
        return ConversationHandler.END

    async def is_admin(self, user_id: int) -> bool:
        """Check admin access"""
        return user_id in Config.ADMIN_IDS

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Log unhandled errors and tell the user something went wrong"""
    logger.error(f"Error while handling update: {context.error}", exc_info=context.error)

    if isinstance(update, Update) and update.effective_message:
        language = context.user_data.get(LANGUAGE_KEY, Config.DEFAULT_LANGUAGE) if context.user_data is not None else Config.DEFAULT_LANGUAGE
        await update.effective_message.reply_text(Messages.text('error', language))
