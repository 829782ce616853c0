# sellerbot/handlers/category_selector.py
import logging
from functools import partial
from typing import Any, Dict, List, Optional
from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from .base_handler import BaseHandler
from ..constants import SELECTOR_KEY, SELECTOR_ACTIVATE, SELECTOR_TOGGLE, SELECTOR_CLEAR, SELECTOR_CANCEL
from ..models.category import Category
from ..services.category_selector import CategorySelector
from ..services.selection_policy import Commit

logger = logging.getLogger(__name__)

class CategorySelectorHandler(BaseHandler):
    """Category tree selector shown as an inline keyboard.

    Subclasses set ``allow_parent_selection`` and ``prompt_key`` and implement
    ``select_category`` (store the choice) and ``after_selection`` (continue the
    conversation).
    """
    allow_parent_selection = False
    prompt_key = 'select_category'

    async def open_selector(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        selected_category_id: Optional[str] = None,
        error: Optional[str] = None
    ):
        """Show the selector keyboard"""
        selector = CategorySelector(
            self.catalog,
            on_select=partial(self.select_category, context.user_data),
            selected_category_id=selected_category_id,
            allow_parent_selection=self.allow_parent_selection,
            error=error,
            index=self.index
        )
        selector.open()
        context.user_data[SELECTOR_KEY] = selector
        await self.render_selector(update, context, selector)

    async def render_selector(self, update: Update, context: ContextTypes.DEFAULT_TYPE, selector: CategorySelector):
        language = self.language(context)
        await self.reply(
            update,
            self.messages.selector_prompt(selector, self.prompt_key, language),
            reply_markup=self.keyboards.category_selector(selector, language)
        )

    async def handle_selector_search(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Text typed while the selector is open filters the tree"""
        selector = context.user_data.get(SELECTOR_KEY)
        if selector is None:
            return ConversationHandler.END

        selector.search(update.message.text.strip())
        await self.render_selector(update, context, selector)
        return None

    async def handle_selector_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Button presses on the selector keyboard"""
        query = update.callback_query
        await query.answer()

        selector = context.user_data.get(SELECTOR_KEY)
        if selector is None:
            await query.edit_message_text(self.messages.text('error', self.language(context)))
            return ConversationHandler.END

        data = query.data
        if data == SELECTOR_CANCEL:
            return await self.cancel_conversation(update, context)
        elif data == SELECTOR_CLEAR:
            selector.clear_search()
        elif data.startswith(SELECTOR_TOGGLE):
            selector.toggle(data[len(SELECTOR_TOGGLE):])
        elif data.startswith(SELECTOR_ACTIVATE):
            action = selector.activate(data[len(SELECTOR_ACTIVATE):])
            if isinstance(action, Commit):
                context.user_data.pop(SELECTOR_KEY, None)
                logger.info(f"User {update.effective_user.id} selected category {action.category.id}")
                return await self.after_selection(update, context, action.category, selector.path)

        await self.render_selector(update, context, selector)
        return None

    def select_category(self, user_data: Dict[str, Any], category: Category):
        raise NotImplementedError

    async def after_selection(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        category: Category,
        path: List[Category]
    ):
        raise NotImplementedError
