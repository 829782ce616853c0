# sellerbot/handlers/user_handlers.py
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..constants import LANGUAGE_KEY

class UserHandler(BaseHandler):
    """Seller commands outside the conversations"""

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start"""
        user = update.effective_user
        await update.message.reply_text(
            self.messages.text('welcome', self.language(context), name=user.first_name)
        )

    async def help(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /help"""
        await update.message.reply_text(self.messages.text('help', self.language(context)))

    async def switch_language(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Toggle between English and Arabic"""
        language = 'en' if self.language(context) == 'ar' else 'ar'
        context.user_data[LANGUAGE_KEY] = language
        await update.message.reply_text(self.messages.text('language_set', language))
