# sellerbot/bot.py
import logging
from typing import List, Optional
from telegram import Update
from telegram.ext import Application, CommandHandler
from .config import Config
from .models.category import Category
from .services.catalog_loader import default_catalog
from .services.category_request_service import CategoryRequestService
from .services.tree_index import TreeIndex
from .handlers import (
    UserHandler,
    AdminHandler,
    ProductManagementHandler,
    CategoryRequestHandler,
    product_conversation_handler,
    category_request_conversation_handler,
    error_handler
)

class SellerConsoleBot:
    def __init__(self, catalog: Optional[List[Category]] = None):
        """Build the bot around a catalog snapshot"""
        if not Config.TELEGRAM_TOKEN:
            raise ValueError("No TELEGRAM_TOKEN set in environment")

        self.logger = logging.getLogger(__name__)
        self.catalog = catalog if catalog is not None else default_catalog()
        self.index = TreeIndex.build(self.catalog)
        self.application = Application.builder().token(Config.TELEGRAM_TOKEN).build()
        self.setup_handlers()

    def setup_handlers(self):
        """Register the bot's handlers"""
        request_service = CategoryRequestService()
        user_handler = UserHandler(self.catalog, self.index)
        admin_handler = AdminHandler(self.catalog, self.index, request_service)
        product_handler = ProductManagementHandler(self.catalog, self.index)
        request_handler = CategoryRequestHandler(self.catalog, self.index, request_service)

        # basic commands
        self.application.add_handler(CommandHandler("start", user_handler.start))
        self.application.add_handler(CommandHandler("help", user_handler.help))
        self.application.add_handler(CommandHandler("language", user_handler.switch_language))

        # conversations
        self.application.add_handler(product_conversation_handler(product_handler))
        self.application.add_handler(category_request_conversation_handler(request_handler))

        # admin
        self.application.add_handler(CommandHandler("catalog", admin_handler.show_catalog_stats))
        self.application.add_handler(CommandHandler("requests", admin_handler.show_category_requests))

        self.application.add_error_handler(error_handler)

    def run(self):
        """Poll Telegram until interrupted"""
        self.logger.info(f"Starting bot with {len(self.index)} categories")
        self.application.run_polling(allowed_updates=Update.ALL_TYPES)
