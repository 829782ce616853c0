# sellerbot/handlers/__init__.py
"""Telegram handlers"""
from .base_handler import BaseHandler, error_handler
from .user_handlers import UserHandler
from .admin_handlers import AdminHandler
from .category_selector import CategorySelectorHandler
from .product_management import ProductManagementHandler, product_conversation_handler
from .category_request import CategoryRequestHandler, category_request_conversation_handler

__all__ = [
    'BaseHandler',
    'error_handler',
    'UserHandler',
    'AdminHandler',
    'CategorySelectorHandler',
    'ProductManagementHandler',
    'product_conversation_handler',
    'CategoryRequestHandler',
    'category_request_conversation_handler'
]
