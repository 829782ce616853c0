# sellerbot/utils/keyboards.py
from typing import List
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from ..constants import SELECTOR_ACTIVATE, SELECTOR_TOGGLE, SELECTOR_CLEAR, SELECTOR_CANCEL
from ..models.category import Category
from ..services.category_selector import CategorySelector
from .messages import Messages
from .formatters import is_rtl

INDENT = "· "

class Keyboards:
    @staticmethod
    def category_icon(category: Category, expanded: bool) -> str:
        if category.icon:
            return category.icon
        if category.children:
            return "📂" if expanded else "📁"
        return "🏷"

    @staticmethod
    def category_selector(selector: CategorySelector, language: str = 'en') -> InlineKeyboardMarkup:
        """Category tree keyboard: one row per visible category"""
        rtl = is_rtl(language)
        keyboard: List[List[InlineKeyboardButton]] = []
        selected_id = selector.state.selected_id

        for category, depth in selector.visible_rows():
            expanded = category.id in selector.state.expansion
            label = f"{INDENT * depth}{Keyboards.category_icon(category, expanded)} {category.display_label(rtl)}"
            if category.id == selected_id:
                label += " ✅"

            row = [InlineKeyboardButton(label, callback_data=f"{SELECTOR_ACTIVATE}{category.id}")]
            if category.children:
                chevron = "▾" if expanded else ("◂" if rtl else "▸")
                row.insert(0, InlineKeyboardButton(chevron, callback_data=f"{SELECTOR_TOGGLE}{category.id}"))
                if rtl:
                    row.reverse()
            keyboard.append(row)

        # control buttons
        nav_buttons = []
        if selector.query:
            nav_buttons.append(InlineKeyboardButton(Messages.text('clear_search', language), callback_data=SELECTOR_CLEAR))
        nav_buttons.append(InlineKeyboardButton(Messages.text('cancel', language), callback_data=SELECTOR_CANCEL))
        keyboard.append(nav_buttons)

        return InlineKeyboardMarkup(keyboard)
