# sellerbot/utils/formatters.py
from datetime import datetime
from typing import List
import pytz
from ..config import Config
from ..constants import RTL_LANGUAGES
from ..models.category import Category

RLM = "\u200f"

def is_rtl(language: str) -> bool:
    return language in RTL_LANGUAGES

def format_datetime(dt: datetime) -> str:
    """Date and time in the configured timezone"""
    local_tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    local_time = dt.astimezone(local_tz)
    return local_time.strftime("%Y-%m-%d %H:%M")

def format_breadcrumb(path: List[Category], rtl: bool = False) -> str:
    """Root-to-category labels; the separator points the other way for RTL"""
    if not path:
        return ""
    separator = " ‹ " if rtl else " › "
    text = separator.join(category.display_label(rtl) for category in path)
    return f"{RLM}{text}" if rtl else text
