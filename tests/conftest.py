# tests/conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from sellerbot.config import Config
from sellerbot.services.catalog_loader import load_catalog, parse_catalog
from sellerbot.services.tree_index import TreeIndex

BUNDLED_CATALOG = Config.CATALOG_FILE

@pytest.fixture(scope="session")
def catalog():
    """The bundled catalog snapshot."""
    return load_catalog(BUNDLED_CATALOG)

@pytest.fixture
def index(catalog):
    return TreeIndex.build(catalog)

@pytest.fixture
def small_tree():
    """
    Two roots:
      tools > power_tools > (drills, saws)
      tools > hand_tools
      garden (leaf root)
    """
    return parse_catalog([
        {
            "id": "tools", "value": "tools", "label": "Tools", "labelAr": "أدوات", "level": 0,
            "children": [
                {
                    "id": "power_tools", "value": "power_tools", "label": "Power Tools",
                    "labelAr": "أدوات كهربائية", "level": 1,
                    "children": [
                        {"id": "drills", "value": "drills", "label": "Drills", "labelAr": "مثاقب", "level": 2},
                        {"id": "saws", "value": "saws", "label": "Saws", "labelAr": "مناشير", "level": 2},
                    ]
                },
                {"id": "hand_tools", "value": "hand_tools", "label": "Hand Tools", "labelAr": "أدوات يدوية", "level": 1},
            ]
        },
        {"id": "garden", "value": "garden", "label": "Garden", "labelAr": "حديقة", "level": 0, "isActive": False},
    ])

def _context(user_data=None):
    context = MagicMock()
    context.user_data = {} if user_data is None else user_data
    return context

@pytest.fixture
def context():
    """A callback context with an empty user_data dict."""
    return _context()

@pytest.fixture
def message_update():
    """Builds an Update carrying a text message."""
    def build(text, user_id=42):
        update = MagicMock()
        update.callback_query = None
        update.effective_user.id = user_id
        update.effective_user.first_name = "Sara"
        update.message.text = text
        update.message.reply_text = AsyncMock()
        return update
    return build

@pytest.fixture
def callback_update():
    """Builds an Update carrying an inline keyboard button press."""
    def build(data, user_id=42):
        update = MagicMock()
        update.effective_user.id = user_id
        update.callback_query.data = data
        update.callback_query.answer = AsyncMock()
        update.callback_query.edit_message_text = AsyncMock()
        return update
    return build
