# sellerbot/services/catalog_loader.py
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Union
from pydantic import TypeAdapter, ValidationError
from ..config import Config
from ..models.category import Category

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(List[Category])

class CatalogLoadError(ValueError):
    """The catalog snapshot could not be read or parsed"""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot load catalog from {path}: {reason}")
        self.path = path

def parse_catalog(data) -> List[Category]:
    """Validate an already decoded snapshot (a list of category objects)"""
    return _catalog_adapter.validate_python(data)

def load_catalog(path: Union[str, Path]) -> List[Category]:
    """Read the static category tree from a JSON file"""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = parse_catalog(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to load catalog {path}: {e}")
        raise CatalogLoadError(path, str(e)) from e

    logger.info(f"Loaded catalog {path.name} with {len(catalog)} root categories")
    return catalog

@lru_cache(maxsize=1)
def default_catalog() -> List[Category]:
    """The catalog configured for this process, loaded once"""
    return load_catalog(Config.CATALOG_FILE)
