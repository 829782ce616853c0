# tests/test_catalog_loader.py
import json
import pytest

from sellerbot.services.catalog_loader import CatalogLoadError, load_catalog

def test_bundled_catalog_loads(catalog):
    assert [c.id for c in catalog] == [
        "industrial_equipment", "electrical_equipment", "hydraulic_pneumatic", "safety_equipment"
    ]

def test_load_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"id": "a", "value": "a", "label": "A", "labelAr": "أ", "level": 0}
    ]), encoding="utf-8")

    catalog = load_catalog(path)
    assert catalog[0].label_ar == "أ"

def test_missing_file(tmp_path):
    with pytest.raises(CatalogLoadError) as excinfo:
        load_catalog(tmp_path / "missing.json")
    assert excinfo.value.path == tmp_path / "missing.json"

def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        load_catalog(path)

def test_invalid_category(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps([{"id": "a"}]), encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        load_catalog(path)
