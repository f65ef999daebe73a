from pathlib import Path

import pytest

import config
from dbmaker import import_products_csv

PRODUCTS_CSV = """id,name,description,category,price
1,Tomato Seeds,Hybrid tomato,Seeds,120
2,युरिया खत,Nitrogen fertilizer,Fertilizer,300
3,तिखट मिरची,,Spices,80
"""


@pytest.fixture
def products_csv(tmp_path: Path) -> Path:
    path = tmp_path / "products.csv"
    path.write_text(PRODUCTS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def catalog_db(tmp_path: Path, products_csv: Path, monkeypatch) -> Path:
    db_path = tmp_path / "catalog.db"
    import_products_csv(products_csv, db_path)
    monkeypatch.setattr(config, "DB_PATH", db_path)
    return db_path
