import json
import sqlite3

import pytest

from build_search_keywords import main, regenerate_keywords
from dbmaker import import_products_csv, load_products_csv
from keyword_generator import generate_search_keywords


def fetch(db_path, sql, params=()):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(sql, params).fetchall()
    finally:
        conn.close()


def test_load_products_csv_attaches_keywords(products_csv):
    df = load_products_csv(products_csv)
    assert list(df["name"]) == ["Tomato Seeds", "युरिया खत", "तिखट मिरची"]
    stored = json.loads(df.loc[1, "searchKeywords"])
    assert stored == generate_search_keywords("युरिया खत")
    # non-ASCII stays readable in storage
    assert "युरिया" in df.loc[1, "searchKeywords"]


def test_missing_optional_columns_and_blank_names(tmp_path):
    path = tmp_path / "minimal.csv"
    path.write_text("name\nKhaad\n   \nUrea\n", encoding="utf-8")
    df = load_products_csv(path)
    assert list(df["name"]) == ["Khaad", "Urea"]
    ids = list(df["id"])
    assert all(ids) and len(set(ids)) == 2
    assert list(df["category"]) == ["", ""]


def test_csv_without_name_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("title\nUrea\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_products_csv(path)


def test_missing_csv(tmp_path):
    with pytest.raises(RuntimeError):
        load_products_csv(tmp_path / "nope.csv")


def test_import_writes_table(products_csv, tmp_path):
    db_path = tmp_path / "catalog.db"
    assert import_products_csv(products_csv, db_path) == 3
    rows = fetch(db_path, 'SELECT id, name, category, "searchKeywords" FROM products ORDER BY id')
    assert [r[0] for r in rows] == ["1", "2", "3"]
    assert json.loads(rows[0][3])[:3] == ["Tomato Seeds", "tomato", "seeds"]


def test_regenerate_keywords_follows_renamed_products(products_csv, tmp_path):
    db_path = tmp_path / "catalog.db"
    import_products_csv(products_csv, db_path)
    conn = sqlite3.connect(db_path)
    conn.execute("UPDATE products SET name = ? WHERE id = ?", ("Onion Seeds", "1"))
    conn.commit()
    conn.close()

    assert regenerate_keywords(db_path) == 3

    (stored,) = fetch(db_path, 'SELECT "searchKeywords" FROM products WHERE id = ?', ("1",))[0]
    assert json.loads(stored) == generate_search_keywords("Onion Seeds")


def test_regenerate_keywords_missing_db(tmp_path):
    with pytest.raises(RuntimeError):
        regenerate_keywords(tmp_path / "missing.db")


def test_preview_cli_prints_keywords(capsys):
    main(["Tomato Seeds"])
    out = capsys.readouterr().out
    assert 'Input: "Tomato Seeds"' in out
    assert "टओमअटओ" in out
    assert f"Count: {len(generate_search_keywords('Tomato Seeds'))}" in out


def test_generated_ids_never_clash_with_explicit_ids(tmp_path):
    path = tmp_path / "mixed_ids.csv"
    path.write_text("id,name\n2,Urea\n,Khaad\n", encoding="utf-8")
    df = load_products_csv(path)
    ids = list(df["id"])
    assert ids[0] == "2"
    assert ids[1] and ids[1] != "2"


def test_edit_after_import_touches_one_row(tmp_path, monkeypatch):
    import config
    from catalog_api import Product, save_product

    path = tmp_path / "mixed_ids.csv"
    path.write_text("id,name\n2,Urea\n,Khaad\n", encoding="utf-8")
    db_path = tmp_path / "catalog.db"
    import_products_csv(path, db_path)
    monkeypatch.setattr(config, "DB_PATH", db_path)

    save_product(Product(id="2", name="Urea 46"))

    names = sorted(r[0] for r in fetch(db_path, "SELECT name FROM products"))
    assert names == ["Khaad", "Urea 46"]
