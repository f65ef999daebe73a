import json
import sqlite3
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd

from config import (
    COL_CATEGORY,
    COL_DESCRIPTION,
    COL_FEATURED,
    COL_ID,
    COL_KEYWORDS,
    COL_NAME,
    COL_PRICE,
    CSV_PATH,
    DB_PATH,
    TABLE_COLUMNS,
    TABLE_NAME,
)
from keyword_generator import generate_search_keywords


# -------------------------------------------------------
# GLOBAL SETTINGS
# -------------------------------------------------------
OPTIONAL_COLUMNS = [COL_ID, COL_DESCRIPTION, COL_CATEGORY, COL_PRICE, COL_FEATURED]


# -------------------------------------------------------
# HELPERS
# -------------------------------------------------------
def log(msg: str):
    t = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{t}] {msg}")


def clean_text(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def keywords_to_json(name: str) -> str:
    return json.dumps(generate_search_keywords(name), ensure_ascii=False)


# -------------------------------------------------------
# CSV -> SQLITE (keywords generated on import)
# -------------------------------------------------------
def load_products_csv(csv_path: Path) -> pd.DataFrame:
    """
    Load a product CSV and attach a ``searchKeywords`` column.
    Rows without a usable name are dropped.
    """
    if not csv_path.exists():
        raise RuntimeError(f"CSV file not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="utf-8")

    if COL_NAME not in df.columns:
        raise ValueError(
            f"Column '{COL_NAME}' not found in {csv_path}. Columns are: {list(df.columns)}"
        )

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            log(f"  ⚠ Column not found, left empty: {col}")
            df[col] = ""

    df[COL_NAME] = df[COL_NAME].map(clean_text)
    df[COL_DESCRIPTION] = df[COL_DESCRIPTION].map(clean_text)
    df[COL_CATEGORY] = df[COL_CATEGORY].map(clean_text)

    blank = df[COL_NAME] == ""
    if blank.any():
        log(f"  ⚠ Skipped {int(blank.sum())} row(s) with an empty name")
        df = df[~blank].copy()

    # rows without an id get a fresh one, same as products created through the API
    df[COL_ID] = [clean_text(v) or str(uuid.uuid4()) for v in df[COL_ID].tolist()]

    df[COL_KEYWORDS] = df[COL_NAME].map(keywords_to_json)
    return df[TABLE_COLUMNS].reset_index(drop=True)


def import_products_csv(csv_path: Path, db_path: Path, table: Optional[str] = None) -> int:
    """
    Convert a product CSV into the SQLite catalog.
    Table name: products (configurable). The table is fully replaced.
    """
    table = table or TABLE_NAME

    log(f"Loading product CSV: {csv_path}")
    df = load_products_csv(csv_path)

    log(f"Writing {len(df)} rows to SQLite DB: {db_path}")
    conn = sqlite3.connect(db_path)
    try:
        df.to_sql(table, conn, if_exists="replace", index=False)
    finally:
        conn.close()

    log(f"SQLite DB updated: {db_path}")
    return len(df)


# -------------------------------------------------------
# RUN
# -------------------------------------------------------
if __name__ == "__main__":
    import_products_csv(CSV_PATH, DB_PATH)
