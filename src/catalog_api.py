from __future__ import annotations

import json
import sqlite3
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from catalog_log import get_logger
from config import (
    COL_CATEGORY,
    COL_DESCRIPTION,
    COL_FEATURED,
    COL_ID,
    COL_KEYWORDS,
    COL_NAME,
    COL_PRICE,
    TABLE_COLUMNS,
)
from keyword_generator import MAX_KEYWORDS, generate_search_keywords
from search_matcher import filter_products

logger = get_logger(__name__)


# ==========================================================
# Pydantic Models
# ==========================================================

class KeywordRequest(BaseModel):
    name: str = ""


class KeywordResponse(BaseModel):
    name: str
    keywords: List[str] = Field(default_factory=list)
    count: int = 0


class SearchRequest(BaseModel):
    query_text: str = ""
    # restrict to one category before the text test
    category: Optional[str] = None


class Product(BaseModel):
    id: Optional[str] = None
    name: str
    description: str = ""
    category: str = ""
    price: Optional[str] = None
    featured: Optional[str] = None
    searchKeywords: List[str] = Field(default_factory=list)


# ==========================================================
# DB ACCESS
# ==========================================================

def get_db_path() -> Path:
    return config.DB_PATH


def get_connection() -> sqlite3.Connection:
    db_path = get_db_path()
    if not db_path.exists():
        raise RuntimeError(f"DB file not found: {db_path}")
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def parse_keywords(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    try:
        parsed = json.loads(value)
    except (TypeError, json.JSONDecodeError):
        logger.warning(f"unreadable {COL_KEYWORDS} value: {value!r}")
        return []
    return [str(v) for v in parsed] if isinstance(parsed, list) else []


def row_to_product(row: sqlite3.Row) -> Dict[str, Any]:
    d = dict(row)
    for col in (COL_NAME, COL_DESCRIPTION, COL_CATEGORY):
        d[col] = d.get(col) or ""
    d[COL_KEYWORDS] = parse_keywords(d.get(COL_KEYWORDS))
    return d


def load_products() -> List[Dict[str, Any]]:
    conn = get_connection()
    try:
        cur = conn.cursor()
        try:
            cur.execute(f"SELECT * FROM {config.TABLE_NAME}")
        except sqlite3.OperationalError as e:
            raise RuntimeError(f"Table {config.TABLE_NAME!r} not readable in {get_db_path()}: {e}") from e
        return [row_to_product(r) for r in cur.fetchall()]
    finally:
        conn.close()


def ensure_table(conn: sqlite3.Connection):
    cols = ", ".join(f'"{c}" TEXT' for c in TABLE_COLUMNS)
    conn.execute(f"CREATE TABLE IF NOT EXISTS {config.TABLE_NAME} ({cols})")


def save_product(product: Product) -> Dict[str, Any]:
    """Insert or update a product; keywords are always regenerated from the name."""
    record = product.model_dump()
    record[COL_ID] = record.get(COL_ID) or str(uuid.uuid4())
    record[COL_KEYWORDS] = generate_search_keywords(record[COL_NAME])

    values = [record.get(c) for c in TABLE_COLUMNS]
    values[TABLE_COLUMNS.index(COL_KEYWORDS)] = json.dumps(record[COL_KEYWORDS], ensure_ascii=False)

    conn = sqlite3.connect(get_db_path())
    try:
        ensure_table(conn)
        cur = conn.cursor()
        cur.execute(
            f'SELECT 1 FROM {config.TABLE_NAME} WHERE "{COL_ID}" = ?',
            (record[COL_ID],),
        )
        if cur.fetchone():
            assignments = ", ".join(f'"{c}" = ?' for c in TABLE_COLUMNS[1:])
            cur.execute(
                f'UPDATE {config.TABLE_NAME} SET {assignments} WHERE "{COL_ID}" = ?',
                values[1:] + [record[COL_ID]],
            )
        else:
            placeholders = ", ".join(["?"] * len(TABLE_COLUMNS))
            quoted = ", ".join(f'"{c}"' for c in TABLE_COLUMNS)
            cur.execute(
                f"INSERT INTO {config.TABLE_NAME} ({quoted}) VALUES ({placeholders})",
                values,
            )
        conn.commit()
    finally:
        conn.close()

    logger.info(
        "product saved",
        extra={"product_id": record[COL_ID], "keyword_count": len(record[COL_KEYWORDS])},
    )
    return record


# ==========================================================
# FASTAPI APP
# ==========================================================

app = FastAPI(
    title="Catalog Keyword Search API",
    version="1.0.0",
    description="Multilingual (Devanagari / Roman) keyword generation and product search",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/ping")
def ping():
    db_path = get_db_path()
    return {
        "status": "ok",
        "db_exists": db_path.exists(),
        "db_path": str(db_path),
        "table": config.TABLE_NAME,
        "keyword_cap": MAX_KEYWORDS,
    }


@app.post("/keywords", response_model=KeywordResponse)
def keywords(req: KeywordRequest) -> KeywordResponse:
    kws = generate_search_keywords(req.name)
    return KeywordResponse(name=req.name, keywords=kws, count=len(kws))


@app.post("/products")
def upsert_product(product: Product) -> Dict[str, Any]:
    if not product.name.strip():
        raise HTTPException(status_code=422, detail="Product name must not be empty")
    return save_product(product)


@app.post("/search")
def search(req: SearchRequest) -> Dict[str, Any]:
    try:
        products = load_products()
    except RuntimeError as e:
        logger.error(str(e), extra={"db_path": str(get_db_path())})
        raise HTTPException(status_code=503, detail=str(e))

    results = filter_products(req.query_text, products, category=req.category)

    logger.info(
        "search",
        extra={
            "query": req.query_text,
            "category": req.category,
            "result_count": len(results),
        },
    )

    return {
        "query_text": req.query_text,
        "category_used": req.category,
        "count": len(results),
        "results": results,
    }
