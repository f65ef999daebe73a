import json
import sqlite3
import sys
from pathlib import Path
from typing import List, Optional

from config import COL_ID, COL_KEYWORDS, COL_NAME, DB_PATH, TABLE_NAME
from dbmaker import log
from keyword_generator import generate_search_keywords


def regenerate_keywords(db_path: Path, table: Optional[str] = None) -> int:
    """Recompute the stored keywords of every product from its current name."""
    table = table or TABLE_NAME
    if not db_path.exists():
        raise RuntimeError(f"DB file not found: {db_path}")

    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(f'SELECT "{COL_ID}", "{COL_NAME}" FROM {table}')
        rows = cur.fetchall()

        updates = [
            (json.dumps(generate_search_keywords(name or ""), ensure_ascii=False), pid)
            for pid, name in rows
        ]
        cur.executemany(
            f'UPDATE {table} SET "{COL_KEYWORDS}" = ? WHERE "{COL_ID}" = ?',
            updates,
        )
        conn.commit()
    finally:
        conn.close()

    log(f"Regenerated keywords for {len(updates)} products in {db_path}")
    return len(updates)


def preview(names: List[str]):
    for name in names:
        keywords = generate_search_keywords(name)
        print(f'\n=== Input: "{name}" ===')
        print("Generated Keywords:", json.dumps(keywords, ensure_ascii=False))
        print("Count:", len(keywords))


def main(argv: List[str]):
    # names on the command line => preview only, nothing is written
    if argv:
        preview(argv)
        return
    regenerate_keywords(DB_PATH)


if __name__ == "__main__":
    main(sys.argv[1:])
