import configparser
import os
from pathlib import Path


# ==========================================================
# CONFIG
# ==========================================================
# config.ini next to the sources, environment variables win over the file.

BASE_DIR = Path(__file__).resolve().parent
CONFIG_FILE = Path(os.getenv("CATALOG_CONFIG", BASE_DIR / "config.ini"))

_config = configparser.ConfigParser()
_config.read(CONFIG_FILE, encoding="utf-8")


def _setting(env_name: str, key: str, fallback: str) -> str:
    value = os.getenv(env_name)
    if value is None:
        value = _config.get("catalog", key, fallback=fallback)
    return value.strip()


DB_PATH = Path(_setting("CATALOG_DB_PATH", "db_path", "catalog.db"))
CSV_PATH = Path(_setting("CATALOG_CSV_PATH", "csv_path", "products.csv"))
TABLE_NAME = _setting("CATALOG_TABLE", "table", "products")
LOG_LEVEL = _setting("LOG_LEVEL", "log_level", "INFO").upper()

# product record columns
COL_ID = "id"
COL_NAME = "name"
COL_DESCRIPTION = "description"
COL_CATEGORY = "category"
COL_PRICE = "price"
COL_FEATURED = "featured"
COL_KEYWORDS = "searchKeywords"

TABLE_COLUMNS = [COL_ID, COL_NAME, COL_DESCRIPTION, COL_CATEGORY, COL_PRICE, COL_FEATURED, COL_KEYWORDS]
