"""Create the ScholarHub database and its five tables.

Applies ``database/schema.sql`` (students, parents, grades, attendance_records,
communications) against the database named in the active settings module.
Re-running is harmless: every table uses ``CREATE TABLE IF NOT EXISTS``.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.scholarhub.scholarhub.database.bootstrap import apply_schema, list_tables
from src.scholarhub.scholarhub.database.connection import DBConfig

logger = logging.getLogger("scholarhub.init_db")

SCHEMA_FILE = REPO_ROOT / "database" / "schema.sql"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)
    target = DBConfig.from_mapping(db_config).describe()

    apply_schema(db_config, schema_path=SCHEMA_FILE)
    tables = sorted(list_tables(db_config))
    logger.info("Schema applied to %s; tables: %s", target, ", ".join(tables) or "(none)")


if __name__ == "__main__":
    main()
