"""Load the ScholarHub demo roster.

``database/seed.sql`` inserts three students, two parent contacts, a few grades
and attendance marks with fixed ids and ``INSERT IGNORE``, so a second run
leaves existing rows alone. Run ``scripts/init_db.py`` first.
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

from src.scholarhub.scholarhub.database.bootstrap import apply_seed_sql
from src.scholarhub.scholarhub.database.connection import DBConfig

logger = logging.getLogger("scholarhub.seed_db")

SEED_FILE = REPO_ROOT / "database" / "seed.sql"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)

    apply_seed_sql(db_config, seed_path=SEED_FILE)
    logger.info("Demo roster loaded into %s", DBConfig.from_mapping(db_config).describe())


if __name__ == "__main__":
    main()
