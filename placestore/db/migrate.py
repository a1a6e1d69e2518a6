"""
Apply alembic migrations to a database.

Run ``python -m placestore.db.migrate`` to upgrade the database named by
DATABASE_URL to the latest revision.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config

from placestore.core.config import settings
from placestore.db import database

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"
ALEMBIC_DIR = PROJECT_ROOT / "alembic"


def get_alembic_config(database_url: Optional[str] = None) -> Config:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    url = database_url or settings.DATABASE_URL
    # configparser treats % as interpolation
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return config


def run_migrations(database_url: Optional[str] = None, revision: str = "head") -> None:
    """
    Upgrade a database to the given alembic revision.

    Args:
        database_url: Database to migrate, defaults to settings.DATABASE_URL
        revision: Target revision
    """
    logger.info(
        "Running %s v%s migrations up to %s", settings.PROJECT_NAME, settings.VERSION, revision
    )
    command.upgrade(get_alembic_config(database_url), revision)


def main() -> int:
    """
    Migrate the configured database, then check it is usable.

    Returns:
        Process exit code, 0 when the database is healthy after migrating
    """
    run_migrations()

    sessions = database.get_db()
    db = next(sessions)
    try:
        health = database.health_check(db)
    finally:
        sessions.close()

    if not health.healthy:
        logger.error("Database not ready after migrations: %s", health.message)
        return 1
    logger.info("Database ready: %s", health.message)
    return 0


if __name__ == "__main__":
    from placestore.utils import logger as _  # noqa: F401 - Import to configure logging

    sys.exit(main())
