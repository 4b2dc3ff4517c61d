# src/access_time/scripts/migrate.py
"""Apply Alembic migrations to the configured Access Time database."""
from __future__ import annotations

import logging
import os

from alembic import command
from alembic.config import Config

from access_time.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def alembic_config(database_url: str | None = None) -> Config:
    """Return an Alembic config pointed at the bundled migrations."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url_sync)
    return cfg


def run_upgrade_head(database_url: str | None = None) -> None:
    cfg = alembic_config(database_url)
    logger.info("Upgrading %s to head", cfg.get_main_option("sqlalchemy.url"))
    command.upgrade(cfg, "head")


def run_downgrade_base(database_url: str | None = None) -> None:
    command.downgrade(alembic_config(database_url), "base")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    run_upgrade_head()
