"""Tests that the Alembic migrations build the same schema as the models."""

from sqlalchemy import create_engine, inspect

from access_time.db.session import Base
from access_time.scripts.migrate import run_downgrade_base, run_upgrade_head


def test_upgrade_creates_every_model_table(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    run_upgrade_head(url)

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert set(Base.metadata.tables) <= tables
    finally:
        engine.dispose()


def test_downgrade_drops_tables(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    run_upgrade_head(url)
    run_downgrade_base(url)

    engine = create_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
