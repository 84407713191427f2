"""Run the Alembic revisions against a scratch SQLite file and inspect the result."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from tech_news.db.session import Base

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"
APP_TABLES = {"user", "post", "vote", "comment"}


@pytest.fixture()
def alembic_config(tmp_path, monkeypatch) -> Config:
    monkeypatch.delenv("ALEMBIC_URL", raising=False)
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", f"sqlite:///{tmp_path / 'migrated.db'}")
    return config


@pytest.fixture()
def migrated(alembic_config):
    command.upgrade(alembic_config, "head")
    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        yield inspect(engine)
    finally:
        engine.dispose()


def test_upgrade_creates_every_mapped_table(migrated) -> None:
    assert APP_TABLES <= set(migrated.get_table_names())

    for name in APP_TABLES:
        migrated_columns = {col["name"] for col in migrated.get_columns(name)}
        assert migrated_columns == set(Base.metadata.tables[name].c.keys()), name


def test_foreign_keys_cascade_on_delete(migrated) -> None:
    expected = {
        "post": {("user_id", "user")},
        "vote": {("user_id", "user"), ("post_id", "post")},
        "comment": {("user_id", "user"), ("post_id", "post")},
    }

    for table, refs in expected.items():
        fks = migrated.get_foreign_keys(table)
        assert {(fk["constrained_columns"][0], fk["referred_table"]) for fk in fks} == refs
        assert all(fk["options"].get("ondelete") == "CASCADE" for fk in fks), table


def test_post_id_indexes_and_unique_email(migrated) -> None:
    assert "ix_vote_post_id" in {ix["name"] for ix in migrated.get_indexes("vote")}
    assert "ix_comment_post_id" in {ix["name"] for ix in migrated.get_indexes("comment")}

    unique_columns = [uc["column_names"] for uc in migrated.get_unique_constraints("user")]
    assert ["email"] in unique_columns


def test_downgrade_removes_tables(alembic_config, migrated) -> None:
    command.downgrade(alembic_config, "base")

    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        assert not APP_TABLES & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
