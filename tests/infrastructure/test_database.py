"""Tests for engine setup and schema initialization."""
from pathlib import Path

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from covid_api.infrastructure.database import (
    DatabaseEngineFactory,
    aggregate_isolation_level,
    create_db_engine,
    init_database,
    ping,
)


class TestCreateDbEngine:
    def test_foreign_keys_enabled_on_sqlite(self, tmp_path: Path) -> None:
        engine = create_db_engine(f"sqlite:///{tmp_path / 'fk.db'}")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()

    def test_sqlite_uses_serializable_for_aggregates(self, db_engine: Engine) -> None:
        assert aggregate_isolation_level(db_engine) == "SERIALIZABLE"

    def test_ping(self, db_engine: Engine) -> None:
        assert ping(db_engine) is True


class TestInitDatabase:
    def test_creates_tables(self, db_engine: Engine) -> None:
        names = set(inspect(db_engine).get_table_names())
        assert {"country", "provinces"} <= names

    def test_province_columns(self, db_engine: Engine) -> None:
        columns = {c["name"] for c in inspect(db_engine).get_columns("provinces")}
        assert columns == {
            "id", "name", "total", "new_case", "treated", "decovering_case",
            "test_case", "dead", "negative_case", "country_id", "updated_at",
        }

    def test_idempotent(self, db_engine: Engine) -> None:
        init_database(db_engine)
        assert "country" in inspect(db_engine).get_table_names()


class TestMaskUrl:
    def test_masks_password(self) -> None:
        masked = DatabaseEngineFactory._mask_url("postgresql://covid:secret@db:5432/covid19")
        assert masked == "postgresql://covid:***@db:5432/covid19"

    def test_leaves_url_without_credentials(self) -> None:
        assert DatabaseEngineFactory._mask_url("sqlite:///covid19.db") == "sqlite:///covid19.db"
