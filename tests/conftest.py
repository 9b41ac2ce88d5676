"""Shared pytest fixtures and test helpers for covid_api tests."""
from pathlib import Path
from typing import List

import pytest
from flask import Flask
from sqlalchemy.engine import Engine

from covid_api import create_app
from covid_api.config.settings import TestingConfig
from covid_api.domain.entities.country import Country
from covid_api.domain.entities.province import Province
from covid_api.domain.exceptions import StorageError
from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.domain.interfaces.province_repository import IProvinceRepository
from covid_api.infrastructure.database import create_db_engine, init_database
from covid_api.infrastructure.repositories.memory_repository import InMemoryStore
from covid_api.infrastructure.service_container import ServiceContainer


@pytest.fixture
def db_engine(tmp_path: Path) -> Engine:
    """File-backed SQLite engine with all tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'covid19.db'}")
    init_database(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def app() -> Flask:
    """Application wired to in-memory storage."""
    application = create_app(TestingConfig)
    try:
        yield application
    finally:
        ServiceContainer.reset()


@pytest.fixture
def sql_app(tmp_path: Path) -> Flask:
    """Application wired to a file-backed SQLite database."""
    config = type(
        "SqlTestingConfig",
        (TestingConfig,),
        {
            "STORAGE_TYPE": "sql",
            "DATABASE_URL": f"sqlite:///{tmp_path / 'api.db'}",
            "DB_CREATE_TABLES": True,
        },
    )
    application = create_app(config)
    try:
        yield application
    finally:
        ServiceContainer.reset()


@pytest.fixture
def client(app: Flask):
    return app.test_client()


@pytest.fixture
def sql_client(sql_app: Flask):
    return sql_app.test_client()


class RecordingCountryRepository(ICountryRepository):
    """Country repository stub that records calls and stores nothing."""

    def __init__(self, fail_on: str = ""):
        self.calls: List[str] = []
        self.fail_on = fail_on
        self.saved: List[Country] = []
        self.updated: List[Country] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name == self.fail_on:
            raise StorageError(f"country: {name} failed")

    def save(self, country: Country) -> Country:
        self._record("save")
        self.saved.append(country)
        return country

    def update(self, country: Country) -> None:
        self._record("update")
        self.updated.append(country)

    def delete(self, country: Country) -> None:
        self._record("delete")

    def get_by_id(self, country_id: str) -> Country:
        self._record("get_by_id")
        return Country(id=country_id, name="Stub")


class RecordingProvinceRepository(IProvinceRepository):
    """Province repository stub; can fail on the n-th update."""

    def __init__(self, fail_on_update: int = 0):
        self.calls: List[str] = []
        self.updated: List[Province] = []
        self.fail_on_update = fail_on_update

    def update(self, province: Province) -> None:
        self.calls.append("update")
        if self.fail_on_update and len(self.calls) == self.fail_on_update:
            raise StorageError("province: update failed")
        self.updated.append(province)

    def get_by_id(self, province_id: str) -> Province:
        self.calls.append("get_by_id")
        return Province(id=province_id, name="Stub")

    def get_all(self) -> List[Province]:
        self.calls.append("get_all")
        return []


@pytest.fixture
def recording_countries() -> RecordingCountryRepository:
    return RecordingCountryRepository()


@pytest.fixture
def recording_provinces() -> RecordingProvinceRepository:
    return RecordingProvinceRepository()
