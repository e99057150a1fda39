"""
Shared pytest fixtures for lessonbase tests.

Every test runs in its own temporary working directory with the lessonbase
environment variables cleared, so ``./migrations`` and ``.env`` always
refer to files the test created itself.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from sqlalchemy.engine import Engine

from lessonbase.core.connection import create_lessonbase_engine
from lessonbase.core.settings import LessonbaseSettings, clear_settings_cache

_ENV_KEYS = (
    "DATABASE_URL",
    "MIGRATIONS_DIR",
    "DEFAULT_MIGRATION",
    "LEGACY_MIGRATION",
    "API_BASE_URL",
    "ADMIN_INFO_PATH",
    "LOG_LEVEL",
    "LOG_JSON",
    "POOL_SIZE",
    "ECHO_SQL",
)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run each test from an empty working directory with a clean environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield tmp_path
    clear_settings_cache()
    structlog.reset_defaults()


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of a file-backed SQLite database standing in for PostgreSQL."""
    return tmp_path / "lessons.db"


@pytest.fixture
def db_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


@pytest.fixture
def engine(db_url: str) -> Generator[Engine, None, None]:
    eng = create_lessonbase_engine(db_url)
    yield eng
    eng.dispose()


@pytest.fixture
def settings(db_url: str) -> LessonbaseSettings:
    return LessonbaseSettings(database_url=db_url)


@pytest.fixture
def migrations_dir(tmp_path: Path) -> Path:
    """``./migrations`` under the test's working directory."""
    d = tmp_path / "migrations"
    d.mkdir()
    return d


@pytest.fixture
def query(db_path: Path):
    """Run a query against the test database through a separate connection."""

    def _query(sql: str) -> list[tuple]:
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute(sql).fetchall()
        finally:
            conn.close()

    return _query
