"""Tests for lessonbase.core.settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lessonbase.core.errors import MissingConfigError
from lessonbase.core.settings import LessonbaseSettings, get_settings


class TestDefaults:
    def test_defaults(self):
        s = LessonbaseSettings()
        assert s.database_url is None
        assert s.migrations_dir == Path("migrations")
        assert s.default_migration == "002-add-crypto-tables.sql"
        assert s.legacy_migration == "001-update-schema.sql"
        assert s.api_base_url == "http://localhost:5000"
        assert s.admin_info_path == Path("admin-info.json")
        assert s.log_level == "INFO"
        assert s.log_json is None


class TestEnvironment:
    def test_reads_env_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://app@db/lessons")
        monkeypatch.setenv("DEFAULT_MIGRATION", "003-more.sql")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = LessonbaseSettings()
        assert s.database_url == "postgresql://app@db/lessons"
        assert s.default_migration == "003-more.sql"
        assert s.log_level == "DEBUG"

    def test_reads_dotenv_in_cwd(self, tmp_path: Path):
        (tmp_path / ".env").write_text(
            "DATABASE_URL=sqlite:///from-dotenv.db\nSESSION_SECRET=ignored\n",
            encoding="utf-8",
        )
        s = LessonbaseSettings()
        assert s.database_url == "sqlite:///from-dotenv.db"

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            LessonbaseSettings()

    def test_blank_database_url_is_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATABASE_URL", "   ")
        assert LessonbaseSettings().database_url is None


class TestHelpers:
    def test_require_database_url_missing(self):
        with pytest.raises(MissingConfigError) as exc_info:
            LessonbaseSettings().require_database_url()
        assert exc_info.value.key == "DATABASE_URL"

    def test_require_database_url_present(self):
        s = LessonbaseSettings(database_url="sqlite:///x.db")
        assert s.require_database_url() == "sqlite:///x.db"

    def test_relative_migrations_dir_resolves_against_cwd(self, tmp_path: Path):
        s = LessonbaseSettings()
        assert s.resolved_migrations_dir() == tmp_path / "migrations"

    def test_explicit_cwd(self, tmp_path: Path):
        s = LessonbaseSettings(migrations_dir=Path("db/sql"))
        assert s.resolved_migrations_dir(tmp_path / "proj") == tmp_path / "proj" / "db" / "sql"

    def test_absolute_migrations_dir_kept(self, tmp_path: Path):
        s = LessonbaseSettings(migrations_dir=tmp_path / "elsewhere")
        assert s.resolved_migrations_dir() == tmp_path / "elsewhere"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch: pytest.MonkeyPatch):
        first = get_settings()
        monkeypatch.setenv("DATABASE_URL", "sqlite:///reloaded.db")
        second = get_settings(_force_reload=True)
        assert second is not first
        assert second.database_url == "sqlite:///reloaded.db"
