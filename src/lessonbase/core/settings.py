"""Settings for the lessonbase operator tools.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    The platform server already reads ``DATABASE_URL`` from the process
    environment or a ``.env`` file; the operator tools read the same
    variables so a script run from the project root targets the same
    database as the server.

Features:
    - **LessonbaseSettings:** database URL, migrations directory, default
      migration filenames, API base URL, logging options
    - **.env file support:** Automatic loading via pydantic-settings
    - **Extra ignore:** Unknown env vars (SESSION_SECRET, ...) are ignored
    - **get_settings():** Cached instance, ``_force_reload`` for tests

Tags:
    settings, configuration, pydantic, environment, lessonbase

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lessonbase.core.errors import MissingConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LessonbaseSettings(BaseSettings):
    """Settings shared by every lessonbase command.

    Fields
    ──────
    database_url       : SQLAlchemy / libpq URL of the platform database
    migrations_dir     : Directory holding migration files (relative to cwd)
    default_migration  : File applied by ``run-migration`` with no argument
    legacy_migration   : File applied by ``lessonbase migrate apply``
    pool_size          : Connection pool size (ignored for SQLite)
    echo_sql           : Log every SQL statement SQLAlchemy emits
    api_base_url       : Base URL of the running platform HTTP API
    admin_info_path    : Where ``admin create`` writes the admin user JSON
    log_level          : Structlog log level
    log_json           : Force JSON (True) / console (False) logs; auto if unset
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ─────────────────────────────────────────────────
    database_url: str | None = None
    pool_size: int = 5
    echo_sql: bool = False

    # ── Migrations ───────────────────────────────────────────────
    migrations_dir: Path = Field(
        default=Path("migrations"),
        description="Migration directory, resolved against the working directory",
    )
    default_migration: str = "002-add-crypto-tables.sql"
    legacy_migration: str = "001-update-schema.sql"

    # ── Platform API ─────────────────────────────────────────────
    api_base_url: str = "http://localhost:5000"
    admin_info_path: Path = Path("admin-info.json")

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None

    @field_validator("database_url")
    @classmethod
    def _blank_url_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def require_database_url(self) -> str:
        """Return ``database_url`` or raise :class:`MissingConfigError`."""
        if not self.database_url:
            raise MissingConfigError("DATABASE_URL")
        return self.database_url

    def resolved_migrations_dir(self, cwd: Path | None = None) -> Path:
        """Return the migrations directory as an absolute path."""
        base = cwd or Path.cwd()
        if self.migrations_dir.is_absolute():
            return self.migrations_dir
        return base / self.migrations_dir


_settings_cache: dict[str, LessonbaseSettings] = {}


def get_settings(*, _force_reload: bool = False) -> LessonbaseSettings:
    """Load, validate, and cache a :class:`LessonbaseSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = LessonbaseSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (tests, long-lived shells)."""
    _settings_cache.clear()
