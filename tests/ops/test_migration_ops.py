"""Tests for lessonbase.ops.migrations."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lessonbase.core.settings import LessonbaseSettings
from lessonbase.ops.context import OperationContext
from lessonbase.ops.migrations import apply_migration, get_migration_files
from lessonbase.ops.requests import MigrationRequest


@pytest.fixture
def ctx(settings: LessonbaseSettings, engine) -> OperationContext:
    return OperationContext(settings=settings, engine=engine)


class TestApplyMigration:
    def test_named_file(self, ctx: OperationContext, migrations_dir: Path, query):
        (migrations_dir / "005-tags.sql").write_text("CREATE TABLE tags (id INTEGER, name TEXT);")

        result = apply_migration(ctx, MigrationRequest(filename="005-tags.sql"))

        assert result.success is True
        assert result.data.filename == "005-tags.sql"
        assert result.elapsed_ms > 0
        assert query("SELECT name FROM sqlite_master WHERE name = 'tags'") == [("tags",)]

    def test_defaults_to_configured_migration(self, ctx: OperationContext, migrations_dir: Path):
        (migrations_dir / "002-add-crypto-tables.sql").write_text("CREATE TABLE crypto (id INTEGER);")

        result = apply_migration(ctx)

        assert result.success is True
        assert result.data.filename == "002-add-crypto-tables.sql"

    def test_missing_file_fails_with_source_code(self, ctx: OperationContext, migrations_dir: Path):
        result = apply_migration(ctx, MigrationRequest(filename="nope.sql"))

        assert result.success is False
        assert result.data is None
        assert result.error.code == "SOURCE"
        assert result.error.details["migration"] == "nope.sql"

    def test_bad_sql_fails_with_database_code(self, ctx: OperationContext, migrations_dir: Path):
        (migrations_dir / "bad.sql").write_text("CREATE TABLE (;")

        result = apply_migration(ctx, MigrationRequest(filename="bad.sql"))

        assert result.success is False
        assert result.error.code == "DATABASE"
        assert "syntax error" in result.error.message

    def test_missing_file_never_touches_engine(self, settings: LessonbaseSettings, migrations_dir: Path):
        engine = MagicMock()
        ctx = OperationContext(settings=settings, engine=engine)

        result = apply_migration(ctx, MigrationRequest(filename="nope.sql"))

        assert result.success is False
        engine.raw_connection.assert_not_called()

    def test_context_without_engine_is_a_bug(self, settings: LessonbaseSettings):
        with pytest.raises(RuntimeError):
            apply_migration(OperationContext(settings=settings))


class TestGetMigrationFiles:
    def test_lists_files_with_sizes(self, settings: LessonbaseSettings, migrations_dir: Path):
        (migrations_dir / "001-update-schema.sql").write_text("-- one")
        (migrations_dir / "002-add-crypto-tables.sql").write_text("-- two!")
        ctx = OperationContext(settings=settings)

        result = get_migration_files(ctx)

        assert result.success is True
        assert [m.filename for m in result.data] == [
            "001-update-schema.sql",
            "002-add-crypto-tables.sql",
        ]
        assert [m.size_bytes for m in result.data] == [6, 7]
        assert [m.is_default for m in result.data] == [False, True]
        assert result.warnings == []

    def test_missing_directory_warns(self, settings: LessonbaseSettings):
        result = get_migration_files(OperationContext(settings=settings))

        assert result.success is True
        assert result.data == []
        assert len(result.warnings) == 1
        assert "Migrations directory not found" in result.warnings[0]
