"""
SQLite config store and migrator integration tests.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteConfigStore
from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.components.icon_settings import (
    DEFAULT_CSS_URL,
    SETTINGS_KEY,
    IconSettingsService,
    RawSubmission,
    get_default_settings,
)
from src.components.libraries import ICON_EXTENSION, WEBFONTS_LIBRARY
from src.domain.entities import IconLibrarySettings


class TestMigrator:
    def test_migrations_applied_once(self, db_path: str, project_root: Path) -> None:
        migrator = SQLiteMigrator(db_path, project_root / "migrations")

        assert "0001_config.sql" in migrator.applied_migrations()
        assert migrator.run_migrations() == []

    def test_failed_migration_raises(self, tmp_path: Path) -> None:
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "0001_bad.sql").write_text("CREATE TABL broken;")

        with pytest.raises(RuntimeError, match="0001_bad.sql"):
            SQLiteMigrator(str(tmp_path / "x.db"), migrations).run_migrations()

    def test_down_section_ignored(self, db_path: str) -> None:
        conn = sqlite3.connect(db_path)
        try:
            tables = {
                row[0]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            }
        finally:
            conn.close()

        assert "config" in tables


class TestSQLiteConfigStore:
    def test_read_missing_returns_none(self, db_path: str) -> None:
        assert SQLiteConfigStore(db_path).read(SETTINGS_KEY) is None

    def test_write_then_read(self, db_path: str) -> None:
        store = SQLiteConfigStore(db_path)
        settings = IconLibrarySettings(
            method="webfonts",
            use_cdn=True,
            external_svg_location=DEFAULT_CSS_URL,
            use_shim=True,
            external_shim_location="/libraries/fontawesome/js/v4-shims.js",
        )

        store.write(SETTINGS_KEY, settings)

        assert store.read(SETTINGS_KEY) == settings

    def test_write_replaces(self, db_path: str) -> None:
        store = SQLiteConfigStore(db_path)
        store.write(SETTINGS_KEY, get_default_settings())
        store.write(SETTINGS_KEY, IconLibrarySettings(use_cdn=False))

        assert store.read(SETTINGS_KEY) == IconLibrarySettings(use_cdn=False)

    def test_delete(self, db_path: str) -> None:
        store = SQLiteConfigStore(db_path)
        store.write(SETTINGS_KEY, get_default_settings())

        store.delete(SETTINGS_KEY)

        assert store.read(SETTINGS_KEY) is None


class TestSubmitFlow:
    """Submission persisted in SQLite is visible through library discovery."""

    def test_submit_updates_library_definitions(self, db_path: str, libraries_file: Path) -> None:
        store = SQLiteConfigStore(db_path)
        discovery = YamlLibraryDiscovery(
            libraries_file,
            settings_provider=lambda: store.read(SETTINGS_KEY) or get_default_settings(),
        )
        service = IconSettingsService(store, discovery)

        before = discovery.get_library_by_name(ICON_EXTENSION, WEBFONTS_LIBRARY)
        _, errors = service.submit(RawSubmission(method="webfonts", use_cdn=True))
        after = discovery.get_library_by_name(ICON_EXTENSION, WEBFONTS_LIBRARY)

        assert errors == []
        assert before is not None and after is not None
        assert before.css[0].path == "/libraries/fontawesome/css/all.css"
        assert after.css[0].path == DEFAULT_CSS_URL

    def test_rejected_submit_keeps_stored_settings(self, db_path: str) -> None:
        store = SQLiteConfigStore(db_path)
        original = IconLibrarySettings(use_cdn=False)
        store.write(SETTINGS_KEY, original)
        service = IconSettingsService(store)

        _, errors = service.submit(
            RawSubmission(method="svg", use_cdn=True, external_svg_location="not a url")
        )

        assert errors
        assert store.read(SETTINGS_KEY) == original
