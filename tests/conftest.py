from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """
    Temporary SQLite database with the project migrations applied.
    """
    path = str(tmp_path / "iconlib.db")
    SQLiteMigrator(path, PROJECT_ROOT / "migrations").run_migrations()
    return path


@pytest.fixture
def libraries_file(tmp_path: Path) -> Path:
    """Minimal library declarations for the icon extension."""
    path = tmp_path / "libraries.yaml"
    path.write_text(
        """
fontawesome:
  fontawesome.svg:
    remote: https://fontawesome.com
    version: 5.0.2
    js:
      /libraries/fontawesome/js/all.js:
        minified: true
  fontawesome.svg.shim:
    js:
      /libraries/fontawesome/js/v4-shims.js: {}
    dependencies:
      - fontawesome/fontawesome.svg
  fontawesome.webfonts:
    css:
      /libraries/fontawesome/css/all.css: {}
"""
    )
    return path
