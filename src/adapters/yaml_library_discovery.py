"""
YAML library discovery adapter.

Reads library declarations from a YAML file keyed by extension, alters the
icon libraries with the current settings and caches the result per
extension until clear_cached_definitions() is called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from src.components.libraries import (
    ICON_EXTENSION,
    alter_icon_libraries,
    parse_library_declarations,
)
from src.domain.entities import IconLibrarySettings, LibraryDefinition

logger = logging.getLogger(__name__)


class YamlLibraryDiscovery:
    """Library discovery backed by a declarations file."""

    def __init__(
        self,
        path: str | Path,
        settings_provider: Callable[[], IconLibrarySettings] | None = None,
    ) -> None:
        """
        Initialize discovery.

        Args:
            path: YAML file mapping extension -> library name -> declaration
            settings_provider: Optional callable returning current icon settings;
                icon libraries are left as declared when omitted
        """
        self.path = Path(path)
        self._settings_provider = settings_provider
        self._cache: dict[str, dict[str, LibraryDefinition]] = {}

    def _load_declarations(self) -> dict[str, Any]:
        if not self.path.exists():
            raise FileNotFoundError(f"Library declarations not found at: {self.path}")

        with open(self.path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML syntax in library declarations: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Library declarations must be a mapping of extensions")
        return data

    def get_libraries_by_extension(self, extension: str) -> dict[str, LibraryDefinition]:
        if extension in self._cache:
            return self._cache[extension]

        declarations = self._load_declarations()
        definitions = parse_library_declarations(extension, declarations.get(extension))

        if extension == ICON_EXTENSION and self._settings_provider is not None:
            definitions = alter_icon_libraries(definitions, self._settings_provider())

        logger.debug("Built %d library definitions for %s", len(definitions), extension)
        self._cache[extension] = definitions
        return definitions

    def get_library_by_name(self, extension: str, name: str) -> LibraryDefinition | None:
        return self.get_libraries_by_extension(extension).get(name)

    def clear_cached_definitions(self) -> None:
        logger.debug("Clearing cached library definitions")
        self._cache.clear()
