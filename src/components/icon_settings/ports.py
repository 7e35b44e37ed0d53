"""
Icon settings component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import IconLibrarySettings, LibraryDefinition


class ConfigStorePort(Protocol):
    """Keyed configuration storage."""

    def read(self, key: str) -> IconLibrarySettings | None:
        """Get the record stored under key, or None if not configured."""
        ...

    def write(self, key: str, settings: IconLibrarySettings) -> IconLibrarySettings:
        """Save or replace the record stored under key."""
        ...


class LibraryDiscoveryPort(Protocol):
    """Library definitions lookup with a clearable cache."""

    def get_library_by_name(self, extension: str, name: str) -> LibraryDefinition | None:
        """Get a single library definition, or None if not declared."""
        ...

    def clear_cached_definitions(self) -> None:
        """Drop computed definitions so the next lookup rebuilds them."""
        ...
