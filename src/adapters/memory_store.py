"""
In-memory configuration store.

Used by the CLI dry-run mode and tests; records live for the lifetime of
the instance only.
"""

from __future__ import annotations

from src.domain.entities import IconLibrarySettings


class InMemoryConfigStore:
    """Dict-backed implementation of ConfigStorePort."""

    def __init__(self, initial: dict[str, IconLibrarySettings] | None = None) -> None:
        self._records: dict[str, IconLibrarySettings] = dict(initial or {})
        self.write_count = 0

    def read(self, key: str) -> IconLibrarySettings | None:
        return self._records.get(key)

    def write(self, key: str, settings: IconLibrarySettings) -> IconLibrarySettings:
        self._records[key] = settings
        self.write_count += 1
        return settings
