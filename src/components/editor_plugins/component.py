"""
Editor plugins component - Static descriptors for rich text editor plugins.

Plugins carry no behaviour of their own: an id, a label, the script file
the editor loads, and (empty) button and config sets.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

DEFAULT_LIBRARIES_PATH = "/libraries"

# name -> public path of the installed library, or None if not installed
LibraryLocator = Callable[[str], str | None]


class LibrariesDirectoryLocator:
    """Locate libraries installed under a directory served at `public_prefix`."""

    def __init__(self, base_dir: str | Path, public_prefix: str = DEFAULT_LIBRARIES_PATH) -> None:
        self.base_dir = Path(base_dir)
        self.public_prefix = public_prefix.rstrip("/")

    def __call__(self, name: str) -> str | None:
        if (self.base_dir / name).is_dir():
            return f"{self.public_prefix}/{name}"
        return None


class ColorDialogPlugin:
    """The "colordialog" editor plugin."""

    id = "colordialog"
    label = "CKEditor Color Dialog"

    def __init__(self, locator: LibraryLocator | None = None) -> None:
        self._locator = locator

    def get_file(self) -> str:
        path = f"{DEFAULT_LIBRARIES_PATH}/colordialog/plugin.js"
        if self._locator is not None:
            located = self._locator(self.id)
            if located:
                path = f"{located}/plugin.js"
        return path

    def get_buttons(self) -> dict[str, Any]:
        return {}

    def get_config(self, editor: Any = None) -> dict[str, Any]:
        return {}


PLUGINS: dict[str, type[ColorDialogPlugin]] = {
    ColorDialogPlugin.id: ColorDialogPlugin,
}


def get_plugin(plugin_id: str, locator: LibraryLocator | None = None) -> ColorDialogPlugin:
    """
    Instantiate a registered plugin.

    Raises:
        KeyError: If no plugin is registered under plugin_id.
    """
    try:
        plugin_cls = PLUGINS[plugin_id]
    except KeyError:
        raise KeyError(f"Unknown editor plugin: {plugin_id}") from None
    return plugin_cls(locator)


def describe_plugin(plugin: ColorDialogPlugin) -> dict[str, Any]:
    return {
        "id": plugin.id,
        "label": plugin.label,
        "file": plugin.get_file(),
        "buttons": plugin.get_buttons(),
        "config": plugin.get_config(),
    }
