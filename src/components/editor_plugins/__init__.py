"""
Editor plugins component - Rich text editor plugin descriptors.
"""

from .component import (
    PLUGINS,
    ColorDialogPlugin,
    LibrariesDirectoryLocator,
    describe_plugin,
    get_plugin,
)

__all__ = [
    "PLUGINS",
    "ColorDialogPlugin",
    "LibrariesDirectoryLocator",
    "describe_plugin",
    "get_plugin",
]
