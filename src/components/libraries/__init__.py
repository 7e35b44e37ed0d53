"""
Libraries component - Icon library declarations and settings alteration.
"""

from .component import (
    ICON_EXTENSION,
    SHIM_LIBRARY,
    SVG_LIBRARY,
    WEBFONTS_LIBRARY,
    active_library_names,
    alter_icon_libraries,
    parse_library_declarations,
)

__all__ = [
    "ICON_EXTENSION",
    "SHIM_LIBRARY",
    "SVG_LIBRARY",
    "WEBFONTS_LIBRARY",
    "active_library_names",
    "alter_icon_libraries",
    "parse_library_declarations",
]
