"""
Libraries component - Asset library declarations for the icon library.

Pure functions only: declarations are parsed from already loaded data and
altered according to the current icon settings. Caching and file access
live in the discovery adapter.
"""

from __future__ import annotations

from typing import Any

from src.domain.entities import IconLibrarySettings, LibraryAsset, LibraryDefinition

ICON_EXTENSION = "fontawesome"
SVG_LIBRARY = "fontawesome.svg"
SHIM_LIBRARY = "fontawesome.svg.shim"
WEBFONTS_LIBRARY = "fontawesome.webfonts"


def _parse_assets(raw: Any, library: str, kind: str) -> list[LibraryAsset]:
    if raw is None:
        return []
    if not isinstance(raw, dict):
        raise ValueError(f"Library '{library}': '{kind}' must map paths to options")

    assets = []
    for path, options in raw.items():
        options = options or {}
        if not isinstance(options, dict):
            raise ValueError(f"Library '{library}': options for '{path}' must be a mapping")
        assets.append(
            LibraryAsset(
                path=str(path),
                external=bool(options.get("type") == "external" or "://" in str(path)),
                minified=bool(options.get("minified", False)),
                attributes=dict(options.get("attributes") or {}),
            )
        )
    return assets


def parse_library_declarations(
    extension: str,
    data: dict[str, Any] | None,
) -> dict[str, LibraryDefinition]:
    """
    Build library definitions for one extension from declaration data.

    Raises:
        ValueError: If a declaration is not a mapping or has malformed assets.
    """
    definitions: dict[str, LibraryDefinition] = {}
    for name, raw in (data or {}).items():
        if not isinstance(raw, dict):
            raise ValueError(f"Library '{name}' declaration must be a mapping")
        definitions[name] = LibraryDefinition(
            extension=extension,
            name=name,
            version=str(raw.get("version", "")),
            remote=str(raw.get("remote", "")),
            license=dict(raw.get("license") or {}),
            js=_parse_assets(raw.get("js"), name, "js"),
            css=_parse_assets(raw.get("css"), name, "css"),
            dependencies=list(raw.get("dependencies") or []),
        )
    return definitions


def _external(path: str) -> list[LibraryAsset]:
    return [LibraryAsset(path=path, external="://" in path, minified=True)]


def alter_icon_libraries(
    definitions: dict[str, LibraryDefinition],
    settings: IconLibrarySettings,
) -> dict[str, LibraryDefinition]:
    """
    Point the icon libraries at the configured locations.

    Returns a new mapping; the input definitions are not modified.
    """
    altered = dict(definitions)
    if not settings.use_cdn:
        return altered

    location = settings.external_svg_location
    if location:
        if settings.method == "webfonts" and WEBFONTS_LIBRARY in altered:
            altered[WEBFONTS_LIBRARY] = altered[WEBFONTS_LIBRARY].model_copy(
                update={"css": _external(location)}
            )
        elif settings.method == "svg" and SVG_LIBRARY in altered:
            altered[SVG_LIBRARY] = altered[SVG_LIBRARY].model_copy(
                update={"js": _external(location)}
            )

    shim_location = settings.external_shim_location
    if settings.method == "svg" and settings.use_shim and shim_location:
        if SHIM_LIBRARY in altered:
            altered[SHIM_LIBRARY] = altered[SHIM_LIBRARY].model_copy(
                update={"js": _external(shim_location)}
            )

    return altered


def active_library_names(settings: IconLibrarySettings) -> list[str]:
    """Libraries to attach to pages for the current settings."""
    if settings.method == "webfonts":
        return [WEBFONTS_LIBRARY]
    names = [SVG_LIBRARY]
    if settings.use_shim:
        names.append(SHIM_LIBRARY)
    return names
