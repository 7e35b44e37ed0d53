"""Public endpoint listing the icon library assets pages should attach."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.api.deps import get_icon_settings_service, get_library_discovery
from src.components.icon_settings import IconSettingsService
from src.components.libraries import ICON_EXTENSION, active_library_names

router = APIRouter()


class LibraryAssetResponse(BaseModel):
    path: str
    external: bool
    attributes: dict[str, object]


class ActiveLibraryResponse(BaseModel):
    name: str
    version: str
    js: list[LibraryAssetResponse]
    css: list[LibraryAssetResponse]


@router.get("/libraries", response_model=list[ActiveLibraryResponse])
def get_active_libraries(
    service: IconSettingsService = Depends(get_icon_settings_service),
    libraries: YamlLibraryDiscovery = Depends(get_library_discovery),
) -> list[ActiveLibraryResponse]:
    """
    Get the icon libraries for the current settings.

    Webfonts delivery never includes the version 4 shim. Libraries missing
    from the declarations file are skipped.
    """
    result = []
    for name in active_library_names(service.get()):
        library = libraries.get_library_by_name(ICON_EXTENSION, name)
        if library is None:
            continue
        result.append(
            ActiveLibraryResponse(
                name=library.name,
                version=library.version,
                js=[
                    LibraryAssetResponse(path=a.path, external=a.external, attributes=a.attributes)
                    for a in library.js
                ],
                css=[
                    LibraryAssetResponse(path=a.path, external=a.external, attributes=a.attributes)
                    for a in library.css
                ],
            )
        )
    return result
