"""Public endpoint describing registered editor plugins."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_config
from src.app_shell.config import AppConfig
from src.components.editor_plugins import LibrariesDirectoryLocator, describe_plugin, get_plugin

router = APIRouter()


@router.get("/editor-plugins/{plugin_id}")
def get_editor_plugin(
    plugin_id: str,
    config: AppConfig = Depends(get_config),
) -> dict[str, Any]:
    """Plugin id, label and the script file the editor should load."""
    locator = LibrariesDirectoryLocator(config.base_dir / "libraries")
    try:
        plugin = get_plugin(plugin_id, locator)
    except KeyError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Editor plugin '{plugin_id}' not found",
        ) from err
    return describe_plugin(plugin)
