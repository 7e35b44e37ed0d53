from datetime import datetime
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
IconMethod = Literal["svg", "webfonts"]
ICON_METHODS: tuple[str, ...] = ("svg", "webfonts")

# --- Icon Library ---

class IconLibrarySettings(BaseModel):
    method: IconMethod = "svg"
    use_cdn: bool = True
    external_svg_location: str = ""
    use_shim: bool = False
    external_shim_location: str = ""

class LibraryAsset(BaseModel):
    path: str
    external: bool = False
    minified: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)

class LibraryDefinition(BaseModel):
    extension: str
    name: str
    version: str = ""
    remote: str = ""
    license: dict[str, str] = Field(default_factory=dict)
    js: list[LibraryAsset] = Field(default_factory=list)
    css: list[LibraryAsset] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)

# --- Media ---

class MediaItem(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    bundle: str
    name: str = "Unnamed"
    owner_id: int
    thumbnail_file_id: int
    created_at: datetime = Field(default_factory=datetime.utcnow)
