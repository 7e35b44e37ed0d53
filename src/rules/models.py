from pydantic import BaseModel, Field

from src.components.icon_settings import (
    DEFAULT_CSS_URL,
    DEFAULT_JS_URL,
    DEFAULT_SHIM_URL,
    KNOWN_LEGACY_DEFAULTS,
    IconDefaults,
)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class IconRules(BaseModel):
    default_js_url: str = DEFAULT_JS_URL
    default_css_url: str = DEFAULT_CSS_URL
    default_shim_url: str = DEFAULT_SHIM_URL
    legacy_defaults: list[str] = Field(default_factory=lambda: sorted(KNOWN_LEGACY_DEFAULTS))
    libraries_file: str = "libraries.yaml"

    def to_defaults(self) -> IconDefaults:
        return IconDefaults(
            js_url=self.default_js_url,
            css_url=self.default_css_url,
            shim_url=self.default_shim_url,
            legacy_locations=frozenset(self.legacy_defaults),
        )

class OpsRules(BaseModel):
    data_dir_required: bool = False
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    icons: IconRules = Field(default_factory=IconRules)
    ops: OpsRules = Field(default_factory=OpsRules)
