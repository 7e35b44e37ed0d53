"""
Icon settings form - field descriptors and cross-field state rules.

Field visibility is declared as a static table of (field, depends_on,
condition) rows. A field is visible only when every row for it holds;
input fields are disabled whenever they are hidden.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from src.domain.entities import IconLibrarySettings, LibraryDefinition

LOCAL_INSTALL_PATH = "/libraries"
GETTING_STARTED_URL = "https://fontawesome.com/get-started"
UPGRADING_URL = "https://fontawesome.com/how-to-use/upgrading-from-4"
WEBFONTS_GUIDE_URL = "https://fontawesome.com/get-started/web-fonts-with-css"

METHOD_OPTIONS: dict[str, str] = {
    "svg": "SVG with JS",
    "webfonts": "Web Fonts with CSS",
}

FieldType = Literal["select", "checkbox", "textfield", "details"]


@dataclass(frozen=True)
class Condition:
    """Predicate over a sibling field value."""

    kind: Literal["checked", "value"]
    expected: Any = True

    def holds(self, value: Any) -> bool:
        if self.kind == "checked":
            return bool(value) is bool(self.expected)
        return value == self.expected


@dataclass(frozen=True)
class FieldState:
    """One visibility rule: `field` depends on `depends_on` meeting `condition`."""

    field: str
    depends_on: str
    condition: Condition


FIELD_STATES: tuple[FieldState, ...] = (
    FieldState("external_svg_location", "use_cdn", Condition("checked", True)),
    # Webfonts with CSS does not support shims.
    FieldState("shim", "method", Condition("value", "svg")),
    FieldState("external_shim_location", "use_cdn", Condition("checked", True)),
    FieldState("external_shim_location", "use_shim", Condition("checked", True)),
    FieldState("no_shim", "method", Condition("value", "webfonts")),
)

INPUT_FIELDS = frozenset(
    {"method", "use_cdn", "external_svg_location", "use_shim", "external_shim_location"}
)


def evaluate_states(
    values: dict[str, Any],
    rules: tuple[FieldState, ...] = FIELD_STATES,
) -> dict[str, dict[str, bool]]:
    """
    Evaluate the state table against current form values.

    Returns a mapping of field name to {"visible": ..., "disabled": ...}
    for every field named in the table.
    """
    visible: dict[str, bool] = {}
    for rule in rules:
        holds = rule.condition.holds(values.get(rule.depends_on))
        visible[rule.field] = visible.get(rule.field, True) and holds

    return {
        name: {"visible": shown, "disabled": name in INPUT_FIELDS and not shown}
        for name, shown in visible.items()
    }


@dataclass
class FormField:
    """Presentation descriptor for one form element."""

    name: str
    type: FieldType
    title: str
    default_value: Any = None
    description: str = ""
    options: dict[str, str] = field(default_factory=dict)
    parent: str | None = None


def build_form(
    settings: IconLibrarySettings,
    library: LibraryDefinition | None = None,
) -> list[FormField]:
    """Build the settings form fields, pre-filled from the current settings."""
    remote_url = library.remote if library is not None else ""

    return [
        FormField(
            name="method",
            type="select",
            title="Font Awesome Method",
            default_value=settings.method,
            options=dict(METHOD_OPTIONS),
            description=(
                "SVG with JS is the modern version with the most backwards "
                "compatibility. Web Fonts with CSS is the classic icon method and "
                "does not allow backwards compatibility with Font Awesome 4. "
                f"See {GETTING_STARTED_URL} for more information."
            ),
        ),
        FormField(
            name="external",
            type="details",
            title="External file configuration",
            description=(
                "Use an external (full URL) or local (relative path) library by "
                "entering a location below, or leave the box unchecked and install "
                f"the library from {remote_url or GETTING_STARTED_URL} locally at "
                f"{LOCAL_INSTALL_PATH}."
            ),
        ),
        FormField(
            name="use_cdn",
            type="checkbox",
            title="Use external file (CDN) / local file?",
            default_value=settings.use_cdn,
            parent="external",
        ),
        FormField(
            name="external_svg_location",
            type="textfield",
            title="External File Location",
            default_value=settings.external_svg_location,
            parent="external",
            description=(
                "Point at the JS svg file for SVG with JS, or the CSS file for Web "
                "Fonts with CSS. Leave blank to use the default CDN."
            ),
        ),
        FormField(
            name="shim",
            type="details",
            title="Version 4 Backwards Compatibility",
            description=f"See {UPGRADING_URL} for more information.",
        ),
        FormField(
            name="use_shim",
            type="checkbox",
            title="Use version 4 shim file?",
            default_value=settings.use_shim,
            parent="shim",
        ),
        FormField(
            name="external_shim_location",
            type="textfield",
            title="External / local Library Location",
            default_value=settings.external_shim_location,
            parent="shim",
            description="Leave blank to use the default CDN shim file.",
        ),
        FormField(
            name="no_shim",
            type="details",
            title="Version 4 Backwards Compatibility",
            description=(
                "Web Fonts with CSS does not support backwards compatibility with "
                f"Font Awesome 4. See {UPGRADING_URL} and {WEBFONTS_GUIDE_URL}."
            ),
        ),
    ]
