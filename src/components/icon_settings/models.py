"""
Icon settings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import IconLibrarySettings


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class RawSubmission:
    """
    Values submitted from the settings form.

    `method` is kept as a plain string so an unknown value can be
    reported back instead of failing at construction.
    """

    method: str
    use_cdn: bool
    external_svg_location: str = ""
    use_shim: bool = False
    external_shim_location: str = ""

    @classmethod
    def from_settings(cls, settings: IconLibrarySettings) -> RawSubmission:
        return cls(
            method=settings.method,
            use_cdn=settings.use_cdn,
            external_svg_location=settings.external_svg_location,
            use_shim=settings.use_shim,
            external_shim_location=settings.external_shim_location,
        )


@dataclass(frozen=True)
class IconDefaults:
    """Default library locations and the stale defaults treated as empty."""

    js_url: str
    css_url: str
    shim_url: str
    legacy_locations: frozenset[str] = frozenset()

    def bundle_for(self, method: str) -> str:
        if method == "webfonts":
            return self.css_url
        return self.js_url


@dataclass(frozen=True)
class GetSettingsInput:
    """Input for reading settings."""

    pass


@dataclass(frozen=True)
class GetSettingsOutput:
    """Output from reading settings."""

    settings: IconLibrarySettings


@dataclass(frozen=True)
class SubmitSettingsInput:
    """Input for submitting the settings form."""

    submission: RawSubmission


@dataclass(frozen=True)
class SubmitSettingsOutput:
    """Output from a settings submission."""

    settings: IconLibrarySettings
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ResetSettingsInput:
    """Input for resetting settings to defaults."""

    pass


@dataclass(frozen=True)
class ResetSettingsOutput:
    """Output from resetting settings."""

    settings: IconLibrarySettings
