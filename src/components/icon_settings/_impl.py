"""
IconSettingsService - Icon library configuration management.

Resolves submitted form values into the persisted settings record and
keeps the library definitions cache in step with it.

Key behaviors:
- Location fields are validated before any defaulting
- With the CDN enabled, blank or stale default locations are replaced by
  the bundle matching the delivery method
- Nothing is written when validation fails
- Library definitions cache is cleared after every successful write
"""

from __future__ import annotations

import logging
import re

from src.domain.entities import ICON_METHODS, IconLibrarySettings

from .models import IconDefaults, RawSubmission, ValidationError
from .ports import ConfigStorePort, LibraryDiscoveryPort

logger = logging.getLogger(__name__)

SETTINGS_KEY = "fontawesome.settings"

DEFAULT_JS_URL = "https://use.fontawesome.com/releases/v5.0.2/js/all.js"
DEFAULT_CSS_URL = "https://use.fontawesome.com/releases/v5.0.2/css/all.css"
DEFAULT_SHIM_URL = "https://use.fontawesome.com/releases/v5.0.2/js/v4-shims.js"

# Pinned defaults saved by earlier releases of the form.
KNOWN_LEGACY_DEFAULTS = frozenset({DEFAULT_CSS_URL, DEFAULT_JS_URL})

DEFAULT_ICON_DEFAULTS = IconDefaults(
    js_url=DEFAULT_JS_URL,
    css_url=DEFAULT_CSS_URL,
    shim_url=DEFAULT_SHIM_URL,
    legacy_locations=KNOWN_LEGACY_DEFAULTS,
)

LOCATION_FIELDS = ("external_svg_location", "external_shim_location")

# --- Location Validation ---

_PATH_CHARS = r"(?:[\w#!:.?+=&@$'~*,;/()\[\]\-]|%[0-9a-f]{2})"

_ABSOLUTE_URL_RE = re.compile(
    r"^(?:ftp|https?|feed)://"
    r"(?:"
    r"(?:(?:[\w.\-+!$&'()*,;=]|%[0-9a-f]{2})+:)*"
    r"(?:[\w.\-+%!$&'()*,;=]|%[0-9a-f]{2})+@"
    r")?"
    r"(?:(?:[a-z0-9\-.]|%[0-9a-f]{2})+|\[(?:[0-9a-f]{0,4}:)*[0-9a-f]{0,4}\])"
    r"(?::[0-9]+)?"
    r"(?:[/?]" + _PATH_CHARS + r"*)?$",
    re.IGNORECASE,
)

_RELATIVE_PATH_RE = re.compile(r"^" + _PATH_CHARS + r"+$", re.IGNORECASE)


def validate_location(value: str) -> bool:
    """
    Check that a location is an absolute URL or a relative path.

    Empty is valid (the field is optional). Anything containing a scheme
    separator must be a well-formed ftp/http/https/feed URL with a host.
    """
    if not value:
        return True
    if "://" in value:
        return _ABSOLUTE_URL_RE.fullmatch(value) is not None
    return _RELATIVE_PATH_RE.fullmatch(value) is not None


def validate_submission(submission: RawSubmission) -> list[ValidationError]:
    """Validate the submitted values, returning one error per bad field."""
    errors: list[ValidationError] = []

    if submission.method not in ICON_METHODS:
        errors.append(
            ValidationError(
                field="method",
                code="invalid_value",
                message=f"Field 'method' must be one of: {', '.join(ICON_METHODS)}",
            )
        )

    for field_name in LOCATION_FIELDS:
        value = getattr(submission, field_name)
        if not validate_location(value):
            errors.append(
                ValidationError(
                    field=field_name,
                    code="invalid_url",
                    message="Invalid external library location.",
                )
            )

    return errors


# --- Resolution ---


def apply_defaults(
    submission: RawSubmission,
    defaults: IconDefaults = DEFAULT_ICON_DEFAULTS,
) -> IconLibrarySettings:
    """
    Fill in default locations for an already validated submission.

    Only applies when the CDN is in use; local installs pass both
    locations through untouched.
    """
    svg_location = submission.external_svg_location
    shim_location = submission.external_shim_location

    if submission.use_cdn:
        if not svg_location or svg_location in defaults.legacy_locations:
            svg_location = defaults.bundle_for(submission.method)
        if submission.use_shim and not shim_location:
            shim_location = defaults.shim_url

    return IconLibrarySettings(
        method=submission.method,  # type: ignore[arg-type]
        use_cdn=submission.use_cdn,
        external_svg_location=svg_location,
        use_shim=submission.use_shim,
        external_shim_location=shim_location,
    )


def resolve(
    submission: RawSubmission,
    defaults: IconDefaults = DEFAULT_ICON_DEFAULTS,
) -> tuple[IconLibrarySettings | None, list[ValidationError]]:
    """
    Resolve a submission into the settings record to persist.

    Returns:
        Tuple of (settings, errors). Settings is None when errors is non-empty.
    """
    errors = validate_submission(submission)
    if errors:
        return None, errors
    return apply_defaults(submission, defaults), []


# --- Default Settings ---


def get_default_settings(defaults: IconDefaults = DEFAULT_ICON_DEFAULTS) -> IconLibrarySettings:
    """Settings used when nothing has been stored yet."""
    return IconLibrarySettings(
        method="svg",
        use_cdn=True,
        external_svg_location=defaults.js_url,
        use_shim=False,
        external_shim_location=defaults.shim_url,
    )


# --- Library Discovery Hook ---


class NoOpLibraryDiscovery:
    """Library discovery that knows no libraries and caches nothing."""

    def get_library_by_name(self, extension: str, name: str) -> None:
        return None

    def clear_cached_definitions(self) -> None:
        pass


# --- Settings Service ---


class IconSettingsService:
    """
    Icon library settings service.

    Provides:
    - Get settings with fallback defaults
    - Submit form values with validation and default substitution
    - Reset to defaults
    """

    def __init__(
        self,
        store: ConfigStorePort,
        library_discovery: LibraryDiscoveryPort | None = None,
        defaults: IconDefaults | None = None,
    ) -> None:
        """
        Initialize settings service.

        Args:
            store: Configuration store
            library_discovery: Optional discovery whose cache is cleared on writes
            defaults: Optional default locations (rules file overrides)
        """
        self._store = store
        self._library_discovery = library_discovery or NoOpLibraryDiscovery()
        self._defaults = defaults or DEFAULT_ICON_DEFAULTS

    @property
    def defaults(self) -> IconDefaults:
        return self._defaults

    def get(self) -> IconLibrarySettings:
        """Get current settings, falling back to defaults if none stored."""
        settings = self._store.read(SETTINGS_KEY)
        if settings is None:
            return get_default_settings(self._defaults)
        return settings

    def submit(
        self,
        submission: RawSubmission,
    ) -> tuple[IconLibrarySettings, list[ValidationError]]:
        """
        Submit settings form values.

        Returns:
            Tuple of (settings, validation_errors)
            If validation_errors is non-empty, the returned settings are the
            unchanged current ones and nothing was saved.
        """
        resolved, errors = resolve(submission, self._defaults)
        if resolved is None:
            logger.info(
                "Rejected icon settings submission: %s",
                ", ".join(e.field for e in errors),
            )
            return self.get(), errors

        saved = self._store.write(SETTINGS_KEY, resolved)
        self._library_discovery.clear_cached_definitions()

        logger.info(
            "Saved icon settings: method=%s use_cdn=%s use_shim=%s",
            saved.method,
            saved.use_cdn,
            saved.use_shim,
        )
        return saved, []

    def reset_to_defaults(self) -> IconLibrarySettings:
        """Reset settings to defaults and return them."""
        saved = self._store.write(SETTINGS_KEY, get_default_settings(self._defaults))
        self._library_discovery.clear_cached_definitions()
        logger.info("Reset icon settings to defaults")
        return saved


# --- Factory ---


def create_icon_settings_service(
    store: ConfigStorePort,
    library_discovery: LibraryDiscoveryPort | None = None,
    defaults: IconDefaults | None = None,
) -> IconSettingsService:
    """
    Create an icon settings service.

    Args:
        store: Configuration store
        library_discovery: Optional library discovery
        defaults: Optional default locations

    Returns:
        Configured IconSettingsService
    """
    return IconSettingsService(store, library_discovery, defaults)
