"""
Icon settings component - Icon library configuration management.
"""

from ._impl import (
    DEFAULT_CSS_URL,
    DEFAULT_ICON_DEFAULTS,
    DEFAULT_JS_URL,
    DEFAULT_SHIM_URL,
    KNOWN_LEGACY_DEFAULTS,
    SETTINGS_KEY,
    IconSettingsService,
    NoOpLibraryDiscovery,
    apply_defaults,
    create_icon_settings_service,
    get_default_settings,
    resolve,
    validate_location,
    validate_submission,
)
from .component import run, run_get, run_reset, run_submit
from .form import FIELD_STATES, Condition, FieldState, FormField, build_form, evaluate_states
from .models import (
    GetSettingsInput,
    GetSettingsOutput,
    IconDefaults,
    RawSubmission,
    ResetSettingsInput,
    ResetSettingsOutput,
    SubmitSettingsInput,
    SubmitSettingsOutput,
    ValidationError,
)
from .ports import ConfigStorePort, LibraryDiscoveryPort

__all__ = [
    # Component entry points
    "run",
    "run_get",
    "run_submit",
    "run_reset",
    # Models
    "GetSettingsInput",
    "GetSettingsOutput",
    "SubmitSettingsInput",
    "SubmitSettingsOutput",
    "ResetSettingsInput",
    "ResetSettingsOutput",
    "RawSubmission",
    "IconDefaults",
    "ValidationError",
    # Ports
    "ConfigStorePort",
    "LibraryDiscoveryPort",
    # Service
    "IconSettingsService",
    "NoOpLibraryDiscovery",
    "create_icon_settings_service",
    # Functions
    "apply_defaults",
    "get_default_settings",
    "resolve",
    "validate_location",
    "validate_submission",
    # Form
    "FIELD_STATES",
    "Condition",
    "FieldState",
    "FormField",
    "build_form",
    "evaluate_states",
    # Constants
    "DEFAULT_CSS_URL",
    "DEFAULT_ICON_DEFAULTS",
    "DEFAULT_JS_URL",
    "DEFAULT_SHIM_URL",
    "KNOWN_LEGACY_DEFAULTS",
    "SETTINGS_KEY",
]
