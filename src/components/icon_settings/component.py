"""
Icon settings component - Icon library configuration.

Entry points wrap IconSettingsService so callers can pass plain input
objects and receive output objects.
"""

from __future__ import annotations

from ._impl import IconSettingsService
from .models import (
    GetSettingsInput,
    GetSettingsOutput,
    IconDefaults,
    ResetSettingsInput,
    ResetSettingsOutput,
    SubmitSettingsInput,
    SubmitSettingsOutput,
)
from .ports import ConfigStorePort, LibraryDiscoveryPort


def run_get(
    inp: GetSettingsInput,
    *,
    store: ConfigStorePort,
    defaults: IconDefaults | None = None,
) -> GetSettingsOutput:
    """
    Get current settings.

    Always returns settings - uses defaults if nothing is stored.
    """
    service = IconSettingsService(store, defaults=defaults)
    return GetSettingsOutput(settings=service.get())


def run_submit(
    inp: SubmitSettingsInput,
    *,
    store: ConfigStorePort,
    libraries: LibraryDiscoveryPort | None = None,
    defaults: IconDefaults | None = None,
) -> SubmitSettingsOutput:
    """
    Submit settings form values.

    Args:
        inp: Input containing the raw submission.
        store: Configuration store port.
        libraries: Optional library discovery port, cleared on success.
        defaults: Optional default locations.

    Returns:
        SubmitSettingsOutput with saved settings or validation errors.
    """
    service = IconSettingsService(store, libraries, defaults)
    settings, errors = service.submit(inp.submission)
    return SubmitSettingsOutput(settings=settings, errors=errors, success=not errors)


def run_reset(
    inp: ResetSettingsInput,
    *,
    store: ConfigStorePort,
    libraries: LibraryDiscoveryPort | None = None,
    defaults: IconDefaults | None = None,
) -> ResetSettingsOutput:
    """Reset settings to defaults."""
    service = IconSettingsService(store, libraries, defaults)
    return ResetSettingsOutput(settings=service.reset_to_defaults())


def run(
    inp: GetSettingsInput | SubmitSettingsInput | ResetSettingsInput,
    *,
    store: ConfigStorePort,
    libraries: LibraryDiscoveryPort | None = None,
    defaults: IconDefaults | None = None,
) -> GetSettingsOutput | SubmitSettingsOutput | ResetSettingsOutput:
    """
    Main entry point for the icon settings component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GetSettingsInput):
        return run_get(inp, store=store, defaults=defaults)
    elif isinstance(inp, SubmitSettingsInput):
        return run_submit(inp, store=store, libraries=libraries, defaults=defaults)
    elif isinstance(inp, ResetSettingsInput):
        return run_reset(inp, store=store, libraries=libraries, defaults=defaults)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
