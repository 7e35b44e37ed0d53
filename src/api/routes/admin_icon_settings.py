"""
Admin Icon Settings API.

Provides GET/PUT endpoints for the icon library settings form, a reset
endpoint and the form description used by the admin UI.

- GET returns settings (fallback defaults if nothing stored)
- PUT validates locations, applies CDN defaults, returns 400 with
  field errors on failure
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.api.deps import get_icon_settings_service, get_library_discovery
from src.components.icon_settings import (
    IconSettingsService,
    RawSubmission,
    ValidationError,
    build_form,
    evaluate_states,
)
from src.components.libraries import ICON_EXTENSION, SVG_LIBRARY
from src.domain.entities import IconLibrarySettings

router = APIRouter()


# --- Request/Response Models ---


class IconSettingsResponse(BaseModel):
    """Icon settings response model."""

    method: str
    use_cdn: bool
    external_svg_location: str
    use_shim: bool
    external_shim_location: str


class IconSettingsUpdateRequest(BaseModel):
    """Settings form submission."""

    method: str
    use_cdn: bool = False
    external_svg_location: str = ""
    use_shim: bool = False
    external_shim_location: str = ""


class ValidationErrorResponse(BaseModel):
    """Validation error response."""

    field: str
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response with validation errors."""

    detail: str
    errors: list[ValidationErrorResponse]


class FormFieldResponse(BaseModel):
    name: str
    type: str
    title: str
    default_value: Any = None
    description: str = ""
    options: dict[str, str] = {}
    parent: str | None = None
    visible: bool = True
    disabled: bool = False


class FormResponse(BaseModel):
    fields: list[FormFieldResponse]


# --- Helper Functions ---


def settings_to_response(settings: IconLibrarySettings) -> IconSettingsResponse:
    """Convert IconLibrarySettings entity to response model."""
    return IconSettingsResponse(**settings.model_dump())


def validation_errors_to_response(errors: list[ValidationError]) -> list[ValidationErrorResponse]:
    """Convert validation errors to response models."""
    return [
        ValidationErrorResponse(
            field=e.field,
            code=e.code,
            message=e.message,
        )
        for e in errors
    ]


# --- Endpoints ---


@router.get(
    "",
    response_model=IconSettingsResponse,
    summary="Get icon library settings",
)
def get_icon_settings(
    service: IconSettingsService = Depends(get_icon_settings_service),
) -> IconSettingsResponse:
    """Return current settings, or defaults if none are stored."""
    return settings_to_response(service.get())


@router.put(
    "",
    response_model=IconSettingsResponse,
    summary="Submit icon library settings",
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Validation errors with actionable messages",
        },
    },
)
def update_icon_settings(
    request: IconSettingsUpdateRequest,
    service: IconSettingsService = Depends(get_icon_settings_service),
) -> Any:
    """
    Submit the settings form.

    Locations are validated before defaults are applied. Nothing is saved
    when validation fails.
    """
    submission = RawSubmission(**request.model_dump())
    settings, errors = service.submit(submission)

    if errors:
        body = ErrorResponse(
            detail="Validation failed",
            errors=validation_errors_to_response(errors),
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    return settings_to_response(settings)


@router.post(
    "/reset",
    response_model=IconSettingsResponse,
    summary="Reset icon library settings to defaults",
)
def reset_icon_settings(
    service: IconSettingsService = Depends(get_icon_settings_service),
) -> IconSettingsResponse:
    return settings_to_response(service.reset_to_defaults())


@router.get(
    "/form",
    response_model=FormResponse,
    summary="Describe the icon settings form",
)
def get_icon_settings_form(
    service: IconSettingsService = Depends(get_icon_settings_service),
    libraries: YamlLibraryDiscovery = Depends(get_library_discovery),
) -> FormResponse:
    """Form fields pre-filled from current settings, with evaluated visibility."""
    settings = service.get()
    library = libraries.get_library_by_name(ICON_EXTENSION, SVG_LIBRARY)
    states = evaluate_states(settings.model_dump())

    fields = []
    for form_field in build_form(settings, library):
        state = states.get(form_field.name, {"visible": True, "disabled": False})
        fields.append(
            FormFieldResponse(
                name=form_field.name,
                type=form_field.type,
                title=form_field.title,
                default_value=form_field.default_value,
                description=form_field.description,
                options=form_field.options,
                parent=form_field.parent,
                visible=state["visible"],
                disabled=state["disabled"],
            )
        )
    return FormResponse(fields=fields)
