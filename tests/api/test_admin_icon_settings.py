"""
Tests for the Admin Icon Settings API and public library routes.

- GET returns settings (fallback defaults if nothing stored)
- PUT validates locations, returns 400 with field errors
- Form endpoint reports evaluated visibility
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.memory_store import InMemoryConfigStore
from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.api.deps import get_config, get_icon_settings_service, get_library_discovery
from src.api.routes import admin_icon_settings, public_editor_plugins, public_libraries
from src.app_shell.config import AppConfig
from src.components.icon_settings import (
    DEFAULT_CSS_URL,
    DEFAULT_JS_URL,
    DEFAULT_SHIM_URL,
    SETTINGS_KEY,
    IconSettingsService,
    get_default_settings,
)

# --- Test Setup ---


@pytest.fixture
def store() -> InMemoryConfigStore:
    return InMemoryConfigStore()


@pytest.fixture
def discovery(libraries_file: Path, store: InMemoryConfigStore) -> YamlLibraryDiscovery:
    return YamlLibraryDiscovery(
        libraries_file,
        settings_provider=lambda: store.read(SETTINGS_KEY) or get_default_settings(),
    )


@pytest.fixture
def app(store: InMemoryConfigStore, discovery: YamlLibraryDiscovery, tmp_path: Path) -> FastAPI:
    """Test FastAPI app with in-memory dependencies."""
    app = FastAPI()
    app.include_router(admin_icon_settings.router, prefix="/api/admin/icon-settings")
    app.include_router(public_libraries.router, prefix="/api/public")
    app.include_router(public_editor_plugins.router, prefix="/api/public")

    config = AppConfig()
    config.base_dir = tmp_path

    app.dependency_overrides[get_icon_settings_service] = lambda: IconSettingsService(
        store, discovery
    )
    app.dependency_overrides[get_library_discovery] = lambda: discovery
    app.dependency_overrides[get_config] = lambda: config
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# --- Settings Endpoints ---


class TestGetSettings:
    def test_returns_defaults_when_empty(self, client: TestClient) -> None:
        response = client.get("/api/admin/icon-settings")

        assert response.status_code == 200
        assert response.json() == {
            "method": "svg",
            "use_cdn": True,
            "external_svg_location": DEFAULT_JS_URL,
            "use_shim": False,
            "external_shim_location": DEFAULT_SHIM_URL,
        }


class TestUpdateSettings:
    def test_applies_defaults(self, client: TestClient, store: InMemoryConfigStore) -> None:
        response = client.put(
            "/api/admin/icon-settings",
            json={
                "method": "webfonts",
                "use_cdn": True,
                "external_svg_location": "",
                "use_shim": True,
                "external_shim_location": "",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["external_svg_location"] == DEFAULT_CSS_URL
        assert data["external_shim_location"] == DEFAULT_SHIM_URL
        assert store.read(SETTINGS_KEY) is not None

    def test_invalid_location_returns_400(
        self, client: TestClient, store: InMemoryConfigStore
    ) -> None:
        response = client.put(
            "/api/admin/icon-settings",
            json={"method": "svg", "use_cdn": True, "external_svg_location": "not a url"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert body["errors"] == [
            {
                "field": "external_svg_location",
                "code": "invalid_url",
                "message": "Invalid external library location.",
            }
        ]
        assert store.write_count == 0

    def test_unknown_method_returns_400(self, client: TestClient) -> None:
        response = client.put("/api/admin/icon-settings", json={"method": "png"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "method"

    def test_missing_method_is_unprocessable(self, client: TestClient) -> None:
        response = client.put("/api/admin/icon-settings", json={"use_cdn": True})

        assert response.status_code == 422


class TestResetSettings:
    def test_reset(self, client: TestClient) -> None:
        client.put("/api/admin/icon-settings", json={"method": "webfonts", "use_cdn": False})

        response = client.post("/api/admin/icon-settings/reset")

        assert response.status_code == 200
        assert response.json()["method"] == "svg"
        assert client.get("/api/admin/icon-settings").json()["use_cdn"] is True


class TestSettingsForm:
    def test_form_states_follow_settings(self, client: TestClient) -> None:
        client.put("/api/admin/icon-settings", json={"method": "webfonts", "use_cdn": False})

        response = client.get("/api/admin/icon-settings/form")

        assert response.status_code == 200
        fields = {f["name"]: f for f in response.json()["fields"]}
        assert fields["method"]["default_value"] == "webfonts"
        assert fields["external_svg_location"]["visible"] is False
        assert fields["external_svg_location"]["disabled"] is True
        assert fields["shim"]["visible"] is False
        assert fields["no_shim"]["visible"] is True
        assert "https://fontawesome.com" in fields["external"]["description"]


# --- Public Endpoints ---


class TestActiveLibraries:
    def test_svg_defaults(self, client: TestClient) -> None:
        response = client.get("/api/public/libraries")

        assert response.status_code == 200
        libraries = response.json()
        assert [lib["name"] for lib in libraries] == ["fontawesome.svg"]
        assert libraries[0]["js"][0]["path"] == DEFAULT_JS_URL
        assert libraries[0]["js"][0]["external"] is True

    def test_webfonts_after_submit(self, client: TestClient) -> None:
        client.put(
            "/api/admin/icon-settings",
            json={"method": "webfonts", "use_cdn": True, "use_shim": True},
        )

        libraries = client.get("/api/public/libraries").json()

        assert [lib["name"] for lib in libraries] == ["fontawesome.webfonts"]
        assert libraries[0]["css"][0]["path"] == DEFAULT_CSS_URL

    def test_svg_with_shim(self, client: TestClient) -> None:
        client.put(
            "/api/admin/icon-settings",
            json={"method": "svg", "use_cdn": True, "use_shim": True},
        )

        libraries = client.get("/api/public/libraries").json()

        assert [lib["name"] for lib in libraries] == ["fontawesome.svg", "fontawesome.svg.shim"]
        assert libraries[1]["js"][0]["path"] == DEFAULT_SHIM_URL


class TestEditorPlugins:
    def test_colordialog(self, client: TestClient) -> None:
        response = client.get("/api/public/editor-plugins/colordialog")

        assert response.status_code == 200
        assert response.json()["file"] == "/libraries/colordialog/plugin.js"

    def test_unknown_plugin(self, client: TestClient) -> None:
        response = client.get("/api/public/editor-plugins/nope")

        assert response.status_code == 404
