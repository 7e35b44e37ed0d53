from functools import lru_cache

from fastapi import Depends

from src.adapters.sqlite.repos import SQLiteConfigStore
from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.app_shell.config import AppConfig
from src.components.icon_settings import SETTINGS_KEY, IconSettingsService, get_default_settings
from src.domain.entities import IconLibrarySettings
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Config ---
@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_config().rules_path)


# --- Stores ---
def get_config_store(config: AppConfig = Depends(get_config)) -> SQLiteConfigStore:
    return SQLiteConfigStore(config.db_path)


# --- Library Discovery ---
# One instance per process so cached definitions survive between requests.
@lru_cache
def get_library_discovery() -> YamlLibraryDiscovery:
    config = get_config()
    rules = get_rules()
    store = SQLiteConfigStore(config.db_path)
    defaults = rules.icons.to_defaults()

    def current_settings() -> IconLibrarySettings:
        return store.read(SETTINGS_KEY) or get_default_settings(defaults)

    return YamlLibraryDiscovery(config.libraries_path(rules), settings_provider=current_settings)


# --- Services ---
def get_icon_settings_service(
    store: SQLiteConfigStore = Depends(get_config_store),
    libraries: YamlLibraryDiscovery = Depends(get_library_discovery),
    rules: Rules = Depends(get_rules),
) -> IconSettingsService:
    return IconSettingsService(
        store=store,
        library_discovery=libraries,
        defaults=rules.icons.to_defaults(),
    )
