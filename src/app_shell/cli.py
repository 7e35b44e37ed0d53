import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.memory_store import InMemoryConfigStore
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteConfigStore
from src.adapters.yaml_library_discovery import YamlLibraryDiscovery
from src.app_shell.config import AppConfig
from src.components.icon_settings import (
    SETTINGS_KEY,
    ConfigStorePort,
    IconSettingsService,
    RawSubmission,
    get_default_settings,
)
from src.components.libraries import ICON_EXTENSION, active_library_names
from src.domain.entities import IconLibrarySettings
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_rules(config: AppConfig) -> Rules:
    if not Path(config.rules_path).exists():
        logger.error(f"Rules file {config.rules_path} not found.")
        sys.exit(1)
    return load_rules(Path(config.rules_path))


def build_service(
    config: AppConfig, rules: Rules, dry_run: bool = False
) -> tuple[IconSettingsService, YamlLibraryDiscovery]:
    store: ConfigStorePort = SQLiteConfigStore(config.db_path)
    defaults = rules.icons.to_defaults()
    if dry_run:
        current = store.read(SETTINGS_KEY)
        store = InMemoryConfigStore({SETTINGS_KEY: current} if current else None)

    def current_settings() -> IconLibrarySettings:
        return store.read(SETTINGS_KEY) or get_default_settings(defaults)

    libraries = YamlLibraryDiscovery(
        config.libraries_path(rules), settings_provider=current_settings
    )
    return IconSettingsService(store, libraries, defaults), libraries


def handle_show(service: IconSettingsService) -> None:
    print(json.dumps(service.get().model_dump(), indent=2))


def handle_set(service: IconSettingsService, args: argparse.Namespace) -> None:
    current = service.get()
    submission = RawSubmission(
        method=args.method if args.method is not None else current.method,
        use_cdn=args.use_cdn if args.use_cdn is not None else current.use_cdn,
        external_svg_location=(
            args.svg_location if args.svg_location is not None else current.external_svg_location
        ),
        use_shim=args.use_shim if args.use_shim is not None else current.use_shim,
        external_shim_location=(
            args.shim_location
            if args.shim_location is not None
            else current.external_shim_location
        ),
    )

    settings, errors = service.submit(submission)
    if errors:
        for error in errors:
            logger.error(f"{error.field}: {error.message}")
        sys.exit(2)

    if args.dry_run:
        print("Dry run, nothing saved.")
    print(json.dumps(settings.model_dump(), indent=2))


def handle_reset(service: IconSettingsService) -> None:
    settings = service.reset_to_defaults()
    print(json.dumps(settings.model_dump(), indent=2))


def handle_libraries(service: IconSettingsService, libraries: YamlLibraryDiscovery) -> None:
    for name in active_library_names(service.get()):
        library = libraries.get_library_by_name(ICON_EXTENSION, name)
        if library is None:
            logger.warning(f"Library {name} is not declared.")
            continue
        for asset in library.js + library.css:
            print(f"{name}: {asset.path}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Icon library settings CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply database migrations")
    subparsers.add_parser("show", help="Print current settings")
    subparsers.add_parser("reset", help="Reset settings to defaults")
    subparsers.add_parser("libraries", help="List library assets for current settings")

    # set
    set_parser = subparsers.add_parser("set", help="Submit new settings")
    set_parser.add_argument("--method", choices=["svg", "webfonts"])
    set_parser.add_argument("--use-cdn", action=argparse.BooleanOptionalAction, default=None)
    set_parser.add_argument("--svg-location", help="External / local library location")
    set_parser.add_argument("--use-shim", action=argparse.BooleanOptionalAction, default=None)
    set_parser.add_argument("--shim-location", help="External / local shim location")
    set_parser.add_argument("--dry-run", action="store_true", help="Resolve without saving")

    args = parser.parse_args(argv)

    config = AppConfig()
    rules = get_rules(config)
    config.data_dir.mkdir(parents=True, exist_ok=True)

    applied = SQLiteMigrator(config.db_path, config.migrations_dir).run_migrations()
    if args.command == "migrate":
        print(f"Applied {len(applied)} migrations.")
        return

    service, libraries = build_service(config, rules, dry_run=getattr(args, "dry_run", False))

    if args.command == "show":
        handle_show(service)
    elif args.command == "set":
        handle_set(service, args)
    elif args.command == "reset":
        handle_reset(service)
    elif args.command == "libraries":
        handle_libraries(service, libraries)


if __name__ == "__main__":
    main()
