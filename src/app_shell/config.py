import logging
import os
import sys
from pathlib import Path

from src.rules.models import Rules

logger = logging.getLogger(__name__)


class AppConfig:
    """Filesystem locations, overridable through ICONLIB_* environment variables."""

    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("ICONLIB_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "iconlib.db")
        self.rules_path = Path(os.environ.get("ICONLIB_RULES_PATH", self.base_dir / "rules.yaml"))
        self.migrations_dir = Path(
            os.environ.get("ICONLIB_MIGRATIONS_DIR", self.base_dir / "migrations")
        )
        self.libraries_override = os.environ.get("ICONLIB_LIBRARIES_PATH")

    def libraries_path(self, rules: Rules) -> Path:
        if self.libraries_override:
            return Path(self.libraries_override)
        return self.base_dir / rules.icons.libraries_file


def missing_required_env(rules: Rules) -> list[str]:
    return [name for name in rules.ops.required_env if name not in os.environ]


def validate_ops_rules(rules: Rules, config: AppConfig) -> None:
    """
    Validate operational requirements before startup.
    Exits the process when a requirement is not met.
    """
    missing = missing_required_env(rules)
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    if rules.ops.data_dir_required and not config.data_dir.is_dir():
        logger.critical("Data directory %s does not exist", config.data_dir)
        sys.exit(1)

    config.data_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Configuration validated.")
