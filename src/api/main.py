import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_config, get_rules
from src.app_shell.config import validate_ops_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    config = get_config()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    validate_ops_rules(rules, config)
    SQLiteMigrator(config.db_path, config.migrations_dir).run_migrations()
    logger.info("Rules loaded from %s", config.rules_path)

    yield


app = FastAPI(
    title="Icon Library Settings API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    admin_icon_settings,
    public_editor_plugins,
    public_libraries,
)

app.include_router(
    admin_icon_settings.router, prefix="/api/admin/icon-settings", tags=["Admin Icon Settings"]
)
app.include_router(public_libraries.router, prefix="/api/public", tags=["Public"])
app.include_router(public_editor_plugins.router, prefix="/api/public", tags=["Public"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
