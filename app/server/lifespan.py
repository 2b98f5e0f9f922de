"""Application startup and shutdown."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.services import get_localization_manager, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def _list_configs(settings: "Settings") -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and drop cached dictionaries on shutdown.

    Uses the settings and manager stored on ``app.state`` by ``create_app``,
    falling back to the process-wide providers.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    manager = getattr(app.state, "localization_manager", None) or get_localization_manager()
    configure_logging(log_level=settings.LOG_LEVEL, is_production=settings.is_production)
    _list_configs(settings)

    logger.info(
        "application_startup",
        environment=settings.ENVIRONMENT,
        locale_directory=settings.i18n.locale_root,
        default_culture=settings.i18n.default_culture,
    )
    yield

    manager.clear()
    logger.info("application_shutdown")
