"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationManager
from infrastructure.logging import get_module_logger
from infrastructure.services import get_localization_manager, get_settings
from server.culture_middleware import CultureMiddleware
from server.i18n_middleware import I18nMiddleware
from server.lifespan import lifespan
from server.routes import router

logger = get_module_logger()


def create_app(
    settings: Optional[Settings] = None,
    manager: Optional[LocalizationManager] = None,
) -> FastAPI:
    """Build the FastAPI application with response localization.

    Args:
        settings: Application settings (default: the process settings).
        manager: Localization manager (default: the process manager).

    Returns:
        FastAPI: Application whose textual responses have their nuggets
            replaced for the request culture.
    """
    settings = settings or get_settings()
    manager = manager or get_localization_manager()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.localization_manager = manager

    allow_origins = (
        ["*"]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        I18nMiddleware,
        manager=manager,
        default_culture=settings.i18n.default_culture,
        is_development=settings.is_development,
    )
    # Added last so it runs first and the culture is set before localization.
    app.add_middleware(CultureMiddleware)

    app.include_router(router)
    logger.info("server_created", default_culture=settings.i18n.default_culture)
    return app


handler = create_app()
