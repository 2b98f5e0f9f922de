"""System and demonstration routes."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n.factory import create_repository
from infrastructure.services import LocalizationManagerDep, SettingsDep

router = APIRouter(tags=["System"])

WELCOME_PAGE = """<!DOCTYPE html>
<html>
<head><title>[[[Welcome]]]</title></head>
<body>
<h1>[[[Welcome]]]</h1>
<p>[[[Your language is %0|||{culture}]]]</p>
</body>
</html>
"""


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}


@router.get("/", response_class=HTMLResponse)
def get_welcome(request: Request, settings: SettingsDep):
    """Localized welcome page; nuggets are replaced on the way out."""
    culture = getattr(request.state, "culture", None) or settings.i18n.default_culture
    return WELCOME_PAGE.format(culture=culture)


@router.get("/languages")
def get_languages(settings: SettingsDep):
    """Languages with a translation file or listed in the configuration."""
    repository = create_repository(settings)
    return {
        "languages": [
            language.language_short_tag
            for language in repository.get_available_languages()
        ]
    }


@router.post("/cache/clear")
def clear_cache(manager: LocalizationManagerDep, settings: SettingsDep):
    """Drop every cached culture dictionary. Development only."""
    if not settings.is_development:
        return {"cleared": False}
    manager.clear()
    return {"cleared": True}
