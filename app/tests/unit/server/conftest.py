"""Fixtures for server module unit tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import create_localization_manager
from infrastructure.services import get_settings
from server.server import create_app
from tests.factories.i18n import make_settings, write_po_file


@pytest.fixture
def settings(tmp_path):
    """Production settings with a French translation file.

    Structure:
    - locale/fr/messages.po
    - locale/de/ (no translation file)
    """
    settings = make_settings(tmp_path)
    write_po_file(
        settings.i18n.locale_root,
        "fr",
        {
            "Welcome": "Bienvenue",
            "Hello World": "Bonjour le monde",
            "Your language is %0": "Votre langue est %0",
        },
    )
    (tmp_path / "locale" / "de").mkdir()
    return settings


@pytest.fixture
def manager(settings):
    return create_localization_manager(settings)


@pytest.fixture
def app(settings, manager):
    app = create_app(settings, manager)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
