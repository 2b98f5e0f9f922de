"""Feature-level fixtures for i18n system tests.

Provides a temporary project with sources and a locale directory.
"""

import pytest

from infrastructure.i18n import CultureDictionary, CultureDictionaryRecord
from tests.factories.i18n import make_i18n_settings, make_settings


@pytest.fixture
def project_dir(tmp_path):
    """Temporary project root with an empty ``locale`` directory.

    Structure:
    - views/home.html
    - views/partials/footer.html
    - app.py
    - node_modules/lib.py (blacklisted in ``i18n_settings``)
    - locale/
    """
    (tmp_path / "views" / "partials").mkdir(parents=True)
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "locale").mkdir()

    (tmp_path / "views" / "home.html").write_text(
        "<h1>[[[Welcome]]]</h1>\n"
        "<p>[[[Hello %0|||{name}]]]</p>\n"
        "<input placeholder=\"[[[Enter a value///helper text]]]\">\n",
        encoding="utf-8",
    )
    (tmp_path / "views" / "partials" / "footer.html").write_text(
        "<footer>[[[Welcome]]]</footer>\n",
        encoding="utf-8",
    )
    (tmp_path / "app.py").write_text(
        'TITLE = "[[[Application title]]]"\n',
        encoding="utf-8",
    )
    (tmp_path / "node_modules" / "lib.py").write_text(
        'IGNORED = "[[[Never scanned]]]"\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def i18n_settings(project_dir):
    return make_i18n_settings(project_dir, black_list="node_modules")


@pytest.fixture
def settings(project_dir):
    return make_settings(project_dir, black_list="node_modules")


@pytest.fixture
def french_dictionary():
    """Sealed French dictionary with a plain, a context and a plural record."""
    dictionary = CultureDictionary("fr")
    dictionary.merge_translations(
        [
            CultureDictionaryRecord("Hello World", None, ("Bonjour le monde",)),
            CultureDictionaryRecord("Hello %0", None, ("Bonjour %0",)),
            CultureDictionaryRecord("Save", "button", ("Enregistrer",)),
            CultureDictionaryRecord("Save", None, ("Sauvegarder",)),
            CultureDictionaryRecord("%0 file", None, ("%0 fichier", "%0 fichiers")),
        ]
    )
    dictionary.seal()
    return dictionary
