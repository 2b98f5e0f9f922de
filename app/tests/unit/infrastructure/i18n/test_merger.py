"""Unit tests for infrastructure.i18n.merger."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import PoTranslationRepository, TranslationMerger
from tests.factories.i18n import (
    make_i18n_settings,
    make_reference,
    make_template,
    make_template_item,
    make_translation,
    make_translation_item,
    write_po_file,
)


@pytest.fixture
def repository():
    return MagicMock(spec=PoTranslationRepository)


@pytest.mark.unit
class TestMergeTranslation:
    def test_new_items_are_added_untranslated(self, repository):
        translation = make_translation("fr")

        TranslationMerger(repository).merge_translation(make_template("Hello"), translation)

        item = translation.items["Hello"]
        assert item.message == ""
        assert item.references == [make_reference()]
        repository.save_translation.assert_called_once_with(translation)

    def test_existing_message_is_preserved(self, repository):
        translation = make_translation(
            "fr",
            make_translation_item("Hello", "Bonjour", references=[make_reference("old.py", 9)]),
        )
        src = {
            "Hello": make_template_item(
                "Hello", references=[make_reference("new.py", 3)], comments=["greeting"]
            )
        }

        TranslationMerger(repository).merge_translation(src, translation)

        item = translation.items["Hello"]
        assert item.message == "Bonjour"
        assert item.references == [make_reference("new.py", 3)]
        assert item.extracted_comments == ["greeting"]

    def test_missing_items_become_orphans(self, repository):
        translation = make_translation(
            "fr",
            make_translation_item("Hello", "Bonjour"),
            make_translation_item("Gone", "Parti"),
        )

        TranslationMerger(repository).merge_translation(make_template("Hello"), translation)

        assert translation.items["Gone"].is_orphan
        assert translation.items["Gone"].message == "Parti"
        assert not translation.items["Hello"].is_orphan

    def test_orphan_found_again_regains_references(self, repository):
        translation = make_translation(
            "fr", make_translation_item("Back", "Revenu", references=[])
        )

        TranslationMerger(repository).merge_translation(make_template("Back"), translation)

        assert not translation.items["Back"].is_orphan
        assert translation.items["Back"].message == "Revenu"

    def test_repository_required(self):
        with pytest.raises(ValueError):
            TranslationMerger(None)


@pytest.mark.unit
class TestMergeAllTranslations:
    def test_every_language_is_merged_and_saved(self, tmp_path):
        repository = PoTranslationRepository(make_i18n_settings(tmp_path))
        write_po_file(repository.locale_directory, "fr", {"Hello": "Bonjour", "Gone": "Parti"})
        write_po_file(repository.locale_directory, "de", {})

        TranslationMerger(repository).merge_all_translations(make_template("Hello", "New"))

        fr = repository.get_translation("fr").items
        de = repository.get_translation("de").items
        assert fr["Hello"].message == "Bonjour"
        assert fr["New"].message == ""
        assert fr["Gone"].is_orphan
        assert set(de) == {"Hello", "New"}

    def test_merge_is_idempotent(self, tmp_path):
        repository = PoTranslationRepository(make_i18n_settings(tmp_path))
        write_po_file(repository.locale_directory, "fr", {"Hello": "Bonjour"})
        merger = TranslationMerger(repository)
        template = make_template("Hello", "Bye")

        merger.merge_all_translations(template)
        first = repository.get_translation("fr").items
        merger.merge_all_translations(template)
        second = repository.get_translation("fr").items

        assert {k: (v.message, v.references) for k, v in first.items()} == {
            k: (v.message, v.references) for k, v in second.items()
        }

    def test_per_file_translations_are_read(self, tmp_path):
        repository = PoTranslationRepository(
            make_i18n_settings(tmp_path, generate_template_per_file=True)
        )
        write_po_file(repository.locale_directory, "fr", {"Title": "Titre"}, "app")
        template = {"Title": make_template_item("Title", file_name="app")}

        TranslationMerger(repository).merge_all_translations(template)

        assert repository.get_translation("fr").items["Title"].message == "Titre"
