"""Merging of a fresh template into stored translations."""

from typing import Dict

from infrastructure.i18n.models import TemplateItem, Translation, TranslationItem
from infrastructure.i18n.repository import PoTranslationRepository
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationMerger:
    """Reconciles template items with each language's translation items.

    Items missing from the template lose their references and become
    orphans; their messages are kept. Template items are added or
    refreshed without touching an existing message.

    Args:
        repository: Repository that loads and saves translations.
    """

    def __init__(self, repository: PoTranslationRepository):
        if repository is None:
            raise ValueError("repository is required")
        self.repository = repository

    def merge_translation(self, src: Dict[str, TemplateItem], dst: Translation) -> None:
        for item in dst.items.values():
            item.references = []

        added = 0
        for src_item in src.values():
            dst_item = dst.items.get(src_item.msgkey)
            if dst_item is None:
                dst_item = TranslationItem(msgkey=src_item.msgkey)
                dst.items[src_item.msgkey] = dst_item
                added += 1
            dst_item.msgid = src_item.msgid
            dst_item.references = list(src_item.references)
            dst_item.extracted_comments = list(src_item.comments)

        orphaned = sum(1 for item in dst.items.values() if item.is_orphan)
        logger.info(
            "translation_merged",
            language=dst.language.language_short_tag,
            added=added,
            orphaned=orphaned,
        )
        self.repository.save_translation(dst)

    def merge_all_translations(self, src: Dict[str, TemplateItem]) -> None:
        """Merge the template into every available language."""
        file_names = list(dict.fromkeys(item.file_name for item in src.values()))
        for language in self.repository.get_available_languages():
            translation = self.repository.get_translation(
                language.language_short_tag, file_names, loading_cache=False
            )
            self.merge_translation(src, translation)
