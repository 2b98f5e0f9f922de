"""Per-culture translation lookup."""

from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from infrastructure.i18n.exceptions import DictionarySealedError, PluralFormNotFoundError
from infrastructure.i18n.models import CultureDictionaryRecord, CultureDictionaryRecordKey

PluralRule = Callable[[int], int]


def default_plural_rule(count: int) -> int:
    """Binary plural rule: form 0 for exactly one, form 1 otherwise."""
    return 0 if count == 1 else 1


class CultureDictionary:
    """Translations of one culture, keyed by ``(msgid, context)``.

    A dictionary is filled by a translation provider and then sealed by
    the localization manager before it is shared between requests.

    Args:
        culture_name: Culture the translations belong to (e.g. "fr-CA").
        plural_rule: Maps a count to a plural form index.
    """

    def __init__(self, culture_name: str, plural_rule: Optional[PluralRule] = None):
        if not culture_name:
            raise ValueError("culture_name is required")
        self.culture_name = culture_name
        self.plural_rule: PluralRule = plural_rule or default_plural_rule
        self._translations: dict = {}
        self._sealed = False

    @property
    def translations(self) -> Mapping[CultureDictionaryRecordKey, CultureDictionaryRecord]:
        return MappingProxyType(self._translations)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def merge_translations(self, records: Iterable[CultureDictionaryRecord]) -> None:
        """Add records; a later record replaces an earlier one with the same key.

        Raises:
            DictionarySealedError: If the dictionary was sealed.
        """
        if self._sealed:
            raise DictionarySealedError(
                f"Dictionary for {self.culture_name!r} is sealed"
            )
        for record in records:
            self._translations[record.key] = record

    def get_record(
        self, msgid: str, context: Optional[str] = None
    ) -> Optional[CultureDictionaryRecord]:
        return self._translations.get(CultureDictionaryRecordKey(msgid, context or None))

    def get(
        self,
        msgid: str,
        context: Optional[str] = None,
        count: Optional[int] = None,
    ) -> Optional[str]:
        """Look up a translation.

        Args:
            msgid: Message id.
            context: Message context, or None.
            count: Selects the plural form through the plural rule. Without
                a count the first form is returned.

        Returns:
            The translation, or None when the message is not translated.

        Raises:
            PluralFormNotFoundError: If the plural rule selects a form the
                record does not have.
        """
        record = self.get_record(msgid, context)
        if record is None:
            return None
        if count is None:
            return record.translations[0]

        form = self.plural_rule(count)
        if form < 0 or form >= len(record.translations):
            raise PluralFormNotFoundError(msgid, form, len(record.translations))
        return record.translations[form]

    def __contains__(self, msgid: object) -> bool:
        return CultureDictionaryRecordKey(msgid, None) in self._translations

    def __len__(self) -> int:
        return len(self._translations)
