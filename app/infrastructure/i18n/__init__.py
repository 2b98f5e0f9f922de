"""i18n system - nugget based localization.

Extracts translatable nuggets (``[[[text|||param///comment]]]``) from
source files into PO templates, merges templates into per-language PO
files, and substitutes nuggets in outgoing text at request time.

Main components:
- nuggets: NuggetParser and NuggetTokens
- po: PoParser and PoWriter for PO/POT files
- finder: NuggetFinder, source tree scanning
- repository: PoTranslationRepository, template and translation files
- merger: TranslationMerger
- dictionary: CultureDictionary
- manager: LocalizationManager, cached per-culture dictionaries
- replacer: NuggetReplacer
- language_tag: LanguageTag and LanguageTagCache
"""

from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.dictionary import CultureDictionary, default_plural_rule
from infrastructure.i18n.exceptions import (
    DictionarySealedError,
    I18nError,
    InvalidLanguageTagError,
    PluralFormNotFoundError,
)
from infrastructure.i18n.factory import create_localization_manager
from infrastructure.i18n.finder import NuggetFinder
from infrastructure.i18n.language_tag import LanguageTag, LanguageTagCache, MatchGrade
from infrastructure.i18n.manager import LocalizationManager
from infrastructure.i18n.merger import TranslationMerger
from infrastructure.i18n.models import (
    CultureDictionaryRecord,
    CultureDictionaryRecordKey,
    Language,
    Nugget,
    ReferenceContext,
    TemplateItem,
    Translation,
    TranslationItem,
)
from infrastructure.i18n.nuggets import NuggetContext, NuggetParser, NuggetTokens
from infrastructure.i18n.plural import BabelPluralRuleProvider
from infrastructure.i18n.po import PoParser, PoWriter
from infrastructure.i18n.providers import (
    LocaleDirectoryPoFileLocationProvider,
    PoFilesTranslationProvider,
)
from infrastructure.i18n.replacer import NuggetReplacer
from infrastructure.i18n.repository import PoTranslationRepository
from infrastructure.i18n.service import BuildResult, TemplateBuildService

__all__ = [
    "BuildResult",
    "BabelPluralRuleProvider",
    "CultureDictionary",
    "CultureDictionaryRecord",
    "CultureDictionaryRecordKey",
    "DictionaryCache",
    "DictionarySealedError",
    "I18nError",
    "InvalidLanguageTagError",
    "Language",
    "LanguageTag",
    "LanguageTagCache",
    "LocaleDirectoryPoFileLocationProvider",
    "LocalizationManager",
    "MatchGrade",
    "Nugget",
    "NuggetContext",
    "NuggetFinder",
    "NuggetParser",
    "NuggetReplacer",
    "NuggetTokens",
    "PluralFormNotFoundError",
    "PoFilesTranslationProvider",
    "PoParser",
    "PoTranslationRepository",
    "PoWriter",
    "ReferenceContext",
    "TemplateBuildService",
    "TemplateItem",
    "Translation",
    "TranslationItem",
    "TranslationMerger",
    "create_localization_manager",
    "default_plural_rule",
]
