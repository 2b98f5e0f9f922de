"""Plural rule providers.

Providers implement the ``i18n_plural_rule`` hook. The localization
manager asks them in ascending ``order``; the first rule returned wins.
"""

import gettext
from typing import Optional

from babel.core import UnknownLocaleError
from babel.messages.plurals import get_plural

from infrastructure.hookspecs.i18n import hookimpl
from infrastructure.i18n.dictionary import PluralRule
from infrastructure.i18n.language_tag import LanguageTag
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class BabelPluralRuleProvider:
    """gettext plural rules from the locale data shipped with Babel.

    The rule numbers forms the way ``msgstr[N]`` entries do: French has
    ``(n > 1)`` with two forms, Polish three forms. Languages Babel knows
    without a specific rule get the gettext default ``(n != 1)``.
    """

    order = 0

    @hookimpl
    def i18n_plural_rule(self, culture: str) -> Optional[PluralRule]:
        identifier = self._locale_identifier(culture)
        if identifier is None:
            return None
        try:
            plural = get_plural(identifier)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("plural_rule_locale_unknown", culture=culture, error=str(e))
            return None

        expression = gettext.c2py(plural.plural_expr)

        def _plural_rule(count: int) -> int:
            return int(expression(count))

        return _plural_rule

    @staticmethod
    def _locale_identifier(culture: str) -> Optional[str]:
        if not LanguageTag.is_valid(culture):
            return None
        tag = LanguageTag(culture)
        return "_".join(p for p in (tag.language, tag.script, tag.region) if p)
