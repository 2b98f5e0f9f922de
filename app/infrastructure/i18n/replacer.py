"""Substitution of nuggets in outgoing text."""

import re
from typing import Optional, Sequence

from infrastructure.i18n.dictionary import CultureDictionary
from infrastructure.i18n.models import Nugget, normalize_msgid
from infrastructure.i18n.nuggets import NuggetContext, NuggetParser, NuggetTokens

_PLACEHOLDER_REGEX = re.compile(r"%(\d+)")


def format_message(message: str, format_items: Sequence[str]) -> str:
    """Replace ``%0``, ``%1``, ... with the matching format item.

    Placeholders without a matching item are left as they are.
    """

    def _substitute(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        return format_items[index] if index < len(format_items) else match.group(0)

    return _PLACEHOLDER_REGEX.sub(_substitute, message)


class NuggetReplacer:
    """Replaces every nugget in a text with its translation.

    Untranslated nuggets are replaced with their msgid, so the output never
    contains nugget tokens or nugget comments.

    Args:
        tokens: Nugget tokens.
        message_context_from_comment: Look up ``(msgid, comment)`` before
            the plain msgid.
    """

    def __init__(
        self,
        tokens: Optional[NuggetTokens] = None,
        message_context_from_comment: bool = False,
    ):
        self.parser = NuggetParser(tokens or NuggetTokens(), NuggetContext.RESPONSE)
        self.message_context_from_comment = message_context_from_comment

    def replace(self, dictionary: CultureDictionary, text: str) -> str:
        if dictionary is None:
            raise ValueError("dictionary is required")
        if not text:
            return text

        def _process(_: str, __: int, nugget: Optional[Nugget]) -> Optional[str]:
            if nugget is None:
                return None
            message = self.lookup(dictionary, nugget)
            if nugget.format_items:
                message = format_message(message, nugget.format_items)
            return message

        return self.parser.parse_string(text, _process)

    def lookup(self, dictionary: CultureDictionary, nugget: Nugget) -> str:
        msgid = normalize_msgid(nugget.msgid)
        translation = None
        if self.message_context_from_comment and nugget.comment:
            translation = dictionary.get(msgid, nugget.comment)
        if translation is None:
            translation = dictionary.get(msgid)
        return translation if translation is not None else nugget.msgid
