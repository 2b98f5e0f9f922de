"""Nugget markup parsing.

A nugget is an inline translatable string:

    [[[Enter between %0 and %1 characters|||{1}|||{2}///min and max length]]]

The begin, end, delimiter and comment tokens are configurable.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from infrastructure.i18n.models import Nugget


@dataclass(frozen=True)
class NuggetTokens:
    """Tokens delimiting a nugget and its parts."""

    begin: str = "[[["
    end: str = "]]]"
    delimiter: str = "|||"
    comment: str = "///"

    def __post_init__(self) -> None:
        for name in ("begin", "end", "delimiter", "comment"):
            if not getattr(self, name) or not getattr(self, name).strip():
                raise ValueError(f"nugget {name} token is required")

    @classmethod
    def from_settings(cls, i18n_settings) -> "NuggetTokens":
        return cls(
            begin=i18n_settings.nugget_begin_token,
            end=i18n_settings.nugget_end_token,
            delimiter=i18n_settings.nugget_delimiter_token,
            comment=i18n_settings.nugget_comment_token,
        )


class NuggetContext(str, Enum):
    """Stage at which nuggets are parsed.

    Values:
        SOURCE: Scanning source files; empty format items invalidate a nugget.
        RESPONSE: Rewriting output; format items may be empty.
    """

    SOURCE = "source"
    RESPONSE = "response"


# Callback: (nugget text, position, nugget or None) -> replacement or None
NuggetCallback = Callable[[str, int, Optional[Nugget]], Optional[str]]


class NuggetParser:
    """Locates nuggets in text and breaks them down into their parts.

    Args:
        tokens: Nugget tokens.
        context: Source or response processing.
    """

    def __init__(
        self,
        tokens: Optional[NuggetTokens] = None,
        context: NuggetContext = NuggetContext.SOURCE,
    ):
        self.tokens = tokens or NuggetTokens()
        self.context = context

        begin = re.escape(self.tokens.begin)
        end = re.escape(self.tokens.end)
        delimiter = re.escape(self.tokens.delimiter)
        comment = re.escape(self.tokens.comment)
        item = ".+?" if context == NuggetContext.SOURCE else ".*?"

        # Format items are captured together in group 2 and split afterwards.
        self._nugget_regex = re.compile(
            rf"{begin}(.+?)((?:{delimiter}{item})*)(?:{comment}(.+?))?{end}",
            re.DOTALL,
        )
        self._item_regex = re.compile(
            rf"{delimiter}({item})(?={delimiter}|\Z)",
            re.DOTALL,
        )

    def breakdown(self, text: str) -> Optional[Nugget]:
        """Break down the first nugget found in ``text``.

        Returns:
            Nugget, or None when no well-formed nugget is present.
        """
        match = self._nugget_regex.search(text)
        if match is None:
            return None
        return self._nugget_from_match(match)

    def parse_all(self, text: str) -> Iterator[Tuple[str, int, Optional[Nugget]]]:
        """Lazily yield ``(nugget text, position, nugget)`` for every match.

        The nugget is None for malformed matches.
        """
        for match in self._nugget_regex.finditer(text):
            yield match.group(0), match.start(), self._nugget_from_match(match)

    def parse_string(self, text: str, process_nugget: NuggetCallback) -> str:
        """Replace nuggets in ``text`` with what ``process_nugget`` returns.

        Args:
            text: Source file content or response body.
            process_nugget: Called for each match with the nugget text, its
                position and the broken-down nugget (None if malformed).
                Returning None keeps the original nugget text.

        Returns:
            Text with the replacements applied.
        """

        def _replace(match: "re.Match[str]") -> str:
            replacement = process_nugget(
                match.group(0), match.start(), self._nugget_from_match(match)
            )
            return match.group(0) if replacement is None else replacement

        return self._nugget_regex.sub(_replace, text)

    def _nugget_from_match(self, match: "re.Match[str]") -> Optional[Nugget]:
        format_items = None
        if match.group(2):
            items = tuple(m.group(1) for m in self._item_regex.finditer(match.group(2)))
            if self.context == NuggetContext.SOURCE and any(
                not item.strip() for item in items
            ):
                return None
            format_items = items or None

        comment = match.group(3)
        return Nugget(
            msgid=match.group(1),
            format_items=format_items,
            comment=comment if comment and comment.strip() else None,
        )
