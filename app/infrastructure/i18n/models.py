"""Translation models for the i18n system.

Defines the records that flow between the nugget finder, the PO
repository, the merger and the runtime culture dictionaries.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# Joins msgid and comment when the comment is used as message context.
MSGKEY_CONTEXT_SEPARATOR = ":£#£#£:"

DISABLED_REFERENCES_PATH = "Disabled references"


def key_from_msgid_and_comment(
    msgid: str,
    comment: Optional[str],
    message_context_from_comment: bool,
) -> str:
    """Build the MsgKey of a message.

    Args:
        msgid: Message id.
        comment: Nugget comment or msgctxt value.
        message_context_from_comment: Whether comments disambiguate messages.

    Returns:
        ``msgid`` alone, or ``msgid`` joined to ``comment`` when message
        context from comments is enabled and a comment is present.
    """
    if message_context_from_comment and comment:
        return f"{msgid}{MSGKEY_CONTEXT_SEPARATOR}{comment}"
    return msgid


def normalize_msgid(msgid: str) -> str:
    """Make a msgid independent of the source file's line endings.

    ``\\r\\n`` becomes ``\\n``; a lone ``\\r`` becomes the two-character
    escape sequence ``\\n``.
    """
    return msgid.replace("\r\n", "\n").replace("\r", "\\n")


@dataclass(frozen=True)
class Nugget:
    """Components of one parsed nugget.

    For ``[[[Enter between %0 and %1|||{1}|||{2}///min and max]]]`` the
    msgid is ``Enter between %0 and %1``, the format items are
    ``("{1}", "{2}")`` and the comment is ``min and max``.

    Attributes:
        msgid: Text between the begin token and the first delimiter or comment.
        format_items: Delimited parameters, or None when the nugget has none.
        comment: Translator comment, or None.
    """

    msgid: str
    format_items: Optional[Tuple[str, ...]] = None
    comment: Optional[str] = None

    @property
    def is_formatted(self) -> bool:
        return bool(self.format_items)

    def __str__(self) -> str:
        return self.msgid


@dataclass(frozen=True)
class ReferenceContext:
    """Location of a nugget in a source file.

    Attributes:
        path: Source path relative to the project, forward slashes.
        line_number: 1-based line of the nugget (0 when references are disabled).
        context: Stripped source line holding the nugget.
    """

    path: str
    line_number: int = 0
    context: str = ""

    @classmethod
    def create(cls, path: str, content: str, position: int) -> "ReferenceContext":
        """Build a reference from a match position inside file content.

        Args:
            path: Reference path of the file.
            content: Whole file content.
            position: Offset of the nugget in ``content``.

        Returns:
            ReferenceContext with the line number and the source line.
        """
        if path == DISABLED_REFERENCES_PATH:
            return cls(path=path, line_number=0)

        line_start = content.rfind("\n", 0, position) + 1
        line_end = content.find("\n", position)
        if line_end == -1:
            line_end = len(content)
        return cls(
            path=path,
            line_number=content.count("\n", 0, position) + 1,
            context=content[line_start:line_end].strip(),
        )

    @classmethod
    def parse(cls, text: str) -> "ReferenceContext":
        """Parse the text of a ``#:`` comment (``path:line[:context]``)."""
        text = text.strip()
        parts = text.split(":", 2)
        if len(parts) >= 2 and parts[1].strip().isdigit():
            context = parts[2].strip() if len(parts) == 3 else ""
            return cls(path=parts[0], line_number=int(parts[1]), context=context)
        return cls(path=text, line_number=0)

    def to_comment(self, show_source_context: bool = False) -> str:
        if show_source_context and self.context:
            return f"{self.path}:{self.line_number}:{self.context}"
        return f"{self.path}:{self.line_number}"

    def __str__(self) -> str:
        return self.to_comment()


@dataclass
class TemplateItem:
    """A distinct translatable string discovered while scanning sources.

    Attributes:
        msgkey: Lookup key (msgid, or msgid plus comment context).
        msgid: Normalized message id.
        file_name: Source file name up to its first dot, groups per-file templates.
        references: Places the string was found.
        comments: Distinct nugget comments, in discovery order.
    """

    msgkey: str
    msgid: str
    file_name: str = ""
    references: List[ReferenceContext] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.msgkey


@dataclass
class TranslationItem:
    """A per-language message record.

    An item without references is an orphan: its source string is gone
    but the translated message is kept and written as a historical entry.

    Attributes:
        msgkey: Lookup key.
        msgid: Message id.
        message: Human-entered translation, may be empty.
        references: Source locations, empty for orphans.
        translator_comments: ``#`` comments.
        extracted_comments: ``#.`` comments, taken from nugget comments.
        flags: ``#,`` flags (e.g. ``fuzzy``).
    """

    msgkey: str
    msgid: str = ""
    message: str = ""
    references: List[ReferenceContext] = field(default_factory=list)
    translator_comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)

    @property
    def is_orphan(self) -> bool:
        return not self.references

    def __str__(self) -> str:
        return self.msgkey


@dataclass
class Language:
    """A language available in the locale directory or configuration."""

    language_short_tag: str

    def __str__(self) -> str:
        return self.language_short_tag


@dataclass
class Translation:
    """All translation items of one language, keyed by MsgKey."""

    language: Language
    items: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CultureDictionaryRecordKey:
    """Lookup key of a culture dictionary record."""

    msgid: str
    context: Optional[str] = None


@dataclass(frozen=True)
class CultureDictionaryRecord:
    """A translated message as loaded for runtime lookups.

    Attributes:
        msgid: Message id, never empty.
        msgctxt: Message context, or None.
        translations: Plural forms in order; index 0 is the singular form.
    """

    msgid: str
    msgctxt: Optional[str] = None
    translations: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.msgid:
            raise ValueError("msgid is required")
        if not any(self.translations):
            raise ValueError(f"at least one translation is required for {self.msgid!r}")

    @property
    def key(self) -> CultureDictionaryRecordKey:
        return CultureDictionaryRecordKey(self.msgid, self.msgctxt or None)
