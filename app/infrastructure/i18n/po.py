"""GNU gettext PO/POT reading and writing.

One line-oriented state machine reads both translation files (``.po``)
and templates (``.pot``). ``PoParser.parse`` yields the lightweight
records used for runtime lookups; ``PoParser.parse_items`` yields full
translation items with comments, references and flags for the build
tooling.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from infrastructure.i18n.models import (
    CultureDictionaryRecord,
    ReferenceContext,
    TemplateItem,
    TranslationItem,
    key_from_msgid_and_comment,
)

HISTORICAL_PREFIX = "#~"

TRANSLATION_GENERATOR = "i18n.POTGenerator"
TEMPLATE_GENERATOR = "pot"

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "?": "?",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

_UNESCAPE_REGEX = re.compile(
    r"\\(?:([abfnrtv?\"'\\])|([0-3]?[0-7]{1,2})|u([0-9a-fA-F]{4}))"
)


def unescape(value: str) -> str:
    """Resolve C escape sequences, octal escapes and ``\\uXXXX``."""

    def _resolve(match: "re.Match[str]") -> str:
        simple, octal, code_point = match.groups()
        if simple is not None:
            return _SIMPLE_ESCAPES[simple]
        if octal is not None:
            return chr(int(octal, 8))
        return chr(int(code_point, 16))

    return _UNESCAPE_REGEX.sub(_resolve, value)


def escape(value: Optional[str]) -> str:
    """Escape a value for a quoted PO string.

    Newlines are left alone; the writer splits on them. Whitespace-only
    values are written as the empty string.
    """
    if value is None or not value.strip():
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )


def trim_quote(value: str) -> str:
    if value.startswith('"') and value.endswith('"'):
        return value[1:-1] if len(value) > 1 else ""
    return value


@dataclass
class _Entry:
    msgctxt: Optional[str] = None
    msgid: Optional[str] = None
    msgstrs: List[str] = field(default_factory=list)
    translator_comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    references: List[ReferenceContext] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)
    historical: bool = False
    current_field: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return self.current_field is not None

    def set(self, keyword: str, content: str) -> None:
        if keyword == "msgid":
            # An entry whose msgid is still empty starts over.
            if not self.msgid:
                self.msgstrs.clear()
            self.msgid = content
        elif keyword == "msgctxt":
            self.msgctxt = content
        else:
            self.msgstrs.append(content)
        self.current_field = keyword

    def append(self, content: str) -> None:
        if self.current_field == "msgid":
            self.msgid = (self.msgid or "") + content
        elif self.current_field == "msgctxt":
            self.msgctxt = (self.msgctxt or "") + content
        elif self.current_field == "msgstr" and self.msgstrs:
            self.msgstrs[-1] += content


def _add_distinct(values: List[str], value: str) -> None:
    if value not in values:
        values.append(value)


class PoParser:
    """Streaming PO/POT parser.

    Entries carrying a msgctxt get a context MsgKey (msgid joined to the
    msgctxt); other entries are keyed by msgid.
    """

    def parse(self, lines: Iterable[str]) -> Iterator[CultureDictionaryRecord]:
        """Yield runtime records for translated, non-historical entries.

        Entries without a msgid (such as the header) or without any
        non-empty translation are skipped.
        """
        for entry in self._entries(lines):
            if entry.historical or not entry.msgid:
                continue
            translations = tuple(value for value in entry.msgstrs if value)
            if not translations:
                continue
            yield CultureDictionaryRecord(
                msgid=entry.msgid,
                msgctxt=entry.msgctxt or None,
                translations=translations,
            )

    def parse_items(self, lines: Iterable[str]) -> Iterator[TranslationItem]:
        """Yield a translation item for every entry with a msgid.

        Historical (``#~``) entries are included without references.
        """
        for entry in self._entries(lines):
            if not entry.msgid:
                continue
            msgkey = (
                key_from_msgid_and_comment(entry.msgid, entry.msgctxt, True)
                if entry.msgctxt
                else entry.msgid
            )
            yield TranslationItem(
                msgkey=msgkey,
                msgid=entry.msgid,
                message=entry.msgstrs[0] if entry.msgstrs else "",
                references=[] if entry.historical else entry.references,
                translator_comments=entry.translator_comments,
                extracted_comments=entry.extracted_comments,
                flags=entry.flags,
            )

    def _entries(self, lines: Iterable[str]) -> Iterator[_Entry]:
        entry = _Entry()
        for raw_line in lines:
            line = raw_line.strip()
            historical = line.startswith(HISTORICAL_PREFIX)
            if historical:
                line = line[len(HISTORICAL_PREFIX):].strip()
            if not line:
                continue

            if line.startswith("#"):
                if entry.has_body:
                    yield entry
                    entry = _Entry()
                self._add_comment(entry, line)
                continue

            if line.startswith('"'):
                entry.append(unescape(trim_quote(line)))
                continue

            parts = line.split(None, 1)
            keyword = parts[0]
            content = unescape(trim_quote(parts[1].strip())) if len(parts) == 2 else ""

            if keyword in ("msgid", "msgctxt"):
                if entry.msgstrs:
                    yield entry
                    entry = _Entry()
                entry.set(keyword, content)
            elif keyword.startswith("msgstr"):
                entry.set("msgstr", content)
            else:
                # msgid_plural and unknown keywords
                entry.current_field = entry.current_field and "ignored"

            if historical:
                entry.historical = True

        if entry.has_body:
            yield entry

    @staticmethod
    def _add_comment(entry: _Entry, line: str) -> None:
        marker = line[1:2]
        text = line[2:].strip()
        if marker == ".":
            if text:
                _add_distinct(entry.extracted_comments, text)
        elif marker == ":":
            if text:
                entry.references.append(ReferenceContext.parse(text))
        elif marker == ",":
            for flag in text.split(","):
                if flag.strip():
                    _add_distinct(entry.flags, flag.strip())
        elif marker == "|":
            # previous msgid, not kept
            pass
        elif line[1:].strip():
            _add_distinct(entry.translator_comments, line[1:].strip())


class PoWriter:
    """Writes translations and templates in PO format.

    Args:
        message_context_from_comment: Write the first extracted comment as msgctxt.
        show_source_context: Append the source line to ``#:`` references.
    """

    def __init__(
        self,
        message_context_from_comment: bool = False,
        show_source_context: bool = False,
    ):
        self.message_context_from_comment = message_context_from_comment
        self.show_source_context = show_source_context

    def write_translation(
        self,
        stream: TextIO,
        items: Dict[str, TranslationItem],
        pot_date: Optional[datetime] = None,
        revision_date: Optional[datetime] = None,
    ) -> None:
        """Write a language's items, live items first, orphans as ``#~`` entries."""
        now = datetime.now().astimezone()
        self._write_header(
            stream,
            creation_date=pot_date or now,
            revision_date=revision_date or now,
            generator=TRANSLATION_GENERATOR,
        )

        for item in sorted(items.values(), key=lambda i: (i.is_orphan, i.msgkey)):
            references = _distinct(r.to_comment(self.show_source_context) for r in item.references)
            live = bool(references)

            for comment in _distinct(item.translator_comments):
                stream.write(f"# {comment}\n")
            for comment in _distinct(item.extracted_comments):
                stream.write(f"#. {comment}\n")
            for reference in references:
                stream.write(f"#: {reference}\n")
            for flag in _distinct(item.flags):
                stream.write(f"#, {flag}\n")

            if self.message_context_from_comment and item.extracted_comments:
                self._write_string(stream, live, "msgctxt", item.extracted_comments[0])
            self._write_string(stream, live, "msgid", item.msgid)
            self._write_string(stream, live, "msgstr", item.message)
            stream.write("\n")

    def write_template(
        self,
        stream: TextIO,
        items: Dict[str, TemplateItem],
        creation_date: Optional[datetime] = None,
    ) -> None:
        """Write template items with an empty msgstr each."""
        self._write_header(
            stream,
            creation_date=creation_date or datetime.now().astimezone(),
            revision_date=None,
            generator=TEMPLATE_GENERATOR,
        )

        for item in sorted(items.values(), key=lambda i: (not i.references, i.msgkey)):
            for comment in item.comments:
                stream.write(f"#. {comment}\n")
            for reference in item.references:
                stream.write(f"#: {reference.to_comment(self.show_source_context)}\n")

            if self.message_context_from_comment and item.comments:
                self._write_string(stream, True, "msgctxt", item.comments[0])
            self._write_string(stream, True, "msgid", item.msgid)
            self._write_string(stream, True, "msgstr", "")
            stream.write("\n")

    @staticmethod
    def _write_header(
        stream: TextIO,
        creation_date: datetime,
        revision_date: Optional[datetime],
        generator: str,
    ) -> None:
        stream.write('msgid ""\n')
        stream.write('msgstr ""\n')
        stream.write('"Project-Id-Version: \\n"\n')
        stream.write(f'"POT-Creation-Date: {format_po_date(creation_date)}\\n"\n')
        if revision_date is not None:
            stream.write(f'"PO-Revision-Date: {format_po_date(revision_date)}\\n"\n')
        stream.write('"MIME-Version: 1.0\\n"\n')
        stream.write('"Content-Type: text/plain; charset=utf-8\\n"\n')
        stream.write('"Content-Transfer-Encoding: 8bit\\n"\n')
        stream.write(f'"X-Generator: {generator}\\n"\n')
        stream.write("\n")

    @staticmethod
    def _write_string(stream: TextIO, live: bool, keyword: str, value: Optional[str]) -> None:
        """Write one field, splitting multi-line values at each newline.

        ``a\\nb`` is written as::

            msgid ""
            "a\\n"
            "b"
        """
        value = escape((value or "").replace("\r\n", "\n"))
        if "\n" in value:
            lines = [f'{keyword} ""']
            segments = value.split("\n")
            for segment in segments[:-1]:
                lines.append(f'"{segment}\\n"')
            if segments[-1]:
                lines.append(f'"{segments[-1]}"')
        else:
            lines = [f'{keyword} "{value}"']

        prefix = "" if live else f"{HISTORICAL_PREFIX} "
        for line in lines:
            stream.write(f"{prefix}{line}\n")


def format_po_date(value: datetime) -> str:
    """Format a date as ``yyyy-mm-dd HH:MM+hh:mm``."""
    return value.isoformat(sep=" ", timespec="minutes")


def _distinct(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen
