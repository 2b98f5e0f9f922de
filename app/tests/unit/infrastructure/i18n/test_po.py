"""Unit tests for infrastructure.i18n.po.

Tests cover:
- escape / unescape / trim_quote helpers
- PoParser.parse runtime records
- PoParser.parse_items translation items
- PoWriter template and translation output
- Write then parse preserves items
"""

import io
from datetime import datetime, timezone

import pytest

from infrastructure.i18n import PoParser, PoWriter, ReferenceContext
from infrastructure.i18n.models import MSGKEY_CONTEXT_SEPARATOR
from infrastructure.i18n.po import escape, format_po_date, trim_quote, unescape
from tests.factories.i18n import (
    make_po_text,
    make_reference,
    make_template_item,
    make_translation_item,
)

FIXED_DATE = datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)

HEADER_LINES = [
    'msgid ""',
    'msgstr ""',
    '"Project-Id-Version: \\n"',
    '"POT-Creation-Date: 2024-01-02 03:04+00:00\\n"',
]


def _lines(text):
    return text.splitlines()


@pytest.mark.unit
class TestStringHelpers:
    def test_escape_special_characters(self):
        assert escape('a"b\\c\td\re') == 'a\\"b\\\\c\\td\\re'

    def test_escape_leaves_newlines(self):
        assert escape("a\nb") == "a\nb"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t"])
    def test_escape_blank_values(self, value):
        assert escape(value) == ""

    def test_unescape_c_sequences(self):
        assert unescape('Say \\"hi\\"\\n\\tnow\\\\') == 'Say "hi"\n\tnow\\'

    def test_unescape_unicode_and_octal(self):
        assert unescape("caf\\u00e9 \\101") == "café A"

    def test_unescape_plain_text(self):
        assert unescape("nothing to do") == "nothing to do"

    def test_trim_quote(self):
        assert trim_quote('"abc"') == "abc"
        assert trim_quote('""') == ""
        assert trim_quote("abc") == "abc"

    def test_format_po_date(self):
        assert format_po_date(FIXED_DATE) == "2024-01-02 03:04+00:00"


@pytest.mark.unit
class TestPoParserParse:
    def test_simple_entry(self):
        records = list(PoParser().parse(['msgid "Cat"', 'msgstr "Katt"']))

        assert len(records) == 1
        assert records[0].msgid == "Cat"
        assert records[0].msgctxt is None
        assert records[0].translations == ("Katt",)

    def test_header_is_skipped(self):
        text = make_po_text({"Cat": "Katt", "Dog": "Hund"})
        records = list(PoParser().parse(_lines(text)))
        assert [r.msgid for r in records] == ["Cat", "Dog"]

    def test_entries_without_blank_lines(self):
        lines = ['msgid "A"', 'msgstr "1"', 'msgid "B"', 'msgstr "2"']
        records = list(PoParser().parse(lines))
        assert [(r.msgid, r.translations) for r in records] == [("A", ("1",)), ("B", ("2",))]

    def test_untranslated_entry_is_skipped(self):
        lines = ['msgid "Untranslated"', 'msgstr ""', "", 'msgid "Cat"', 'msgstr "Katt"']
        records = list(PoParser().parse(lines))
        assert [r.msgid for r in records] == ["Cat"]

    def test_historical_entry_is_skipped(self):
        lines = ['#~ msgid "Old"', '#~ msgstr "Vieux"', "", 'msgid "Cat"', 'msgstr "Katt"']
        records = list(PoParser().parse(lines))
        assert [r.msgid for r in records] == ["Cat"]

    def test_message_context(self):
        lines = ['msgctxt "button"', 'msgid "Save"', 'msgstr "Enregistrer"']
        record = next(PoParser().parse(lines))
        assert record.msgctxt == "button"
        assert record.key.context == "button"

    def test_plural_forms(self):
        lines = [
            'msgid "%0 file"',
            'msgid_plural "%0 files"',
            'msgstr[0] "%0 fichier"',
            'msgstr[1] "%0 fichiers"',
        ]
        record = next(PoParser().parse(lines))
        assert record.msgid == "%0 file"
        assert record.translations == ("%0 fichier", "%0 fichiers")

    def test_multiline_values(self):
        lines = [
            'msgid ""',
            '"first\\n"',
            '"second"',
            'msgstr ""',
            '"premier\\n"',
            '"second"',
        ]
        record = next(PoParser().parse(lines))
        assert record.msgid == "first\nsecond"
        assert record.translations == ("premier\nsecond",)

    def test_escaped_quotes(self):
        record = next(PoParser().parse(['msgid "Say \\"hi\\""', 'msgstr "Dis \\"salut\\""']))
        assert record.msgid == 'Say "hi"'
        assert record.translations == ('Dis "salut"',)

    def test_lines_are_stripped(self):
        record = next(PoParser().parse(['  msgid "Cat"  \n', '\tmsgstr "Katt"\r\n']))
        assert (record.msgid, record.translations) == ("Cat", ("Katt",))


@pytest.mark.unit
class TestPoParserParseItems:
    def test_comments_references_and_flags(self):
        lines = [
            "# reviewed",
            "#. shown on the home page",
            "#: views/home.html:3",
            "#: views/other.html:7",
            "#, fuzzy, python-format",
            'msgid "Welcome"',
            'msgstr "Bienvenue"',
        ]
        item = next(PoParser().parse_items(lines))

        assert item.msgkey == "Welcome"
        assert item.message == "Bienvenue"
        assert item.translator_comments == ["reviewed"]
        assert item.extracted_comments == ["shown on the home page"]
        assert item.references == [
            ReferenceContext("views/home.html", 3),
            ReferenceContext("views/other.html", 7),
        ]
        assert item.flags == ["fuzzy", "python-format"]

    def test_untranslated_entry_is_kept(self):
        item = next(PoParser().parse_items(['msgid "Hello"', 'msgstr ""']))
        assert item.msgid == "Hello"
        assert item.message == ""

    def test_context_entry_gets_context_key(self):
        lines = ['msgctxt "button"', 'msgid "Save"', 'msgstr "Enregistrer"']
        item = next(PoParser().parse_items(lines))
        assert item.msgkey == f"Save{MSGKEY_CONTEXT_SEPARATOR}button"

    def test_historical_entry_has_no_references(self):
        lines = ["#: views/old.html:1", '#~ msgid "Old"', '#~ msgstr "Vieux"']
        item = next(PoParser().parse_items(lines))
        assert item.message == "Vieux"
        assert item.references == []
        assert item.is_orphan

    def test_reference_with_source_context(self):
        lines = ["#: views/home.html:3:<h1>[[[Welcome]]]</h1>", 'msgid "Welcome"', 'msgstr ""']
        item = next(PoParser().parse_items(lines))
        assert item.references[0].line_number == 3
        assert item.references[0].context == "<h1>[[[Welcome]]]</h1>"


@pytest.mark.unit
class TestPoWriter:
    def test_write_template(self):
        items = {"Hello": make_template_item("Hello", comments=["greeting"])}
        stream = io.StringIO()

        PoWriter().write_template(stream, items, creation_date=FIXED_DATE)

        assert stream.getvalue().splitlines() == HEADER_LINES + [
            '"MIME-Version: 1.0\\n"',
            '"Content-Type: text/plain; charset=utf-8\\n"',
            '"Content-Transfer-Encoding: 8bit\\n"',
            '"X-Generator: pot\\n"',
            "",
            "#. greeting",
            "#: views/home.html:1",
            'msgid "Hello"',
            'msgstr ""',
            "",
        ]

    def test_write_translation_orders_live_items_before_orphans(self):
        items = {
            "Dog": make_translation_item(
                "Dog", "Hund", references=[], translator_comments=["checked"]
            ),
            "Zebra": make_translation_item("Zebra", "Sebra"),
            "Cat": make_translation_item("Cat", "Katt"),
        }
        stream = io.StringIO()

        PoWriter().write_translation(
            stream, items, pot_date=FIXED_DATE, revision_date=FIXED_DATE
        )
        lines = stream.getvalue().splitlines()

        assert '"PO-Revision-Date: 2024-01-02 03:04+00:00\\n"' in lines
        assert '"X-Generator: i18n.POTGenerator\\n"' in lines
        body = lines[lines.index('"X-Generator: i18n.POTGenerator\\n"') + 2:]
        assert body == [
            "#: views/home.html:1",
            'msgid "Cat"',
            'msgstr "Katt"',
            "",
            "#: views/home.html:1",
            'msgid "Zebra"',
            'msgstr "Sebra"',
            "",
            "# checked",
            '#~ msgid "Dog"',
            '#~ msgstr "Hund"',
            "",
        ]

    def test_multiline_values_are_split(self):
        items = {"a\nb": make_translation_item("a\nb", "x\n", msgkey="a\nb")}
        stream = io.StringIO()

        PoWriter().write_translation(stream, items, pot_date=FIXED_DATE)
        text = stream.getvalue()

        assert 'msgid ""\n"a\\n"\n"b"\nmsgstr ""\n"x\\n"\n' in text

    def test_show_source_context(self):
        reference = ReferenceContext("views/home.html", 2, "<p>[[[Hi]]]</p>")
        items = {"Hi": make_template_item("Hi", references=[reference])}
        stream = io.StringIO()

        PoWriter(show_source_context=True).write_template(stream, items, FIXED_DATE)

        assert "#: views/home.html:2:<p>[[[Hi]]]</p>\n" in stream.getvalue()

    def test_message_context_from_comment(self):
        items = {"Save": make_template_item("Save", comments=["button"])}
        stream = io.StringIO()

        PoWriter(message_context_from_comment=True).write_template(stream, items, FIXED_DATE)

        assert 'msgctxt "button"\nmsgid "Save"\n' in stream.getvalue()

    def test_written_translation_parses_back(self):
        items = {
            "Cat": make_translation_item(
                "Cat",
                "Katt",
                references=[make_reference("a.html", 4)],
                extracted_comments=["animal"],
                flags=["fuzzy"],
            ),
            'Say "hi"': make_translation_item('Say "hi"', "Dis \\ salut"),
            "Old": make_translation_item("Old", "Vieux", references=[]),
            "Two\nlines": make_translation_item("Two\nlines", "Deux\nlignes"),
        }
        stream = io.StringIO()
        PoWriter().write_translation(stream, items, pot_date=FIXED_DATE)

        parsed = {
            item.msgkey: item
            for item in PoParser().parse_items(stream.getvalue().splitlines())
        }

        assert set(parsed) == set(items)
        for key, original in items.items():
            assert parsed[key].msgid == original.msgid
            assert parsed[key].message == original.message
            assert parsed[key].references == original.references
            assert parsed[key].extracted_comments == original.extracted_comments
            assert parsed[key].flags == original.flags

        records = list(PoParser().parse(stream.getvalue().splitlines()))
        assert "Old" not in {r.msgid for r in records}
