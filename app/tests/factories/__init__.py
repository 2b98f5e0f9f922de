"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n_settings,
    make_po_text,
    make_reference,
    make_settings,
    make_template,
    make_template_item,
    make_translation,
    make_translation_item,
    write_po_file,
)

__all__ = [
    "make_i18n_settings",
    "make_po_text",
    "make_reference",
    "make_settings",
    "make_template",
    "make_template_item",
    "make_translation",
    "make_translation_item",
    "write_po_file",
]
