"""Hook specifications."""

from infrastructure.hookspecs import i18n

__all__ = ["i18n"]
