"""Plugin managers and utilities."""

from infrastructure.hookspecs.i18n import hookimpl
from infrastructure.services.plugins.plural import create_plural_plugin_manager

__all__ = [
    "hookimpl",
    "create_plural_plugin_manager",
]
