"""Plural rule plugin manager."""

from typing import Iterable, Optional

import pluggy
import structlog

from infrastructure import hookspecs
from infrastructure.i18n.plural import BabelPluralRuleProvider

logger = structlog.get_logger()


def create_plural_plugin_manager(
    providers: Optional[Iterable[object]] = None,
) -> pluggy.PluginManager:
    """Create a plugin manager asking plural rule providers in order.

    pluggy calls the most recently registered implementation first, so
    providers are registered from the highest ``order`` to the lowest.

    Args:
        providers: Objects implementing ``i18n_plural_rule``. Defaults to
            the Babel provider.

    Returns:
        PluginManager with the providers registered.
    """
    pm = pluggy.PluginManager("nugget_i18n")
    pm.add_hookspecs(hookspecs.i18n)

    if providers is None:
        providers = [BabelPluralRuleProvider()]

    ordered = sorted(providers, key=lambda p: getattr(p, "order", 0), reverse=True)
    for provider in ordered:
        pm.register(provider)

    logger.info(
        "plural_plugin_manager_created",
        providers=[type(p).__name__ for p in reversed(ordered)],
    )
    return pm
