"""Hook specifications for localization plugins."""

from typing import TYPE_CHECKING, Optional

import pluggy

if TYPE_CHECKING:
    from infrastructure.i18n.dictionary import PluralRule

hookspec = pluggy.HookspecMarker("nugget_i18n")
hookimpl = pluggy.HookimplMarker("nugget_i18n")


@hookspec(firstresult=True)
def i18n_plural_rule(culture: str) -> Optional["PluralRule"]:
    """Return the plural rule for a culture.

    Providers that do not know the culture return None so that the next
    provider is asked.

    Args:
        culture: Culture name (e.g. "fr-CA").

    Returns:
        Callable mapping a count to a plural form index, or None.
    """
