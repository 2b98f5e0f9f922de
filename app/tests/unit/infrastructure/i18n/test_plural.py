"""Unit tests for plural rule providers and their plugin manager."""

import pytest

from infrastructure.hookspecs.i18n import hookimpl
from infrastructure.i18n import BabelPluralRuleProvider
from infrastructure.services.plugins import create_plural_plugin_manager


class FixedRuleProvider:
    """Answers every culture with a rule that always picks ``form``."""

    def __init__(self, form, order):
        self.form = form
        self.order = order

    @hookimpl
    def i18n_plural_rule(self, culture):
        return lambda count: self.form


class NoRuleProvider:
    order = -1

    @hookimpl
    def i18n_plural_rule(self, culture):
        return None


@pytest.mark.unit
class TestBabelPluralRuleProvider:
    def test_english(self):
        rule = BabelPluralRuleProvider().i18n_plural_rule("en")
        assert [rule(n) for n in (0, 1, 2)] == [1, 0, 1]

    def test_french_treats_zero_as_singular(self):
        rule = BabelPluralRuleProvider().i18n_plural_rule("fr-CA")
        assert [rule(n) for n in (0, 1, 2)] == [0, 0, 1]

    def test_polish_has_three_forms(self):
        rule = BabelPluralRuleProvider().i18n_plural_rule("pl")
        # one, few, many
        assert [rule(n) for n in (1, 3, 5)] == [0, 1, 2]

    def test_unknown_culture(self):
        assert BabelPluralRuleProvider().i18n_plural_rule("qq") is None

    def test_invalid_culture(self):
        assert BabelPluralRuleProvider().i18n_plural_rule("not a culture") is None


@pytest.mark.unit
class TestPluralPluginManager:
    def test_default_provider_is_babel(self):
        pm = create_plural_plugin_manager()
        rule = pm.hook.i18n_plural_rule(culture="en")
        assert rule(1) == 0

    def test_lowest_order_wins(self):
        pm = create_plural_plugin_manager(
            [FixedRuleProvider(form=5, order=10), FixedRuleProvider(form=3, order=1)]
        )
        assert pm.hook.i18n_plural_rule(culture="en")(1) == 3

    def test_none_falls_through_to_next_provider(self):
        pm = create_plural_plugin_manager(
            [NoRuleProvider(), FixedRuleProvider(form=2, order=0)]
        )
        assert pm.hook.i18n_plural_rule(culture="en")(1) == 2

    def test_no_provider_knows_culture(self):
        pm = create_plural_plugin_manager([NoRuleProvider()])
        assert pm.hook.i18n_plural_rule(culture="en") is None
