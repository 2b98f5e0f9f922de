"""Exceptions raised by the i18n system."""


class I18nError(Exception):
    """Base exception for localization errors."""


class InvalidLanguageTagError(I18nError, ValueError):
    """Raised when a string is not a valid language tag.

    Args:
        tag: The rejected tag string.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Invalid language tag: {tag!r}")


class PluralFormNotFoundError(I18nError, LookupError):
    """Raised when a plural rule selects a form missing from a record.

    Args:
        msgid: Message id of the record.
        form: Plural form index chosen by the rule.
        available: Number of translations the record holds.
    """

    def __init__(self, msgid: str, form: int, available: int):
        self.msgid = msgid
        self.form = form
        self.available = available
        super().__init__(
            f"Plural form {form} not found for {msgid!r} ({available} forms available)"
        )


class DictionarySealedError(I18nError, RuntimeError):
    """Raised when translations are merged into a dictionary already published."""
