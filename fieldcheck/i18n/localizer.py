"""
FieldCheck Message Localizer
============================

Renders rule names into human-readable messages.

The language belongs to the localizer instance, so validators
rendering in different languages can coexist. When no language is
given, the configured default (``validation.language``) is used.

Example:
    localizer = MessageLocalizer("fr")
    localizer.render("minLength", "password", [8])
    # "Le champ password doit contenir plus de 8 caractères"
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from fieldcheck.core.config import get_config
from fieldcheck.core.exceptions import UnsupportedLanguageError
from fieldcheck.i18n.lang import SUPPORTED_LANGUAGES, load_catalog
from fieldcheck.utils.logger import get_logger

DEFAULT_LANGUAGE = "en"
FALLBACK_RULE = "invalid"

logger = get_logger("fieldcheck.i18n")


def supported_languages() -> Tuple[str, ...]:
    return SUPPORTED_LANGUAGES


def _check_language(language: str) -> str:
    normalized = str(language).strip().lower()
    if normalized not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(language, SUPPORTED_LANGUAGES)
    return normalized


def get_default_language() -> str:
    """Language used by localizers built without an explicit one."""
    return get_config().get("validation.language", DEFAULT_LANGUAGE)


def set_default_language(language: str) -> None:
    """
    Change the default language.

    Raises:
        UnsupportedLanguageError: No catalog for ``language``
    """
    get_config().set("validation.language", _check_language(language))


class MessageLocalizer:
    """
    Rule message renderer for a single language.

    Templates are looked up in the localizer's language, then in
    English, then the generic ``invalid`` template is used.
    """

    def __init__(self, language: Optional[str] = None) -> None:
        """
        Args:
            language: Language code; the configured default if omitted

        Raises:
            UnsupportedLanguageError: No catalog for ``language``
        """
        self._language = _check_language(language if language is not None else get_default_language())
        self._messages = load_catalog(self._language)

    @property
    def language(self) -> str:
        return self._language

    def with_language(self, language: str) -> MessageLocalizer:
        """Create a localizer for another language."""
        return MessageLocalizer(language)

    def template(self, rule: str) -> str:
        """Get the message template for ``rule``."""
        if rule in self._messages:
            return self._messages[rule]

        fallback = load_catalog(DEFAULT_LANGUAGE)
        if rule in fallback:
            logger.warning(
                "Missing translation, using English",
                rule=rule,
                language=self._language,
            )
            return fallback[rule]

        logger.warning("Unknown rule message", rule=rule, language=self._language)
        return self._messages.get(FALLBACK_RULE, fallback[FALLBACK_RULE])

    def render(
        self,
        rule: str,
        field: str,
        attributes: Sequence[Any] = (),
    ) -> str:
        """
        Render the message for a failed rule.

        Args:
            rule: Rule name
            field: Field name shown in the message
            attributes: Rule parameters, in template order

        Returns:
            Rendered message
        """
        template = self.template(rule)
        try:
            return template % (field, *attributes)
        except (TypeError, ValueError) as exc:
            logger.warning(
                "Message parameters do not fit template",
                rule=rule,
                language=self._language,
                error=str(exc),
            )
            return self.template(FALLBACK_RULE) % (field,)

    def __repr__(self) -> str:
        return f"MessageLocalizer(language={self._language!r})"
