"""
FieldCheck Localization
=======================

Printf-style message catalogs and the localizer that renders them.
"""

from fieldcheck.i18n.lang import SUPPORTED_LANGUAGES, load_catalog
from fieldcheck.i18n.localizer import (
    DEFAULT_LANGUAGE,
    MessageLocalizer,
    get_default_language,
    set_default_language,
    supported_languages,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "MessageLocalizer",
    "get_default_language",
    "set_default_language",
    "supported_languages",
    "load_catalog",
]
