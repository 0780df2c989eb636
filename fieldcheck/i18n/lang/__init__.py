"""
Message catalogs, one module per language code.

Each module defines ``MESSAGES``: rule name -> printf-style template
whose first placeholder is the field name and the rest are the rule
attributes.
"""

from __future__ import annotations

import importlib
from typing import Dict, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "fr", "es")

_catalogs: Dict[str, Dict[str, str]] = {}


def load_catalog(language: str) -> Dict[str, str]:
    """Import and cache the catalog for ``language``."""
    if language not in SUPPORTED_LANGUAGES:
        raise LookupError(language)

    if language not in _catalogs:
        module = importlib.import_module(f"{__name__}.{language}")
        _catalogs[language] = dict(module.MESSAGES)

    return _catalogs[language]
