"""
Test configuration and fixtures for FieldCheck tests.
"""

import io
import os
from typing import Any, Dict

import pytest

from fieldcheck.core.config import reset_config
from fieldcheck.i18n.localizer import MessageLocalizer
from fieldcheck.utils.logger import configure_logging
from fieldcheck.validation.validator import Validator


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the built-in defaults."""
    for name in [key for key in os.environ if key.startswith("FIELDCHECK_")]:
        monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def log_stream() -> io.StringIO:
    """Capture log output at DEBUG level."""
    stream = io.StringIO()
    configure_logging(level="DEBUG", stream=stream)
    yield stream
    configure_logging(level="WARNING")


@pytest.fixture
def signup_data() -> Dict[str, Any]:
    """A typical parsed signup form."""
    return {
        "name": "Jane",
        "slug": "jane-doe",
        "age": 34,
        "website": "https://jane.dev/about",
        "user": {
            "email": "jane.doe@domain.org",
            "address": {"city": "Lyon", "zip": None},
        },
        "password": "s3cret!",
        "password_confirm": "s3cret!",
        "tags": ["a", "b"],
    }


@pytest.fixture
def make_validator():
    """Factory building validators with English messages."""

    def _make(params: Any = None, **options: Any) -> Validator:
        options.setdefault("localizer", MessageLocalizer("en"))
        return Validator(params, **options)

    return _make
