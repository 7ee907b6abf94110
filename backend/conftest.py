"""Root conftest: load test environment variables and configure structlog for tests."""

import os
from pathlib import Path

import pytest
import structlog
from dotenv import dotenv_values, load_dotenv

_ENV_FILE = Path(__file__).resolve().parent.parent / ".env.tests"
_TEST_ENV = dotenv_values(_ENV_FILE)
_SETTINGS_ENV_PREFIXES = ("VERSION_", "SERVER_")

load_dotenv(_ENV_FILE, override=True)

# Route structlog through stdlib logging so caplog sees resolver log lines.
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    """Drop VERSION_*/SERVER_* variables inherited from the shell; .env.tests values stay."""
    for name in list(os.environ):
        if name.upper().startswith(_SETTINGS_ENV_PREFIXES) and name not in _TEST_ENV:
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Prevent context leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
