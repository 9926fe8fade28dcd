"""Shared pytest fixtures for installer-assets tests.

This module provides common fixtures used across unit tests.
"""

from __future__ import annotations

import sys
from collections.abc import Generator

import pytest
import structlog

from installer_assets import version
from installer_assets.openshiftinstall.configmap import INVOKER_ENV_VAR


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, structlog may use different processors depending on
    test execution order (the CLI configures stdlib logging).
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture(autouse=True)
def clean_invoker_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure OPENSHIFT_INSTALL_INVOKER from the outer shell never leaks in."""
    monkeypatch.delenv(INVOKER_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def reset_installer_version() -> Generator[None, None, None]:
    """Restore the process-wide installer version after each test."""
    yield
    version.reset()


@pytest.fixture
def release_version() -> Generator[str, None, None]:
    """Set the process-wide installer version to v1.2.3.

    Yields:
        The version string.
    """
    version.set_raw("v1.2.3")
    yield "v1.2.3"
    version.reset()
