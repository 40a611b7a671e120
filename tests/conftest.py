"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and marker
registration. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "until.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_until_env(request, monkeypatch):
    """Clear UNTIL_* env vars so each test starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("UNTIL_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Adapters exercised together on a live event loop",
        "contract: Machine-checkable invariants of the public surface",
        "allow_dotenv: Let python-dotenv read .env files",
        "allow_env_pollution: Keep UNTIL_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
