"""
Pytest configuration and shared fixtures for relayinfo tests.

Provides:
- Logging configuration
- Settings fixtures for the common payment configurations
- A writer fixture for YAML settings files
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from relayinfo.models.settings import Settings


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def default_settings() -> Settings:
    """Settings with every section at its defaults (no payments, no auth)."""
    return Settings()


@pytest.fixture
def identity() -> dict[str, Any]:
    """Fully populated ``info`` section."""
    return {
        "relay_url": "wss://relay.example/",
        "name": "Example Relay",
        "description": "A relay for unit tests",
        "pubkey": "a" * 64,
        "contact": "mailto:admin@relay.example",
        "relay_icon": "https://relay.example/icon.png",
    }


@pytest.fixture
def lightning_settings(identity: dict[str, Any]) -> Settings:
    """Pay-to-relay enabled with an admission fee and a per-event fee."""
    return Settings.from_dict(
        {
            "info": identity,
            "pay_to_relay": {"enabled": True, "admission_cost": 5, "cost_per_event": 2},
        }
    )


@pytest.fixture
def cashu_settings() -> Settings:
    """Cashu payments enabled, pay-to-relay disabled."""
    return Settings.from_dict(
        {
            "info": {"relay_url": "wss://relay.example/"},
            "pay_to_relay_by_cashu": {
                "enabled": True,
                "cost_per_event": 3,
                "unit": "sat",
                "mints": ["https://mint.example"],
            },
        }
    )


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper that dumps data to a YAML file and returns its path."""

    def _write(data: Any, name: str = "relay.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write
