"""Shared fixtures for NIP-11 tests."""

from typing import Any

import pytest


@pytest.fixture
def published_document() -> dict[str, Any]:
    """A NIP-11 document as served by a paid relay with Cashu support."""
    return {
        "id": "wss://relay.example/",
        "name": "Example Relay",
        "supported_nips": [1, 2, 9, 11, 12, 15, 16, 20, 22, 33, 40, 42],
        "software": "https://git.sr.ht/~gheartsfield/nostr-rs-relay",
        "version": "0.8.13",
        "limitation": {"payment_required": True, "restricted_writes": True},
        "payment_url": "https://relay.example/join",
        "fees": {
            "admission": [{"amount": 1000000, "unit": "msats"}],
            "publication": [
                {
                    "amount": 2,
                    "unit": "sat",
                    "method": {"type": "cashu", "mints": ["https://mint.example"]},
                    "kinds": [1, 7],
                }
            ],
        },
    }
