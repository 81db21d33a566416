"""Shared constants for the relay information document.

Defines the fixed values advertised in every document (software identifier,
baseline NIP list, primary fee unit) and the enumerations shared by the
settings and document models. Placing them here avoids circular imports
between [relayinfo.models.settings][] and [relayinfo.nips.nip11][].
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Final


class Nip(IntEnum):
    """NIP numbers referenced by the document builder."""

    BASIC_PROTOCOL = 1
    FOLLOW_LIST = 2
    EVENT_DELETION = 9
    RELAY_INFORMATION = 11
    GENERIC_TAG_QUERIES = 12
    END_OF_STORED_EVENTS = 15
    EVENT_TREATMENT = 16
    COMMAND_RESULTS = 20
    CREATED_AT_LIMITS = 22
    PARAMETERIZED_REPLACEABLE = 33
    EXPIRATION_TIMESTAMP = 40
    CLIENT_AUTHENTICATION = 42


BASE_SUPPORTED_NIPS: Final[tuple[int, ...]] = (
    Nip.BASIC_PROTOCOL,
    Nip.FOLLOW_LIST,
    Nip.EVENT_DELETION,
    Nip.RELAY_INFORMATION,
    Nip.GENERIC_TAG_QUERIES,
    Nip.END_OF_STORED_EVENTS,
    Nip.EVENT_TREATMENT,
    Nip.COMMAND_RESULTS,
    Nip.CREATED_AT_LIMITS,
    Nip.PARAMETERIZED_REPLACEABLE,
    Nip.EXPIRATION_TIMESTAMP,
)

SOFTWARE: Final[str] = "https://git.sr.ht/~gheartsfield/nostr-rs-relay"

PRIMARY_UNIT: Final[str] = "msats"
MSATS_PER_SAT: Final[int] = 1000

PAYMENT_PATH: Final[str] = "join"

# Relay WebSocket scheme -> HTTP scheme serving the payment page
HTTP_SCHEMES: Final[dict[str, str]] = {"ws": "http", "wss": "https"}


class VerifiedUsersMode(StrEnum):
    """NIP-05 verified-user enforcement mode.

    Attributes:
        ENABLED: Only events from verified authors are accepted.
        PASSIVE: Verification runs but does not block writes.
        DISABLED: No verification.
    """

    ENABLED = "enabled"
    PASSIVE = "passive"
    DISABLED = "disabled"


class PaymentMethodType(StrEnum):
    """Discriminant values for [PaymentMethod][relayinfo.nips.nip11.data.PaymentMethod]."""

    CASHU = "cashu"
