"""Relay settings and shared constants.

Attributes:
    Settings: Frozen snapshot of the relay settings the document builder
        reads, loadable from YAML via
        [Settings.from_yaml()][relayinfo.models.settings.Settings.from_yaml].
    VerifiedUsersMode: NIP-05 enforcement mode (enabled, passive, disabled).
    PaymentMethodType: Discriminant values for fee payment methods.

See Also:
    [relayinfo.nips.nip11][]: Document models and the builder that consume
        these settings.
"""

from .constants import (
    BASE_SUPPORTED_NIPS,
    PRIMARY_UNIT,
    SOFTWARE,
    Nip,
    PaymentMethodType,
    VerifiedUsersMode,
)
from .settings import (
    AuthorizationSettings,
    GrpcSettings,
    InfoSettings,
    PayToRelayByCashuSettings,
    PayToRelaySettings,
    Settings,
    VerifiedUsersSettings,
)


__all__ = [
    "BASE_SUPPORTED_NIPS",
    "PRIMARY_UNIT",
    "SOFTWARE",
    "AuthorizationSettings",
    "GrpcSettings",
    "InfoSettings",
    "Nip",
    "PayToRelayByCashuSettings",
    "PayToRelaySettings",
    "PaymentMethodType",
    "Settings",
    "VerifiedUsersMode",
    "VerifiedUsersSettings",
]
