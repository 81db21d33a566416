"""Nostr Implementation Possibilities -- relay document models and builders.

Depends on [relayinfo.models][relayinfo.models] for settings and constants.
Performs no I/O.

Attributes:
    BaseData: Frozen Pydantic base with ``from_dict()`` / ``parse()`` /
        ``to_dict()`` shared by every document model.
    RelayInfo: The NIP-11 relay information document.
    build_relay_info: Derives a [RelayInfo][relayinfo.nips.nip11.data.RelayInfo]
        from relay [Settings][relayinfo.models.settings.Settings].
"""

from relayinfo.nips.base import BaseData
from relayinfo.nips.nip11 import RelayInfo, build_relay_info


__all__ = [
    "BaseData",
    "RelayInfo",
    "build_relay_info",
]
