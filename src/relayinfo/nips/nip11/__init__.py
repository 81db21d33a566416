"""NIP-11 Relay Information Document.

Implements the publishing side of
[NIP-11](https://github.com/nostr-protocol/nips/blob/master/11.md): the
document a relay serves to clients that request ``application/nostr+json``.
[build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info] derives it
from relay settings; ``RelayInfo.parse()`` reads one back tolerantly.

Model hierarchy:

```text
RelayInfo                                Top-level document
+-- id, name, description, pubkey, contact, icon
+-- supported_nips: list[int]            Sorted, duplicate-free
+-- software, version
+-- limitation: Limitation
|   +-- payment_required, restricted_writes
+-- payment_url
+-- fees: Fees
    +-- admission / publication
        +-- list[Fee]
            +-- amount, unit, kinds
            +-- method: PaymentMethod    Discriminated on ``type``
```
"""

from .builder import (
    PACKAGE_VERSION,
    build_fees,
    build_limitation,
    build_relay_info,
    derive_payment_url,
    supported_nips,
)
from .data import (
    CashuPaymentMethod,
    Fee,
    Fees,
    Limitation,
    PaymentMethod,
    RelayInfo,
    parse_payment_method,
)


__all__ = [
    "PACKAGE_VERSION",
    "CashuPaymentMethod",
    "Fee",
    "Fees",
    "Limitation",
    "PaymentMethod",
    "RelayInfo",
    "build_fees",
    "build_limitation",
    "build_relay_info",
    "derive_payment_url",
    "parse_payment_method",
    "supported_nips",
]
