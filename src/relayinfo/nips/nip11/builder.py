"""
Derivation of the public NIP-11 document from relay settings.

[build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info] is a
pure, total function: the same settings always produce an equal document,
the settings are never mutated, and missing optional settings only ever
cause the dependent output field to be absent.

Fee rules:

* Lightning costs are configured in sats and published in ``msats``
  (multiplied by 1000).
* The admission fee is listed only when pay-to-relay is enabled with a
  positive admission cost.
* Publication fees list the Lightning per-event fee (when positive) followed
  by the Cashu per-event fee (when Cashu payments are enabled).
* ``payment_url`` and ``fees`` are absent unless at least one payment
  mechanism is enabled.

See Also:
    [Settings][relayinfo.models.settings.Settings]: The input snapshot.
    [RelayInfo][relayinfo.nips.nip11.data.RelayInfo]: The output document.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version
from typing import TYPE_CHECKING

from rfc3986 import uri_reference
from rfc3986.exceptions import RFC3986Exception
from rfc3986.validators import Validator

from relayinfo.models.constants import (
    BASE_SUPPORTED_NIPS,
    HTTP_SCHEMES,
    MSATS_PER_SAT,
    PAYMENT_PATH,
    PRIMARY_UNIT,
    SOFTWARE,
    Nip,
)

from .data import CashuPaymentMethod, Fee, Fees, Limitation, RelayInfo


if TYPE_CHECKING:
    from relayinfo.models.settings import Settings


logger = logging.getLogger("relayinfo.nips.nip11")


def _installed_version() -> str | None:
    try:
        return _get_version("relayinfo")
    except PackageNotFoundError:
        return None


# Resolved once per process; callers may inject their own via ``version=``.
PACKAGE_VERSION: str | None = _installed_version()


def supported_nips(settings: Settings) -> list[int]:
    """Return the sorted, duplicate-free NIP list advertised for *settings*.

    Every conditionally supported NIP is collected first; the list is
    sorted once at the end.
    """
    nips = [int(n) for n in BASE_SUPPORTED_NIPS]
    if settings.authorization.nip42_auth:
        nips.append(int(Nip.CLIENT_AUTHENTICATION))
    return sorted(set(nips))


def build_limitation(settings: Settings) -> Limitation:
    """Compute the advertised write limitations.

    Writes are restricted whenever payment is required, NIP-05 verification
    is enforced, a pubkey allow-list exists, or an external gRPC service
    gates event admission.
    """
    payment_required = settings.payments_enabled
    restricted_writes = (
        payment_required
        or settings.verified_users.is_enabled()
        or settings.authorization.pubkey_whitelist is not None
        or settings.grpc.restricts_write
    )
    return Limitation(payment_required=payment_required, restricted_writes=restricted_writes)


def build_fees(settings: Settings) -> Fees | None:
    """Compute the fee schedule, or ``None`` when no payment is enabled."""
    if not settings.payments_enabled:
        return None

    lightning = settings.pay_to_relay
    cashu = settings.pay_to_relay_by_cashu

    admission: list[Fee] = []
    if lightning.enabled and lightning.admission_cost > 0:
        admission.append(
            Fee(amount=lightning.admission_cost * MSATS_PER_SAT, unit=PRIMARY_UNIT)
        )

    publication: list[Fee] = []
    if lightning.enabled and lightning.cost_per_event > 0:
        publication.append(
            Fee(amount=lightning.cost_per_event * MSATS_PER_SAT, unit=PRIMARY_UNIT)
        )
    if cashu.enabled:
        publication.append(
            Fee(
                amount=cashu.cost_per_event,
                unit=cashu.unit,
                method=CashuPaymentMethod(mints=list(cashu.mints)),
                kinds=list(cashu.kinds) if cashu.kinds is not None else None,
            )
        )

    return Fees(admission=admission or None, publication=publication or None)


def derive_payment_url(relay_url: str) -> str | None:
    """Derive the HTTP(S) payment page URL from a WebSocket relay URL.

    Only the scheme component is rewritten (``ws`` -> ``http``,
    ``wss`` -> ``https``); ``join`` is appended to the path. Query and
    fragment are dropped.

    Args:
        relay_url: The relay's public ``ws://`` or ``wss://`` URL.

    Returns:
        The payment URL, or ``None`` if *relay_url* is not a valid
        WebSocket URL.

    Examples:
        ```python
        derive_payment_url("wss://relay.example/")       # 'https://relay.example/join'
        derive_payment_url("ws://relay.example/nostr")   # 'http://relay.example/nostr/join'
        derive_payment_url("https://relay.example/")     # None
        ```
    """
    uri = uri_reference(relay_url.strip()).normalize()
    validator = (
        Validator()
        .require_presence_of("scheme", "host")
        .allow_schemes(*HTTP_SCHEMES)
        .check_validity_of("scheme", "host", "port", "path")
    )
    try:
        validator.validate(uri)
    except RFC3986Exception as e:
        logger.debug("payment_url_skipped relay_url=%s reason=%s", relay_url, e)
        return None
    if not uri.host:
        return None

    path = uri.path or ""
    if not path.endswith("/"):
        path += "/"
    return uri.copy_with(
        scheme=HTTP_SCHEMES[uri.scheme],
        path=path + PAYMENT_PATH,
        query=None,
        fragment=None,
    ).unsplit()


def build_relay_info(
    settings: Settings,
    *,
    version: str | None = PACKAGE_VERSION,
) -> RelayInfo:
    """Derive the public NIP-11 document from relay settings.

    Args:
        settings: Immutable relay settings snapshot.
        version: Software version to advertise. Defaults to the installed
            package version; ``None`` leaves the field absent.

    Returns:
        A new, frozen [RelayInfo][relayinfo.nips.nip11.data.RelayInfo].
    """
    info = settings.info

    payment_url = None
    if settings.pay_to_relay.enabled and info.relay_url is not None:
        payment_url = derive_payment_url(info.relay_url)

    document = RelayInfo(
        id=info.relay_url,
        name=info.name,
        description=info.description,
        pubkey=info.pubkey,
        contact=info.contact,
        icon=info.relay_icon,
        supported_nips=supported_nips(settings),
        software=SOFTWARE,
        version=version,
        limitation=build_limitation(settings),
        payment_url=payment_url,
        fees=build_fees(settings),
    )
    logger.debug(
        "relay_info_built nips=%s payment_required=%s fees=%s",
        len(document.supported_nips or ()),
        settings.payments_enabled,
        document.fees is not None,
    )
    return document
