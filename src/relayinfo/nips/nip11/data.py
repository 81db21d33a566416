"""
NIP-11 relay information document models.

Defines the typed, frozen Pydantic models a relay publishes at its NIP-11
endpoint: the top-level [RelayInfo][relayinfo.nips.nip11.data.RelayInfo]
document and its nested limitation, fee schedule, fee and payment method
objects.

Optional fields hold ``None`` when absent and are omitted from
``to_dict()`` / ``to_json()`` output entirely, never emitted as ``null``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Literal

from pydantic import Field, StrictBool, StrictInt, field_validator

from relayinfo.models.constants import PaymentMethodType
from relayinfo.nips.base import BaseData
from relayinfo.nips.parsing import FieldSpec, parse_fields


if TYPE_CHECKING:
    from relayinfo.models.settings import Settings


class CashuPaymentMethod(BaseData):
    """Cashu ecash payment, redeemable at any of the listed mints.

    Serialized with an explicit ``type`` discriminant:

    ```json
    {"type": "cashu", "mints": ["https://mint.example"]}
    ```
    """

    type: Literal["cashu"] = "cashu"
    mints: list[str] = Field(default_factory=list)

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(str_list_fields=frozenset({"mints"}))


# Single variant today. A second variant turns this into
# ``Annotated[CashuPaymentMethod | Other, Field(discriminator="type")]``
# and gets an entry in ``_PAYMENT_METHODS``.
PaymentMethod = CashuPaymentMethod

_PAYMENT_METHODS: dict[str, type[BaseData]] = {
    PaymentMethodType.CASHU: CashuPaymentMethod,
}


def parse_payment_method(data: Any) -> dict[str, Any] | None:
    """Parse a payment method object, returning ``None`` for unknown variants.

    Accepts the discriminated form (``{"type": "cashu", ...}``) and the
    externally tagged form published by older relays
    (``{"Cashu": {"mints": [...]}}``).

    Args:
        data: Raw ``method`` value from a fee entry.

    Returns:
        Constructor arguments for the matching variant, or ``None`` when
        the value is not an object or names a variant this version does not
        know.
    """
    if not isinstance(data, dict):
        return None

    tag = data.get("type")
    body: Any = data
    if not isinstance(tag, str) and len(data) == 1:
        ((tag, body),) = data.items()
    if not isinstance(tag, str):
        return None

    variant = _PAYMENT_METHODS.get(tag.lower())
    if variant is None:
        return None
    return {**variant.parse(body), "type": tag.lower()}


class Fee(BaseData):
    """Single fee entry (admission or publication).

    Attributes:
        amount: Amount in the smallest denomination of ``unit``.
        unit: Currency unit label, e.g. ``msats`` or ``sat``.
        method: Payment mechanism; absent for the relay's primary
            (Lightning) billing.
        kinds: Event kinds the fee applies to; absent means all kinds.
    """

    amount: StrictInt = Field(ge=0)
    unit: str
    method: PaymentMethod | None = None
    kinds: list[StrictInt] | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        int_fields=frozenset({"amount"}),
        str_fields=frozenset({"unit"}),
        int_list_fields=frozenset({"kinds"}),
    )

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse a fee entry, keeping the fee even if its method is unknown.

        Entries without a non-negative integer ``amount`` and a string
        ``unit`` cannot be represented and parse to an empty dict.
        """
        if not isinstance(data, dict):
            return {}
        result = parse_fields(data, cls._FIELD_SPEC)
        if "unit" not in result or result.get("amount", -1) < 0:
            return {}
        method = parse_payment_method(data.get("method"))
        if method is not None:
            result["method"] = method
        return result


class Fees(BaseData):
    """Fee schedule. Empty categories are stored as ``None``."""

    admission: list[Fee] | None = None
    publication: list[Fee] | None = None

    @field_validator("admission", "publication")
    @classmethod
    def _empty_as_absent(cls, value: list[Fee] | None) -> list[Fee] | None:
        return value or None

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse fee categories, dropping unreadable entries and empty lists."""
        if not isinstance(data, dict):
            return {}
        result: dict[str, Any] = {}
        for key in ("admission", "publication"):
            if isinstance(data.get(key), list):
                entries = [Fee.parse(e) for e in data[key]]
                entries = [e for e in entries if e]
                if entries:
                    result[key] = entries
        return result


class Limitation(BaseData):
    """Write restrictions advertised to clients.

    Both fields are optional on the wire;
    [build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info]
    always sets both.
    """

    payment_required: StrictBool | None = None
    restricted_writes: StrictBool | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        bool_fields=frozenset({"payment_required", "restricted_writes"}),
    )


class RelayInfo(BaseData):
    """Complete NIP-11 relay information document.

    ``supported_nips`` is kept sorted and duplicate-free whatever order it is
    supplied in.

    Examples:
        ```python
        info = RelayInfo.from_settings(Settings.from_yaml("config/relay.yaml"))
        info.to_json()
        # '{"id":"wss://relay.example.com/","supported_nips":[1,2,9,...],...}'
        ```
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    pubkey: str | None = None
    contact: str | None = None
    icon: str | None = None
    supported_nips: list[StrictInt] | None = None
    software: str | None = None
    version: str | None = None
    limitation: Limitation | None = None
    payment_url: str | None = None
    fees: Fees | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        str_fields=frozenset(
            {
                "id",
                "name",
                "description",
                "pubkey",
                "contact",
                "icon",
                "software",
                "version",
                "payment_url",
            }
        ),
        int_list_fields=frozenset({"supported_nips"}),
    )

    @field_validator("supported_nips")
    @classmethod
    def _sorted_unique(cls, value: list[int] | None) -> list[int] | None:
        if value is None:
            return None
        return sorted(set(value))

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse a published document, including nested limitation and fees.

        Args:
            data: Raw JSON object fetched from a relay.

        Returns:
            Validated dictionary suitable for ``from_dict()``.
        """
        if not isinstance(data, dict):
            return {}
        result = parse_fields(data, cls._FIELD_SPEC)

        limitation = Limitation.parse(data.get("limitation"))
        if limitation:
            result["limitation"] = limitation

        # An empty fees object still signals that a payment mechanism exists.
        if isinstance(data.get("fees"), dict):
            result["fees"] = Fees.parse(data["fees"])
        return result

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> RelayInfo:
        """Build the document for *settings*.

        Shorthand for
        [build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info];
        keyword arguments are forwarded unchanged.
        """
        from .builder import build_relay_info  # noqa: PLC0415

        return build_relay_info(settings, **kwargs)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to a JSON string, omitting absent fields."""
        return self.model_dump_json(exclude_none=True, indent=indent)


__all__ = [
    "CashuPaymentMethod",
    "Fee",
    "Fees",
    "Limitation",
    "PaymentMethod",
    "RelayInfo",
    "parse_payment_method",
]
