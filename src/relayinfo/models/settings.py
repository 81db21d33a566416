"""Relay settings consumed by the NIP-11 document builder.

Each settings section is a frozen Pydantic model whose fields all carry
defaults, so a section omitted from the YAML file means "feature disabled".
Only the fields the builder reads are modelled; unknown keys in the
configuration file are ignored so that a full relay configuration can be
loaded as-is.

Cost fields are strict integers bounded with ``ge=0``: negative amounts and
non-integers such as YAML booleans are rejected here, once, and the builder
never re-validates them.

Examples:
    ```yaml
    info:
      relay_url: wss://relay.example.com/
      name: Example Relay
    authorization:
      nip42_auth: true
    pay_to_relay:
      enabled: true
      admission_cost: 5
    ```

See Also:
    [build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info]:
        The transformation that reads these settings.
    [load_yaml()][relayinfo.core.yaml.load_yaml]: YAML loader used by
        [Settings.from_yaml()][relayinfo.models.settings.Settings.from_yaml].
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from relayinfo.core.exceptions import ConfigurationError
from relayinfo.core.yaml import load_yaml

from .constants import VerifiedUsersMode


logger = logging.getLogger("relayinfo.models.settings")


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class InfoSettings(_Section):
    """Public identity of the relay."""

    relay_url: str | None = None
    name: str | None = None
    description: str | None = None
    pubkey: str | None = None
    contact: str | None = None
    relay_icon: str | None = None


class AuthorizationSettings(_Section):
    """Write authorization.

    Attributes:
        nip42_auth: Whether clients may authenticate with NIP-42.
        pubkey_whitelist: Public keys allowed to publish. ``None`` means no
            allow-list is configured; an empty list still counts as one.
    """

    nip42_auth: bool = False
    pubkey_whitelist: list[str] | None = None


class PayToRelaySettings(_Section):
    """Lightning pay-to-relay. Costs are in sats."""

    enabled: bool = False
    admission_cost: StrictInt = Field(
        default=4200, ge=0, description="One-time admission cost in sats"
    )
    cost_per_event: StrictInt = Field(
        default=0, ge=0, description="Publication cost per event in sats"
    )


class PayToRelayByCashuSettings(_Section):
    """Cashu ecash payments. ``cost_per_event`` is already in ``unit``."""

    enabled: bool = False
    cost_per_event: StrictInt = Field(default=0, ge=0)
    unit: str = "sat"
    mints: list[str] = Field(default_factory=list)
    kinds: list[StrictInt] | None = None


class VerifiedUsersSettings(_Section):
    """NIP-05 verified-user enforcement."""

    mode: VerifiedUsersMode = VerifiedUsersMode.DISABLED

    def is_enabled(self) -> bool:
        """Return True only when verification blocks unverified writers."""
        return self.mode is VerifiedUsersMode.ENABLED


class GrpcSettings(_Section):
    """External gRPC event-admission service."""

    restricts_write: bool = False


class Settings(_Section):
    """Immutable snapshot of the relay settings read by the document builder.

    See Also:
        [build_relay_info()][relayinfo.nips.nip11.builder.build_relay_info]:
            Derives the public document from this snapshot.
    """

    info: InfoSettings = Field(default_factory=InfoSettings)
    authorization: AuthorizationSettings = Field(default_factory=AuthorizationSettings)
    pay_to_relay: PayToRelaySettings = Field(default_factory=PayToRelaySettings)
    pay_to_relay_by_cashu: PayToRelayByCashuSettings = Field(
        default_factory=PayToRelayByCashuSettings
    )
    verified_users: VerifiedUsersSettings = Field(default_factory=VerifiedUsersSettings)
    grpc: GrpcSettings = Field(default_factory=GrpcSettings)

    @property
    def payments_enabled(self) -> bool:
        """True when any payment mechanism is enabled."""
        return self.pay_to_relay.enabled or self.pay_to_relay_by_cashu.enabled

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a raw settings mapping.

        Raises:
            ConfigurationError: If any section fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid relay settings: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate settings from a YAML file.

        Delegates to [load_yaml()][relayinfo.core.yaml.load_yaml] for safe
        parsing, then to
        [from_dict()][relayinfo.models.settings.Settings.from_dict].

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails validation.
        """
        try:
            data = load_yaml(config_path)
        except (OSError, TypeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"cannot load {config_path}: {e}") from e
        logger.debug("settings_loaded path=%s sections=%s", config_path, sorted(data))
        return cls.from_dict(data)
