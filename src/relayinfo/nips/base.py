"""
Shared base class for NIP document models.

[BaseData][relayinfo.nips.base.BaseData] is a frozen Pydantic model with
three entry points:

* ``from_dict()`` -- strict validation, raises on bad input;
* ``parse()`` -- tolerant, returns only the fields that type-check
  according to the class ``_FIELD_SPEC``;
* ``to_dict()`` -- serialization that omits ``None`` fields entirely.

See Also:
    [relayinfo.nips.parsing][relayinfo.nips.parsing]: The declarative field
        parsing engine used by ``parse()``.
    [relayinfo.nips.nip11.data][relayinfo.nips.nip11.data]: NIP-11 models
        that extend this base class.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from .parsing import FieldSpec, parse_fields


class BaseData(BaseModel):
    """Base class for NIP data models with declarative field parsing.

    Subclasses declare a ``_FIELD_SPEC`` class variable and may override
    ``parse()`` for nested objects.

    Note:
        All ``BaseData`` subclasses use ``frozen=True``: a document is
        immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec()

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse arbitrary data into validated constructor arguments.

        Args:
            data: Raw dictionary from an external source.

        Returns:
            A cleaned dictionary containing only valid fields.
        """
        if not isinstance(data, dict):
            return {}
        return parse_fields(data, cls._FIELD_SPEC)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an instance from a dictionary with strict validation."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary, excluding ``None`` values."""
        return self.model_dump(exclude_none=True, mode="json")
