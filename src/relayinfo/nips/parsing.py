"""
Declarative field parsing for NIP data models.

Each model declares a [FieldSpec][relayinfo.nips.parsing.FieldSpec]
describing which fields should be parsed as which types;
[parse_fields][relayinfo.nips.parsing.parse_fields] then applies the spec
to raw dictionaries, silently dropping invalid values.

Supported field types: ``int``, ``bool``, ``str``, ``list[int]``, ``list[str]``.

Note:
    No exceptions are raised for invalid data. Values that fail type checks
    are excluded from the result dictionary, so a document published by a
    newer or non-conformant relay still yields every field that is readable.
    List items are filtered individually; an empty list survives, since
    ``"kinds": []`` and an absent ``kinds`` mean different things.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


_SKIP: Any = object()


def is_int(value: Any) -> bool:
    """True for ``int`` values, excluding ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_int(value: Any) -> Any:
    return value if is_int(value) else _SKIP


def _parse_bool(value: Any) -> Any:
    return value if isinstance(value, bool) else _SKIP


def _parse_str(value: Any) -> Any:
    return value if isinstance(value, str) else _SKIP


def _parse_list(value: Any, check: Callable[[Any], bool]) -> Any:
    if not isinstance(value, list):
        return _SKIP
    items = [v for v in value if check(v)]
    if items or not value:
        return items
    return _SKIP


def _parse_str_list(value: Any) -> Any:
    return _parse_list(value, lambda v: isinstance(v, str))


def _parse_int_list(value: Any) -> Any:
    return _parse_list(value, is_int)


_FIELD_PARSERS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("int_fields", _parse_int),
    ("bool_fields", _parse_bool),
    ("str_fields", _parse_str),
    ("str_list_fields", _parse_str_list),
    ("int_list_fields", _parse_int_list),
)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Declarative specification of expected field types for parsing.

    Each attribute is a frozenset of field names that should be parsed
    as the corresponding Python type. Fields not listed in any set are
    ignored during parsing.

    Note:
        Python's ``bool`` is a subclass of ``int``, so ``int_fields`` parsing
        explicitly excludes ``bool`` values.
    """

    int_fields: frozenset[str] = field(default_factory=frozenset)
    bool_fields: frozenset[str] = field(default_factory=frozenset)
    str_fields: frozenset[str] = field(default_factory=frozenset)
    str_list_fields: frozenset[str] = field(default_factory=frozenset)
    int_list_fields: frozenset[str] = field(default_factory=frozenset)


def parse_fields(data: dict[str, Any], spec: FieldSpec) -> dict[str, Any]:
    """Parse a dictionary according to a ``FieldSpec``, dropping invalid values.

    Args:
        data: Raw dictionary to parse.
        spec: [FieldSpec][relayinfo.nips.parsing.FieldSpec] type specification.

    Returns:
        A new dictionary containing only valid, type-checked fields.
    """
    dispatch: dict[str, Callable[[Any], Any]] = {}
    for attr_name, parser in _FIELD_PARSERS:
        for name in getattr(spec, attr_name):
            dispatch[name] = parser

    result: dict[str, Any] = {}
    for key, value in data.items():
        handler = dispatch.get(key)
        if handler is not None:
            parsed = handler(value)
            if parsed is not _SKIP:
                result[key] = parsed

    return result


__all__ = ["FieldSpec", "is_int", "parse_fields"]
