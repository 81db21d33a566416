"""Unit tests for the BaseData model base class."""

from typing import ClassVar

import pytest
from pydantic import ValidationError

from relayinfo.nips.base import BaseData
from relayinfo.nips.parsing import FieldSpec


class _Sample(BaseData):
    name: str | None = None
    count: int | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        str_fields=frozenset({"name"}),
        int_fields=frozenset({"count"}),
    )


class TestBaseData:
    """Test the shared from_dict / parse / to_dict contract."""

    def test_parse_uses_field_spec(self):
        assert _Sample.parse({"name": "x", "count": "2", "extra": 1}) == {"name": "x"}

    def test_parse_non_dict(self):
        assert _Sample.parse(None) == {}
        assert _Sample.parse([("name", "x")]) == {}

    def test_from_dict(self):
        assert _Sample.from_dict({"name": "x", "count": 2}) == _Sample(name="x", count=2)

    def test_to_dict_excludes_none(self):
        assert _Sample(name="x").to_dict() == {"name": "x"}

    def test_frozen(self):
        sample = _Sample(name="x")
        with pytest.raises(ValidationError):
            sample.name = "y"  # type: ignore[misc]
