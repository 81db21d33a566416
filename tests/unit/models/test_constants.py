"""Unit tests for shared constants."""

from relayinfo.models.constants import (
    BASE_SUPPORTED_NIPS,
    HTTP_SCHEMES,
    MSATS_PER_SAT,
    PRIMARY_UNIT,
    Nip,
    PaymentMethodType,
    VerifiedUsersMode,
)


class TestConstants:
    def test_baseline_nips(self):
        assert list(BASE_SUPPORTED_NIPS) == [1, 2, 9, 11, 12, 15, 16, 20, 22, 33, 40]

    def test_baseline_sorted_unique(self):
        assert list(BASE_SUPPORTED_NIPS) == sorted(set(BASE_SUPPORTED_NIPS))

    def test_auth_nip_not_in_baseline(self):
        assert Nip.CLIENT_AUTHENTICATION == 42
        assert Nip.CLIENT_AUTHENTICATION not in BASE_SUPPORTED_NIPS

    def test_units(self):
        assert PRIMARY_UNIT == "msats"
        assert MSATS_PER_SAT == 1000

    def test_schemes(self):
        assert HTTP_SCHEMES == {"ws": "http", "wss": "https"}


class TestEnums:
    def test_verified_users_values(self):
        assert {m.value for m in VerifiedUsersMode} == {"enabled", "passive", "disabled"}

    def test_payment_method_type(self):
        assert PaymentMethodType.CASHU == "cashu"
