"""
Tests for the bank registry and lookups
"""

import pytest
from dataclasses import FrozenInstanceError

from nuban.banks import (
    Bank, BankProperty, NIGERIAN_BANKS, WEIGHTED_NIGERIAN_BANKS, get_bank
)


class TestBank:
    """Test Bank record invariants"""

    def test_bank_creation(self):
        bank = Bank(id=1, slug="zenith_bank", name="ZENITH BANK", code="000015",
                    old_code="057", weight=1)

        assert bank.code == "000015"
        assert bank.old_code == "057"
        assert bank.weight == 1

    def test_optional_fields_default_to_none(self):
        bank = Bank(id=1, slug="kuda", name="KUDA", code="090267")
        assert bank.old_code is None
        assert bank.weight is None

    def test_bank_is_immutable(self):
        bank = Bank(id=1, slug="kuda", name="KUDA", code="090267")
        with pytest.raises(FrozenInstanceError):
            bank.code = "000001"

    def test_code_must_be_six_digits(self):
        with pytest.raises(ValueError, match="exactly 6 digits"):
            Bank(id=1, slug="x", name="X", code="057")
        with pytest.raises(ValueError):
            Bank(id=1, slug="x", name="X", code="00001A")

    def test_old_code_must_be_three_digits(self):
        with pytest.raises(ValueError, match="exactly 3 digits"):
            Bank(id=1, slug="x", name="X", code="000015", old_code="0570")

    def test_to_dict_omits_missing_fields(self):
        bank = Bank(id=7, slug="kuda", name="KUDA", code="090267")
        assert bank.to_dict() == {"id": 7, "slug": "kuda", "name": "KUDA", "code": "090267"}

        weighted = Bank(id=1, slug="zenith_bank", name="ZENITH BANK", code="000015",
                        old_code="057", weight=1)
        assert weighted.to_dict()["old_code"] == "057"
        assert weighted.to_dict()["weight"] == 1


class TestRegistry:
    """Test the static bank tables"""

    def test_full_registry_is_large(self):
        assert len(NIGERIAN_BANKS) > 400

    def test_registries_are_immutable_sequences(self):
        assert isinstance(NIGERIAN_BANKS, tuple)
        assert isinstance(WEIGHTED_NIGERIAN_BANKS, tuple)

    def test_ids_and_slugs_unique(self):
        for banks in (NIGERIAN_BANKS, WEIGHTED_NIGERIAN_BANKS):
            assert len({bank.id for bank in banks}) == len(banks)
            assert len({bank.slug for bank in banks}) == len(banks)

    def test_slugs_are_lowercase_snake(self):
        for bank in NIGERIAN_BANKS + WEIGHTED_NIGERIAN_BANKS:
            assert bank.slug == bank.slug.lower()
            assert " " not in bank.slug and "-" not in bank.slug

    def test_full_registry_codes_unique(self):
        codes = [bank.code for bank in NIGERIAN_BANKS]
        assert len(set(codes)) == len(codes)

    def test_full_registry_has_no_legacy_codes(self):
        assert all(bank.old_code is None for bank in NIGERIAN_BANKS)

    def test_weighted_registry_has_legacy_codes_and_weights(self):
        for bank in WEIGHTED_NIGERIAN_BANKS:
            assert len(bank.old_code) == 3
            assert bank.weight == 1

    def test_weighted_registry_allows_shared_codes(self):
        """Test merged banks keep separate records under one code"""
        access = [bank for bank in WEIGHTED_NIGERIAN_BANKS if bank.code == "000014"]
        assert {bank.old_code for bank in access} == {"044", "063"}

    def test_weighted_codes_are_registered(self):
        """Test every curated bank also appears in the full registry"""
        full_codes = {bank.code for bank in NIGERIAN_BANKS}
        for bank in WEIGHTED_NIGERIAN_BANKS:
            assert bank.code in full_codes


class TestGetBank:
    """Test registry lookups"""

    def test_lookup_by_code(self):
        bank = get_bank("000013", BankProperty.CODE)
        assert bank is not None
        assert bank.name == "GUARANTY TRUST BANK"

    def test_lookup_by_old_code_uses_weighted_list(self):
        bank = get_bank("058", BankProperty.OLD_CODE)
        assert bank is not None
        assert bank.name == "GUARANTY TRUST BANK"
        assert bank.code == "000013"

    def test_lookup_by_old_code_against_full_list_not_found(self):
        """Test legacy codes are only carried by the weighted list"""
        assert get_bank("058", BankProperty.OLD_CODE, NIGERIAN_BANKS) is None

    def test_lookup_by_slug(self):
        bank = get_bank("kuda_microfinance_bank", BankProperty.SLUG)
        assert bank.code == "090267"

    def test_lookup_by_slug_in_weighted_list(self):
        bank = get_bank("access_diamond_bank", BankProperty.SLUG, WEIGHTED_NIGERIAN_BANKS)
        assert bank.old_code == "063"

    def test_lookup_returns_first_match(self):
        """Test shared codes resolve to the first record"""
        bank = get_bank("000014", BankProperty.CODE, WEIGHTED_NIGERIAN_BANKS)
        assert bank.slug == "access_bank"

    def test_lookup_not_found_returns_none(self):
        assert get_bank("123456", BankProperty.CODE) is None
        assert get_bank("no_such_bank", BankProperty.SLUG) is None
        assert get_bank("999", BankProperty.OLD_CODE) is None

    def test_lookup_in_custom_list(self):
        custom = [Bank(id=1, slug="mine", name="MINE", code="123456", old_code="123")]
        assert get_bank("123", BankProperty.OLD_CODE, custom) is custom[0]
        assert get_bank("123", BankProperty.OLD_CODE, []) is None
