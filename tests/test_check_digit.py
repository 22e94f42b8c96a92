"""
Test suite for the NUBAN check digit engine

Golden values are worked by hand from the CBN formula:
weighted sum with alternating 3/7 weights, modulo 10, then 9 - modulo.
"""

import pytest

from nuban.banks import Bank, NIGERIAN_BANKS, WEIGHTED_NIGERIAN_BANKS
from nuban.check_digit import (
    InvalidSerialLength, NUBAN_LENGTH, NUBAN_SERIAL_CODE_LENGTH,
    compute_check_digit, generate_seed, get_possible_issuers,
    is_possible_issuer, is_valid_nuban
)


class TestGenerateSeed:
    """Test weight sequence generation"""

    def test_alternates_starting_with_three(self):
        """Test seed alternates 3, 7 from position 0"""
        assert generate_seed(5) == [3, 7, 3, 7, 3]

    def test_seed_length_matches_input(self):
        """Test seed covers a 6 digit code plus 9 digit serial"""
        assert len(generate_seed(15)) == 15

    def test_empty_seed(self):
        assert generate_seed(0) == []


class TestComputeCheckDigit:
    """Test check digit computation"""

    def test_golden_value_access_bank(self):
        """Test '000014' + '123456789' sums to 246, giving 9 - 6 = 3"""
        assert compute_check_digit("123456789", "000014") == 3

    def test_golden_value_zenith_bank(self):
        """Test '000015' + '012345678' sums to 210, giving 9 - 0 = 9"""
        assert compute_check_digit("012345678", "000015") == 9

    def test_formula_uses_nine_minus_modulo(self):
        """Test the final step is 9 - modulo, not 10 - modulo"""
        # '000000' + '000000000' sums to 0: 10 - 0 would be out of range
        assert compute_check_digit("000000000", "000000") == 9

    def test_deterministic(self):
        """Test repeated calls give the same digit"""
        results = {compute_check_digit("987654321", "000016") for _ in range(5)}
        assert len(results) == 1

    def test_result_in_range(self):
        """Test digits stay within 0-9 across banks and serials"""
        serials = ["000000000", "123456789", "999999999", "505050505", "314159265"]
        for bank in NIGERIAN_BANKS:
            for serial in serials:
                assert 0 <= compute_check_digit(serial, bank.code) <= 9

    def test_short_serial_is_left_padded(self):
        """Test serials shorter than 9 digits are zero padded"""
        assert compute_check_digit("1", "000014") == compute_check_digit("000000001", "000014")
        assert compute_check_digit("12345", "000013") == compute_check_digit("000012345", "000013")

    def test_nine_digit_serial_accepted(self):
        """Test a serial of exactly 9 digits is accepted"""
        assert len("123456789") == NUBAN_SERIAL_CODE_LENGTH
        compute_check_digit("123456789", "000014")

    def test_ten_digit_serial_rejected(self):
        """Test a serial of 10 digits fails instead of being truncated"""
        with pytest.raises(InvalidSerialLength, match="should not be more than 9 digits"):
            compute_check_digit("1234567890", "000014")

    def test_long_serial_rejected(self):
        with pytest.raises(InvalidSerialLength):
            compute_check_digit("123456789012", "000014")

    def test_empty_serial_rejected(self):
        with pytest.raises(InvalidSerialLength):
            compute_check_digit("", "000014")

    def test_invalid_serial_length_is_value_error(self):
        """Test callers can catch the error as ValueError"""
        with pytest.raises(ValueError) as exc_info:
            compute_check_digit("1234567890", "000014")
        assert exc_info.value.serial == "1234567890"


class TestIsPossibleIssuer:
    """Test single bank matching"""

    def test_zenith_matches_golden_account(self):
        """Test '0123456789' is a possible Zenith Bank (000015) account"""
        assert is_possible_issuer("0123456789", "000015") is True

    def test_access_does_not_match_golden_account(self):
        """Test '0123456789' expects 6 for Access Bank, not 9"""
        assert is_possible_issuer("0123456789", "000014") is False

    def test_round_trip(self):
        """Test appending the computed digit always yields a match"""
        serials = ["000000001", "123456789", "876543210", "555555555"]
        for bank in WEIGHTED_NIGERIAN_BANKS:
            for serial in serials:
                account_number = serial + str(compute_check_digit(serial, bank.code))
                assert is_possible_issuer(account_number, bank.code)

    def test_any_other_check_digit_fails(self):
        """Test only one check digit value satisfies the formula"""
        serial = "123456789"
        expected = compute_check_digit(serial, "000014")
        for digit in range(10):
            account_number = f"{serial}{digit}"
            assert is_possible_issuer(account_number, "000014") is (digit == expected)


class TestGetPossibleIssuers:
    """Test candidate bank filtering"""

    def test_weighted_candidates_for_golden_account(self):
        """Test the weighted list narrows '0123456789' to three banks in list order"""
        banks = get_possible_issuers("0123456789", WEIGHTED_NIGERIAN_BANKS)

        assert [bank.slug for bank in banks] == [
            "mainstreet_microfinance_bank",
            "united_bank_for_africa",
            "zenith_bank",
        ]

    def test_defaults_to_full_registry(self):
        """Test omitting candidates checks every registered bank"""
        expected = [bank for bank in NIGERIAN_BANKS if is_possible_issuer("0123456789", bank.code)]
        assert get_possible_issuers("0123456789") == expected

    def test_full_registry_returns_many_banks(self):
        """Test the full registry yields a broad candidate set"""
        banks = get_possible_issuers("0123456789")
        assert len(banks) > len(get_possible_issuers("0123456789", WEIGHTED_NIGERIAN_BANKS))

    def test_preserves_candidate_order(self):
        """Test results keep the order of the candidate sequence"""
        candidates = list(reversed(WEIGHTED_NIGERIAN_BANKS))
        banks = get_possible_issuers("0123456789", candidates)

        positions = [candidates.index(bank) for bank in banks]
        assert positions == sorted(positions)

    def test_results_are_subset_of_candidates(self):
        """Test no bank outside the candidates is returned"""
        candidates = WEIGHTED_NIGERIAN_BANKS[:10]
        for account_number in ["0123456789", "1234567890", "0000000000", "9876543210"]:
            for bank in get_possible_issuers(account_number, candidates):
                assert bank in candidates

    def test_custom_candidates(self):
        """Test callers can pass their own bank records"""
        custom = [
            Bank(id=1, slug="zenith", name="Zenith", code="000015", weight=1),
            Bank(id=2, slug="access", name="Access", code="000014", weight=1),
        ]
        assert get_possible_issuers("0123456789", custom) == [custom[0]]

    def test_empty_candidates(self):
        assert get_possible_issuers("0123456789", []) == []


class TestIsValidNuban:
    """Test account number format validation"""

    def test_ten_digits_valid(self):
        assert is_valid_nuban("0123456789") is True
        assert len("0123456789") == NUBAN_LENGTH

    def test_wrong_length_invalid(self):
        assert is_valid_nuban("01234567") is False
        assert is_valid_nuban("01234567890") is False
        assert is_valid_nuban("") is False

    def test_non_numeric_invalid(self):
        assert is_valid_nuban("01234abcde") is False
        assert is_valid_nuban("01234 6789") is False

    def test_non_ascii_digits_invalid(self):
        """Test unicode digits such as Arabic-Indic numerals are rejected"""
        assert is_valid_nuban("٠١٢٣٤٥٦٧٨٩") is False

    def test_non_string_invalid(self):
        assert is_valid_nuban(None) is False
        assert is_valid_nuban(123456789) is False
