"""
NUBAN Check Digit Module

Implements the Central Bank of Nigeria NUBAN check digit algorithm and the
offline matching of account numbers against candidate banks.

Pure functions only: no I/O and no shared mutable state. Account number
format (exactly 10 digits) is a caller precondition, checked with
is_valid_nuban() before the matching functions are used.
"""

from typing import List, Sequence

from .banks import Bank, NIGERIAN_BANKS

NUBAN_LENGTH = 10
NUBAN_SERIAL_CODE_LENGTH = 9


class InvalidSerialLength(ValueError):
    """Raised when a NUBAN serial code is empty or longer than 9 digits"""

    def __init__(self, serial: str):
        self.serial = serial
        super().__init__(
            f"Nuban serial code should not be more than {NUBAN_SERIAL_CODE_LENGTH} digits"
        )


def is_valid_nuban(account_number: str) -> bool:
    """Check that an account number is exactly 10 ASCII digits"""
    return (
        isinstance(account_number, str)
        and len(account_number) == NUBAN_LENGTH
        and account_number.isascii()
        and account_number.isdigit()
    )


def generate_seed(length: int) -> List[int]:
    """Alternating 3, 7 weights starting with 3"""
    return [7 if i % 2 else 3 for i in range(length)]


def compute_check_digit(serial: str, bank_code: str) -> int:
    """
    Compute the NUBAN check digit for a serial and bank code

    Args:
        serial: Up to 9 digit serial, left padded with zeros
        bank_code: 6 digit NIBSS bank code

    Returns:
        Check digit between 0 and 9

    Raises:
        InvalidSerialLength: If serial is empty or exceeds 9 digits
    """
    if not serial or len(serial) > NUBAN_SERIAL_CODE_LENGTH:
        raise InvalidSerialLength(serial)

    digits = bank_code + serial.zfill(NUBAN_SERIAL_CODE_LENGTH)
    seed = generate_seed(len(digits))

    weighted_sum = sum(weight * int(digit) for weight, digit in zip(seed, digits))
    modulo = weighted_sum % 10

    # CBN standard: subtract from 10, then subtract 1
    return 10 - modulo - 1


def is_possible_issuer(account_number: str, bank_code: str) -> bool:
    """Check whether bank_code could have issued account_number"""
    serial = account_number[:NUBAN_SERIAL_CODE_LENGTH]
    check_digit = compute_check_digit(serial, bank_code)
    return check_digit == int(account_number[NUBAN_SERIAL_CODE_LENGTH])


def get_possible_issuers(account_number: str,
                         candidates: Sequence[Bank] = NIGERIAN_BANKS) -> List[Bank]:
    """
    Filter candidate banks down to those that could have issued an account number

    Many bank codes share a check digit for any given serial, so the
    full registry usually yields several matches. Pass a narrower
    candidate list (e.g. WEIGHTED_NIGERIAN_BANKS) to cut them down.
    Candidate order is preserved.

    Args:
        account_number: 10 digit NUBAN account number
        candidates: Banks to check against

    Returns:
        Banks whose code produces the account number's check digit
    """
    return [bank for bank in candidates if is_possible_issuer(account_number, bank.code)]
