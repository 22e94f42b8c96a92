"""
NUBAN Validator

Nigerian bank account (NUBAN) validation using the CBN check digit
algorithm, an offline bank registry, and Paystack or Flutterwave for
account name resolution and card BIN lookups.
"""

__version__ = "1.0.0"

from .banks import Bank, BankProperty, NIGERIAN_BANKS, WEIGHTED_NIGERIAN_BANKS, get_bank
from .check_digit import (
    InvalidSerialLength, compute_check_digit, is_possible_issuer,
    get_possible_issuers, is_valid_nuban
)
from .providers import NubanClient, PaymentProvider, create_client
from .schemas import AccountValidationResponse, CardBinResponse, CardBrand, CardType
