"""
Payment Provider Client Module

REST client for resolving Nigerian bank accounts and card BINs through
Paystack or Flutterwave. Every call is a single best-effort request;
failures come back as a response with status=False instead of raising.
"""

import httpx
import logging
import re
from enum import Enum
from typing import List, Optional, Sequence

from .banks import Bank, BankProperty, NIGERIAN_BANKS, get_bank
from .check_digit import is_valid_nuban, is_possible_issuer, get_possible_issuers
from .config import NubanConfig, get_config
from .logging_config import log_action, mask_account_number
from .schemas import (
    AccountValidationResponse, CardBinResponse, CardBinData,
    FlutterwaveCardBinResponse
)

logger = logging.getLogger("nuban.providers")


class PaymentProvider(Enum):
    """Supported payment providers"""
    PAYSTACK = "PAYSTACK"
    FLUTTERWAVE = "FLUTTERWAVE"


VALIDATION_URL = {
    PaymentProvider.PAYSTACK: "https://api.paystack.co/bank/resolve",
    PaymentProvider.FLUTTERWAVE: "https://api.flutterwave.com/v3/accounts/resolve",
}

CARD_BIN_URL = {
    PaymentProvider.PAYSTACK: "https://api.paystack.co/decision/bin/",
    PaymentProvider.FLUTTERWAVE: "https://api.flutterwave.com/v3/card-bins/",
}

CARD_BIN_PATTERN = re.compile(r"[0-9]{6}")


class ProviderError(Exception):
    """Raised internally when a provider call cannot produce a usable response"""


def _is_success(status) -> bool:
    # Paystack answers with a boolean, Flutterwave with "success"/"error"
    if isinstance(status, str):
        return status.lower() == "success"
    return bool(status)


class NubanClient:
    """REST client for account validation and card BIN resolution"""

    def __init__(
        self,
        api_key: str,
        payment_provider: PaymentProvider,
        timeout: float = 10.0,
        check_digit_precheck: bool = False
    ):
        if not api_key or not payment_provider:
            raise ValueError("API Key and Payment Provider are required")

        if isinstance(payment_provider, str):
            try:
                payment_provider = PaymentProvider(payment_provider.upper())
            except ValueError:
                raise ValueError(f"Unsupported payment provider: {payment_provider}")

        self.api_key = api_key
        self.payment_provider = payment_provider
        self.timeout = timeout
        self.check_digit_precheck = check_digit_precheck
        self._client = httpx.Client(timeout=timeout)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def validate_bank_code(self, bank_code: str) -> bool:
        """
        Validate bank code format for the configured provider

        Paystack only takes the legacy 3 digit codes; Flutterwave takes
        either the 3 digit or the 6 digit codes.
        """
        if not bank_code or not bank_code.isascii() or not bank_code.isdigit():
            return False

        if self.payment_provider == PaymentProvider.PAYSTACK:
            return len(bank_code) == 3
        elif self.payment_provider == PaymentProvider.FLUTTERWAVE:
            return len(bank_code) in (3, 6)
        return False

    def _fails_check_digit(self, account_number: str, bank_code: str) -> bool:
        """True when the bank is known and cannot have issued the account"""
        prop = BankProperty.OLD_CODE if len(bank_code) == 3 else BankProperty.CODE
        bank = get_bank(bank_code, prop)
        if bank is None:
            return False
        return not is_possible_issuer(account_number, bank.code)

    def validate_account(self, account_number: str, bank_code: str) -> AccountValidationResponse:
        """
        Validate a NUBAN account number against a bank through the provider

        Args:
            account_number: 10 digit account number
            bank_code: Bank code in the format the provider expects

        Returns:
            AccountValidationResponse, status=False on any failure
        """
        if not is_valid_nuban(account_number):
            return AccountValidationResponse(
                status=False,
                message="Invalid account number, digits should be exactly 10"
            )

        if not self.validate_bank_code(bank_code):
            return AccountValidationResponse(
                status=False,
                message=f"Invalid bank code for payment provider - {self.payment_provider.value}"
            )

        if self.check_digit_precheck and self._fails_check_digit(account_number, bank_code):
            log_action(
                logger, "info", "Account number rejected by check digit",
                provider=self.payment_provider.value, action="validate_account",
                resource=f"bank:{bank_code}",
                extra={"account_number": mask_account_number(account_number)}
            )
            return AccountValidationResponse(
                status=False,
                message="Account number is not a valid NUBAN for this bank"
            )

        try:
            if self.payment_provider == PaymentProvider.PAYSTACK:
                result = self._paystack_query(account_number, bank_code)
            elif self.payment_provider == PaymentProvider.FLUTTERWAVE:
                result = self._flutterwave_query(account_number, bank_code)
            else:
                return AccountValidationResponse(status=False, message="Unsupported payment provider")
        except ProviderError as e:
            logger.error(f"Account validation failed: {e}")
            return AccountValidationResponse(
                status=False,
                message=f"Account validation failed - {e}"
            )

        log_action(
            logger, "info", "Account validation completed",
            provider=self.payment_provider.value, action="validate_account",
            resource=f"bank:{bank_code}",
            extra={
                "account_number": mask_account_number(account_number),
                "status": result.status
            }
        )
        return result

    def _paystack_query(self, account_number: str, bank_code: str) -> AccountValidationResponse:
        try:
            response = self._client.get(
                VALIDATION_URL[PaymentProvider.PAYSTACK],
                params={"account_number": account_number, "bank_code": bank_code},
                headers=self._headers()
            )
            return self._validate_api_response(self._read_json(response))
        except (httpx.HTTPError, ProviderError) as e:
            raise ProviderError(f"Paystack API error: {e}") from e

    def _flutterwave_query(self, account_number: str, bank_code: str) -> AccountValidationResponse:
        try:
            response = self._client.post(
                VALIDATION_URL[PaymentProvider.FLUTTERWAVE],
                json={"account_number": account_number, "account_bank": bank_code},
                headers=self._headers()
            )
            return self._validate_api_response(self._read_json(response))
        except (httpx.HTTPError, ProviderError) as e:
            raise ProviderError(f"Flutterwave API error: {e}") from e

    def _read_json(self, response) -> object:
        if not 200 <= response.status_code < 300:
            logger.warning(f"{self.payment_provider.value} returned {response.status_code}")
            raise ProviderError(f"HTTP error! status: {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON body: {e}") from e

    def _validate_api_response(self, payload: object) -> AccountValidationResponse:
        """Check the body carries status and message, then type it"""
        if not isinstance(payload, dict) or "status" not in payload or "message" not in payload:
            raise ProviderError("Invalid API response format")

        try:
            return AccountValidationResponse.model_validate(
                {**payload, "status": _is_success(payload["status"])}
            )
        except ValueError as e:
            raise ProviderError("Invalid API response format") from e

    def resolve_card_bin(self, first_six_digits: str) -> CardBinResponse:
        """
        Resolve card BIN (first 6 digits) to brand, type and issuing bank

        Returns:
            CardBinResponse, status=False on any failure
        """
        if not isinstance(first_six_digits, str) or not CARD_BIN_PATTERN.fullmatch(first_six_digits):
            return CardBinResponse(
                status=False,
                message="Invalid card BIN - must be exactly 6 digits"
            )

        url = f"{CARD_BIN_URL[self.payment_provider]}{first_six_digits}"

        try:
            response = self._client.get(url, headers=self._headers())
            payload = self._read_json(response)

            if self.payment_provider == PaymentProvider.FLUTTERWAVE:
                result = self._format_flutterwave_card_bin_response(payload)
            else:
                result = self._format_paystack_card_bin_response(payload)
        except (httpx.HTTPError, ProviderError, ValueError, TypeError, KeyError) as e:
            logger.error(f"Card bin resolution failed: {e}")
            return CardBinResponse(
                status=False,
                message=f"Card bin resolution failed - {e}"
            )

        log_action(
            logger, "info", "Card BIN resolved",
            provider=self.payment_provider.value, action="resolve_card_bin",
            resource=f"bin:{first_six_digits}",
            extra={"status": result.status}
        )
        return result

    def _format_paystack_card_bin_response(self, payload: dict) -> CardBinResponse:
        if not isinstance(payload, dict):
            raise ProviderError("Invalid API response format")
        data = payload.get("data")
        if data is not None:
            data = {**data, "brand": (data.get("brand") or "").upper()}
        return CardBinResponse.model_validate({
            **payload,
            "status": _is_success(payload.get("status")),
            "data": data,
        })

    def _format_flutterwave_card_bin_response(self, payload: dict) -> CardBinResponse:
        """
        Reshape Flutterwave's BIN payload to the common CardBinResponse

        "NIGERIA NG" becomes country_name NIGERIA, country_code NG, and
        "VISA Access Bank" becomes brand VISA, bank "Access Bank".
        """
        raw = FlutterwaveCardBinResponse.model_validate(payload)

        country_name, _, country_code = raw.data.issuing_country.rpartition(" ")
        if not country_name:
            # single word, no country code to split off
            country_name, country_code = country_code, None
        brand, _, bank = raw.data.issuer_info.partition(" ")

        return CardBinResponse(
            status=_is_success(raw.status),
            message=raw.message,
            data=CardBinData(
                bin=raw.data.bin,
                country_code=country_code,
                country_name=country_name,
                card_type=raw.data.card_type,
                brand=brand.upper(),
                bank=bank,
            )
        )

    def get_possible_banks(self, account_number: str,
                           banks: Optional[Sequence[Bank]] = None) -> List[Bank]:
        """Offline lookup of banks that could have issued account_number"""
        if not is_valid_nuban(account_number):
            return []
        return get_possible_issuers(account_number, NIGERIAN_BANKS if banks is None else banks)

    def close(self):
        """Close the HTTP client"""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def create_client(config: Optional[NubanConfig] = None) -> NubanClient:
    """Build a client from configuration"""
    config = config or get_config()
    return NubanClient(
        api_key=config.api_key,
        payment_provider=config.payment_provider,
        timeout=config.request_timeout,
        check_digit_precheck=config.check_digit_precheck
    )
