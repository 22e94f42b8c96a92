"""
Pydantic schemas for provider responses
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


class CardType(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class CardBrand(str, Enum):
    MASTERCARD = "MASTERCARD"
    VERVE = "VERVE"
    VISA = "VISA"


class AccountData(BaseModel):
    account_number: str
    account_name: str
    bank_code: Optional[str] = None
    bank_id: Optional[int] = None


class AccountValidationResponse(BaseModel):
    status: bool
    message: str
    data: Optional[AccountData] = None


class CardBinData(BaseModel):
    bin: str
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    # Known values become enum members; other schemes (AMEX, DISCOVER...) stay strings
    card_type: Optional[Union[CardType, str]] = Field(
        None, union_mode="left_to_right", description="DEBIT or CREDIT"
    )
    brand: Optional[Union[CardBrand, str]] = Field(
        None, union_mode="left_to_right", description="Upper-cased card scheme, e.g. VISA"
    )
    bank: Optional[str] = None
    linked_bank_id: Optional[int] = None


class CardBinResponse(BaseModel):
    status: bool
    message: str
    data: Optional[CardBinData] = None


class FlutterwaveCardBinData(BaseModel):
    """Raw card BIN payload as returned by Flutterwave"""
    issuing_country: str
    bin: str
    card_type: Optional[str] = None
    issuer_info: str


class FlutterwaveCardBinResponse(BaseModel):
    status: Union[str, bool]
    message: str
    data: FlutterwaveCardBinData
