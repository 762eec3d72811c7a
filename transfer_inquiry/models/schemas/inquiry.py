"""
Transfer inquiry schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InquiryRequest(BaseModel):
    """
    Transfer inquiry request schema

    Every field is optional here: completeness is decided by
    ``validate_request`` so that a bad request becomes a result, not a 422.
    """
    model_config = ConfigDict(frozen=True)

    transaction_id: Optional[str] = Field(
        None,
        description="Caller transaction identifier",
        examples=["TXN_20240101_0001"]
    )
    transaction_time: Optional[datetime] = Field(
        None,
        description="Time the caller created the transaction",
        examples=["2024-01-01T10:00:00"]
    )
    channel: Optional[str] = Field(
        None,
        description="Originating channel",
        examples=["MOBILE"]
    )
    location_code: Optional[str] = Field(
        None,
        description="Branch or terminal location code (not validated)",
        examples=["BKK01"]
    )
    bank_code: Optional[str] = Field(
        None,
        description="Destination bank code",
        examples=["014"]
    )
    bank_account_number: Optional[str] = Field(
        None,
        description="Destination bank account number",
        examples=["1234567890"]
    )
    amount: Optional[Decimal] = Field(
        None,
        description="Transfer amount, must be greater than 0",
        examples=["1500.00"]
    )
    reference1: Optional[str] = Field(None, description="Caller reference 1")
    reference2: Optional[str] = Field(None, description="Caller reference 2")
    first_name: Optional[str] = Field(None, description="Account holder first name")
    last_name: Optional[str] = Field(None, description="Account holder last name")


class InquiryResult(BaseModel):
    """
    Canonical inquiry result returned to every caller
    """
    model_config = ConfigDict(frozen=True)

    reference_no_1: Optional[str] = Field("", description="Bank reference code 1")
    reference_no_2: Optional[str] = Field("", description="Bank reference code 2")
    amount: Optional[Decimal] = Field(Decimal("0"), description="Balance reported by the bank")
    transaction_id: Optional[str] = Field("", description="Bank transaction ID")
    reason_code: str = Field(..., description="Canonical reason code", examples=["200"])
    reason_desc: Optional[str] = Field(None, description="Reason description", examples=["Account OK"])
    account_name: Optional[str] = Field(None, description="Account name, only set on approval")
    approved: bool = Field(False, description="True only when the bank approved the inquiry")
    bank_sub_code: bool = Field(
        False,
        description="True when reason_code was read from the bank description rather than a default"
    )
