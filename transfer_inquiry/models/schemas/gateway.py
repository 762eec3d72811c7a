"""
Bank gateway response schemas and call outcomes
"""

from decimal import Decimal
from enum import StrEnum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


class ResponseStatus(StrEnum):
    APPROVED = "approved"
    INVALID_DATA = "invalid_data"
    TRANSACTION_ERROR = "transaction_error"
    UNKNOWN = "unknown"
    UNSUPPORTED = "unsupported"


def parse_response_status(response_code: Optional[str]) -> ResponseStatus:
    """Case-insensitive match of a raw bank response code"""
    if response_code is None:
        return ResponseStatus.UNSUPPORTED
    try:
        status = ResponseStatus(response_code.lower())
    except ValueError:
        return ResponseStatus.UNSUPPORTED
    return status


class GatewayResponse(BaseModel):
    """
    Transfer response as returned by the bank gateway
    """
    reference_code_1: Optional[str] = Field(None, description="Bank reference code 1")
    reference_code_2: Optional[str] = Field(None, description="Bank reference code 2")
    balance: Optional[Decimal] = Field(None, description="Account balance")
    bank_transaction_id: Optional[str] = Field(None, description="Bank transaction ID")
    response_code: Optional[str] = Field(
        None,
        description="approved, invalid_data, transaction_error or unknown",
        examples=["approved"]
    )
    description: Optional[str] = Field(
        None,
        description="Free text or colon-delimited code:message payload",
        examples=["100:1091:Data type is invalid."]
    )

    @property
    def status(self) -> ResponseStatus:
        return parse_response_status(self.response_code)


class GatewayOk(BaseModel):
    kind: Literal["ok"] = "ok"
    response: Optional[GatewayResponse] = None


class InfrastructureFault(BaseModel):
    kind: Literal["infrastructure_fault"] = "infrastructure_fault"
    message: Optional[str] = None


class OtherFault(BaseModel):
    kind: Literal["other_fault"] = "other_fault"
    message: Optional[str] = None


GatewayOutcome = Union[GatewayOk, InfrastructureFault, OtherFault]
