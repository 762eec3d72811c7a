"""
Transfer inquiry service - validates, calls the bank and normalizes the answer
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from transfer_inquiry.core.exceptions import GatewayInfrastructureError
from transfer_inquiry.core.reason_codes import (
    REASON_TRANSACTION_ERROR,
    REASON_INTERNAL_ERROR,
    DESC_GENERAL_INVALID_DATA,
    DESC_INTERNAL_ERROR,
)
from transfer_inquiry.models.schemas.gateway import (
    GatewayOk,
    GatewayOutcome,
    InfrastructureFault,
    OtherFault,
    ResponseStatus,
)
from transfer_inquiry.models.schemas.inquiry import InquiryRequest, InquiryResult
from transfer_inquiry.services.bank_gateway_client import BankGatewayClient
from transfer_inquiry.services.response_classifier import (
    SPLITTER_DEFAULTS,
    carries_sub_code,
    classify_fault,
    classify_response,
)
from transfer_inquiry.utils.logger import logger as default_logger


def _has_text(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def validate_request(request: InquiryRequest) -> bool:
    """True when every required field is present and the amount is positive"""
    return (
        _has_text(request.transaction_id)
        and request.transaction_time is not None
        and _has_text(request.channel)
        and _has_text(request.bank_code)
        and _has_text(request.bank_account_number)
        and request.amount is not None
        and request.amount > 0
    )


def call_gateway(gateway_client, request: InquiryRequest) -> GatewayOutcome:
    """Invoke the gateway and fold its result or exception into an outcome"""
    try:
        response = gateway_client.request_transfer(
            request.transaction_id,
            request.transaction_time,
            request.channel,
            request.bank_code,
            request.bank_account_number,
            request.amount,
            request.reference1,
            request.reference2,
        )
    except GatewayInfrastructureError as e:
        return InfrastructureFault(message=e.message)
    except Exception as e:
        return OtherFault(message=str(e))
    return GatewayOk(response=response)


def error_result(reason_code: str, reason_desc: str) -> InquiryResult:
    """Result with empty passthrough fields"""
    return InquiryResult(reason_code=reason_code, reason_desc=reason_desc)


class InquiryService:
    """Transfer inquiry facade over the bank gateway"""

    def __init__(self, gateway_client=None, logger: Optional[logging.Logger] = None):
        self.gateway_client = gateway_client if gateway_client is not None else BankGatewayClient()
        self.logger = logger or default_logger

    def inquiry(
        self,
        transaction_id: Optional[str],
        transaction_time: Optional[datetime],
        channel: Optional[str],
        location_code: Optional[str],
        bank_code: Optional[str],
        bank_account_number: Optional[str],
        amount: Optional[Decimal],
        reference1: Optional[str] = None,
        reference2: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> InquiryResult:
        """Caller-facing inquiry taking the request fields one by one"""
        try:
            request = InquiryRequest(
                transaction_id=transaction_id,
                transaction_time=transaction_time,
                channel=channel,
                location_code=location_code,
                bank_code=bank_code,
                bank_account_number=bank_account_number,
                amount=amount,
                reference1=reference1,
                reference2=reference2,
                first_name=first_name,
                last_name=last_name,
            )
        except ValidationError as e:
            self.logger.error(f"Inquiry arguments rejected: {str(e)}")
            return error_result(REASON_TRANSACTION_ERROR, DESC_GENERAL_INVALID_DATA)

        return self.inquire(request)

    def inquire(self, request: InquiryRequest) -> InquiryResult:
        """
        Run one inquiry. Never raises: every failure is encoded in the
        result's reason_code and reason_desc.
        """
        try:
            if not validate_request(request):
                self.logger.info(f"Invalid inquiry request: {request.transaction_id}")
                return error_result(REASON_TRANSACTION_ERROR, DESC_GENERAL_INVALID_DATA)

            self.logger.info(f"Calling bank gateway for transaction {request.transaction_id}")
            outcome = call_gateway(self.gateway_client, request)

            return self._process_outcome(outcome)

        except Exception:
            self.logger.exception("Unexpected error while processing inquiry")
            return error_result(REASON_INTERNAL_ERROR, DESC_INTERNAL_ERROR)

    def _process_outcome(self, outcome: GatewayOutcome) -> InquiryResult:
        """Map a gateway outcome onto an inquiry result"""
        if isinstance(outcome, InfrastructureFault):
            self.logger.error(f"Bank gateway infrastructure fault: {outcome.message}")
            return error_result(*classify_fault(outcome.message))

        if isinstance(outcome, OtherFault):
            self.logger.error(f"Unexpected bank gateway fault: {outcome.message}")
            return error_result(REASON_INTERNAL_ERROR, DESC_INTERNAL_ERROR)

        response = outcome.response
        if response is None:
            self.logger.error("Bank response is null")
            return error_result(REASON_INTERNAL_ERROR, DESC_INTERNAL_ERROR)

        if response.status is ResponseStatus.UNSUPPORTED:
            self.logger.error(f"Unsupported bank response code: {response.response_code}")

        reason_code, reason_desc = classify_response(response)
        approved = response.status is ResponseStatus.APPROVED

        return InquiryResult(
            reference_no_1=response.reference_code_1,
            reference_no_2=response.reference_code_2,
            amount=response.balance,
            transaction_id=response.bank_transaction_id,
            reason_code=reason_code,
            reason_desc=reason_desc,
            account_name=response.description if approved else None,
            approved=approved,
            bank_sub_code=response.status in SPLITTER_DEFAULTS and carries_sub_code(response.description),
        )
