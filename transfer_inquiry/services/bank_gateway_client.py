"""
Bank transfer gateway client
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

from transfer_inquiry.core.config import settings
from transfer_inquiry.core.exceptions import GatewayInfrastructureError, GatewayProtocolError
from transfer_inquiry.models.schemas.gateway import GatewayResponse
from transfer_inquiry.utils.logger import logger


class BankGatewayClient:
    """HTTP client for the bank transfer gateway"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transfer_path: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = (base_url or settings.BANK_GATEWAY_URL).rstrip("/")
        self.transfer_path = transfer_path or settings.BANK_GATEWAY_TRANSFER_PATH
        self.api_key = api_key if api_key is not None else settings.BANK_GATEWAY_API_KEY
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.BANK_GATEWAY_TIMEOUT_SECONDS
        )
        # Pooled connections are reused across inquiries
        self.http_client = (
            http_client if http_client is not None else httpx.Client(timeout=self.timeout_seconds)
        )

    def close(self) -> None:
        self.http_client.close()

    def request_transfer(
        self,
        transaction_id: str,
        transaction_time: datetime,
        channel: str,
        bank_code: str,
        bank_account_number: str,
        amount: Decimal,
        reference1: Optional[str],
        reference2: Optional[str],
    ) -> Optional[GatewayResponse]:
        """
        Submit a transfer request and block until the bank answers

        Raises GatewayInfrastructureError on transport failures, timeouts
        and 5xx answers. Any other non-2xx answer raises GatewayProtocolError.
        """
        payload: Dict[str, Any] = {
            "transaction_id": transaction_id,
            "transaction_time": transaction_time.isoformat(),
            "channel": channel,
            "bank_code": bank_code,
            "bank_account_number": bank_account_number,
            "amount": str(amount),
            "reference1": reference1,
            "reference2": reference2,
        }

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key

        url = f"{self.base_url}{self.transfer_path}"
        logger.info(f"Requesting bank transfer {transaction_id} at {url}")

        try:
            response = self.http_client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise GatewayInfrastructureError(f"Connection timed out: {str(e)}")
        except httpx.TransportError as e:
            raise GatewayInfrastructureError(f"Bank gateway unreachable: {str(e)}")

        logger.info(f"Bank gateway response: {response.status_code}")

        if response.status_code >= 500:
            raise GatewayInfrastructureError(
                f"Bank gateway server error: HTTP {response.status_code}",
                details={"body": response.text}
            )
        if not response.is_success:
            raise GatewayProtocolError(
                f"Bank gateway rejected request: HTTP {response.status_code}",
                gateway_response={"body": response.text}
            )
        if not response.content:
            return None

        return GatewayResponse.model_validate(response.json())
