"""
Custom exception classes for the bank gateway integration
Follows RFC 7807 (Problem Details for HTTP APIs) principles
"""

from typing import Optional, Dict, Any

class InquiryAPIException(Exception):
    """
    Base exception for transfer inquiry errors
    Maps to standard HTTP status codes and error formats
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INQUIRY_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class GatewayInfrastructureError(InquiryAPIException):
    """Transport or server level failure talking to the bank - HTTP 503"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=503,
            error_code="GATEWAY_INFRASTRUCTURE_ERROR",
            details=details
        )


class GatewayProtocolError(InquiryAPIException):
    """Bank answered with something we cannot use - HTTP 502 Bad Gateway"""

    def __init__(self, message: str, gateway_response: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=502,
            error_code="GATEWAY_PROTOCOL_ERROR",
            details={"gateway_response": gateway_response} if gateway_response else {}
        )
