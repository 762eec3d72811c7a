"""
Maps bank gateway answers and faults onto canonical reason codes

The bank packs sub-codes into ``description`` as colon separated segments,
e.g. ``"100:1091:Data type is invalid."``. ``invalid_data`` and
``transaction_error`` answers read that payload with ``split_description``;
``unknown`` answers read it with ``split_unknown_description``. The two rules
differ on purpose and must stay that way until the bank contract says
otherwise.
"""

from typing import Optional, Tuple

from transfer_inquiry.core.reason_codes import (
    REASON_APPROVED,
    REASON_BAD_REQUEST_DATA,
    REASON_TRANSACTION_ERROR,
    REASON_UNKNOWN_RESPONSE,
    REASON_TIMEOUT,
    REASON_INTERNAL_ERROR,
    DESC_GENERAL_INVALID_DATA,
    DESC_GENERAL_TRANSACTION_ERROR,
    DESC_TIMEOUT,
    DESC_INTERNAL_ERROR,
)
from transfer_inquiry.models.schemas.gateway import GatewayResponse, ResponseStatus

Reason = Tuple[str, Optional[str]]

# Case-sensitive markers found in timeout fault messages
TIMEOUT_MARKERS = (
    "java.net.SocketTimeoutException",
    "Connection timed out",
)

# Defaults per response status when the description carries nothing better
SPLITTER_DEFAULTS = {
    ResponseStatus.INVALID_DATA: (REASON_BAD_REQUEST_DATA, DESC_GENERAL_INVALID_DATA),
    ResponseStatus.TRANSACTION_ERROR: (REASON_TRANSACTION_ERROR, DESC_GENERAL_TRANSACTION_ERROR),
    ResponseStatus.UNKNOWN: (REASON_UNKNOWN_RESPONSE, DESC_GENERAL_INVALID_DATA),
}


def _is_blank(value: str) -> bool:
    return not value.strip()


def carries_sub_code(description: Optional[str]) -> bool:
    """True when either splitter will take the reason code from the description"""
    return description is not None and len(description.split(":")) >= 2


def split_description(description: Optional[str], default_code: str, default_desc: str) -> Reason:
    """Reason for invalid_data / transaction_error answers"""
    if description is None:
        return default_code, default_desc

    segments = description.split(":")
    if len(segments) >= 3:
        return segments[1], segments[2]
    if len(segments) == 2:
        desc = default_desc if _is_blank(segments[1]) else segments[1]
        return segments[0], desc
    return default_code, default_desc


def split_unknown_description(description: Optional[str], default_code: str, default_desc: str) -> Reason:
    """Reason for unknown answers: first segment is the code, last one the message"""
    if description is None:
        return default_code, default_desc

    segments = description.split(":")
    if len(segments) >= 2:
        desc = default_desc if _is_blank(segments[-1]) else segments[-1]
        return segments[0], desc
    return default_code, default_desc


def classify_response(response: GatewayResponse) -> Reason:
    """Reason code and description for a non-null gateway response"""
    status = response.status

    if status is ResponseStatus.APPROVED:
        return REASON_APPROVED, response.description
    if status in (ResponseStatus.INVALID_DATA, ResponseStatus.TRANSACTION_ERROR):
        return split_description(response.description, *SPLITTER_DEFAULTS[status])
    if status is ResponseStatus.UNKNOWN:
        return split_unknown_description(response.description, *SPLITTER_DEFAULTS[status])
    return REASON_INTERNAL_ERROR, DESC_INTERNAL_ERROR


def classify_fault(message: Optional[str], markers: Tuple[str, ...] = TIMEOUT_MARKERS) -> Reason:
    """Reason code and description for an infrastructure fault message"""
    if message and any(marker in message for marker in markers):
        return REASON_TIMEOUT, DESC_TIMEOUT
    return REASON_INTERNAL_ERROR, DESC_INTERNAL_ERROR
