"""
Canonical reason codes returned to inquiry callers
"""

REASON_APPROVED = "200"
REASON_BAD_REQUEST_DATA = "400"
REASON_TRANSACTION_ERROR = "500"
REASON_UNKNOWN_RESPONSE = "501"
REASON_TIMEOUT = "503"
REASON_INTERNAL_ERROR = "504"

DESC_GENERAL_INVALID_DATA = "General Invalid Data"
DESC_GENERAL_TRANSACTION_ERROR = "General Transaction Error"
DESC_TIMEOUT = "Error timeout"
DESC_INTERNAL_ERROR = "Internal Application Error"

REASON_CODES = {
    # Success codes
    REASON_APPROVED: {
        "http_status": 200,
        "message": "Inquiry approved",
        "success": True
    },

    # Error codes with HTTP status mapping
    REASON_BAD_REQUEST_DATA: {
        "http_status": 400,
        "message": DESC_GENERAL_INVALID_DATA,
        "success": False
    },
    REASON_TRANSACTION_ERROR: {
        "http_status": 422,
        "message": DESC_GENERAL_TRANSACTION_ERROR,
        "success": False
    },
    REASON_UNKNOWN_RESPONSE: {
        "http_status": 502,
        "message": "Unknown bank status",
        "success": False
    },
    REASON_TIMEOUT: {
        "http_status": 504,
        "message": DESC_TIMEOUT,
        "success": False
    },
    REASON_INTERNAL_ERROR: {
        "http_status": 500,
        "message": DESC_INTERNAL_ERROR,
        "success": False
    },
}

# Sub-codes supplied by the bank inside the description payload
BANK_SUB_CODE = {
    "http_status": 422,
    "message": "Rejected by bank",
    "success": False
}


def get_reason_code_info(reason_code: str):
    """
    Get reason code information with HTTP mapping
    """
    return REASON_CODES.get(reason_code, BANK_SUB_CODE)
