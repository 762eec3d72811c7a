"""
Transfer inquiry routes
"""

from fastapi import APIRouter, Depends, status, HTTPException
from transfer_inquiry.api.v1.dependencies import get_inquiry_service
from transfer_inquiry.core.reason_codes import BANK_SUB_CODE, get_reason_code_info
from transfer_inquiry.models.schemas.base import APIResponse, ErrorDetail
from transfer_inquiry.models.schemas.inquiry import InquiryRequest, InquiryResult
from transfer_inquiry.services.inquiry_service import InquiryService
from transfer_inquiry.utils.logger import logger

router = APIRouter()

@router.post(
    "/inquiry",
    response_model=APIResponse[InquiryResult],
    status_code=status.HTTP_200_OK,
    summary="Transfer Inquiry",
    description="""
    Validate a transfer inquiry, forward it to the bank gateway and return
    the normalized reason code and description.
    """,
    responses={
        200: {"description": "Inquiry approved by the bank"},
        400: {"description": "Bank reported invalid data"},
        422: {"description": "Invalid request or transaction error"},
        500: {"description": "Internal application error"},
        502: {"description": "Unknown bank status"},
        504: {"description": "Bank gateway timeout"}
    }
)
def transfer_inquiry(
    inquiry_data: InquiryRequest,
    service: InquiryService = Depends(get_inquiry_service)
) -> APIResponse[InquiryResult]:
    """
    Transfer inquiry

    - **transaction_id**, **transaction_time**, **channel**, **bank_code**,
      **bank_account_number** - REQUIRED
    - **amount** - REQUIRED, greater than 0
    - **location_code**, **reference1**, **reference2**, **first_name**,
      **last_name** - OPTIONAL
    """
    logger.info(f"🔍 Processing inquiry: {inquiry_data.transaction_id}")

    result = service.inquire(inquiry_data)

    if result.approved:
        logger.info(f"✅ Inquiry approved: {inquiry_data.transaction_id}")
        return APIResponse(
            success=True,
            data=result,
            message="Inquiry processed successfully"
        )

    # Bank sub-codes always map to BANK_SUB_CODE, whatever their value
    code_info = BANK_SUB_CODE if result.bank_sub_code else get_reason_code_info(result.reason_code)

    logger.warning(f"⚠️ Inquiry failed: {result.reason_code} {result.reason_desc}")
    raise HTTPException(
        status_code=code_info["http_status"],
        detail={
            "success": False,
            "error": ErrorDetail(
                code=result.reason_code,
                message=result.reason_desc,
                details=result.model_dump(mode="json")
            ).model_dump()
        }
    )
