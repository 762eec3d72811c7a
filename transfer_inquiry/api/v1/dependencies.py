"""
API dependencies
"""

from functools import lru_cache

from transfer_inquiry.services.inquiry_service import InquiryService


@lru_cache
def get_inquiry_service() -> InquiryService:
    """Single service per process so the bank gateway client is shared"""
    return InquiryService()


def close_inquiry_service() -> None:
    """Release the shared gateway client, if one was ever created"""
    if get_inquiry_service.cache_info().currsize:
        get_inquiry_service().gateway_client.close()
        get_inquiry_service.cache_clear()
