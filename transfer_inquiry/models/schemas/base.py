"""
Standardized API responses
"""

from datetime import datetime
from typing import Generic, TypeVar, Optional, Dict, Any

from pydantic import BaseModel, Field

T = TypeVar('T')


class APIResponse(BaseModel, Generic[T]):
    """Standard success response"""
    success: bool = Field(True, description="Indicates if the request was successful")
    data: Optional[T] = Field(None, description="Response data payload")
    message: Optional[str] = Field(None, description="Human-readable message")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class ErrorDetail(BaseModel):
    """Standard error detail structure"""
    code: str = Field(..., description="Reason code")
    message: Optional[str] = Field(None, description="Reason description")
    details: Optional[Dict[str, Any]] = Field(None, description="Inquiry result carried with the error")

