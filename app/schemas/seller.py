"""
app/schemas/seller.py

Purpose: Seller application request/response schemas

- Validates the application form before it reaches the service layer
- Shapes seller rows for the seller dashboard and admin console
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.flow.states import ApprovalStatus
from app.schemas.response import APIModel, MessageResponse
from utils.time_utils import ensure_utc
from utils.validation_utils import normalize_gstin, sanitize_input


class SellerApplication(APIModel):
    """Request body for applying (or reapplying) to become a seller."""

    store_name: str = Field(..., min_length=1, max_length=255, description="Public store name")
    store_description: Optional[str] = Field(default=None, description="What the store sells")
    gst_number: Optional[str] = Field(default=None, max_length=20, description="GSTIN of the business")
    address: Optional[str] = Field(default=None, description="Business address")
    phone_number: Optional[str] = Field(default=None, max_length=20, description="Contact number")

    @field_validator("store_name")
    @classmethod
    def strip_store_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("storeName must not be blank")
        return v

    @field_validator("gst_number")
    @classmethod
    def clean_gst_number(cls, v: Optional[str]) -> Optional[str]:
        return normalize_gstin(v)

    @field_validator("phone_number", "address", "store_description")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class SellerOut(APIModel):
    """Seller row as returned by the API."""

    id: int
    user_id: int
    email: Optional[str] = None
    name: Optional[str] = None
    store_name: str
    store_description: Optional[str] = None
    gst_number: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    approval_status: ApprovalStatus
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class SellerActionResponse(MessageResponse):
    """Acknowledgement carrying the affected seller."""

    seller: SellerOut


class RejectRequest(APIModel):
    """Optional body of the reject endpoint."""

    reason: Optional[str] = Field(default=None, max_length=1000, description="Why the application was rejected")

    @field_validator("reason")
    @classmethod
    def clean_reason(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_input(v)
