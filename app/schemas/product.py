"""
app/schemas/product.py

Purpose: Product request/response schemas

- Prices validated and normalized to decimal text at the boundary
- Category reference must be an integer
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from app.schemas.response import APIModel, MessageResponse
from utils.time_utils import ensure_utc
from utils.validation_utils import parse_decimal_text


class ProductCreate(APIModel):
    """Request body for adding a product."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: str = Field(..., description="Decimal amount, e.g. \"199.99\"")
    original_price: Optional[str] = Field(default=None, description="Price before discount")
    category_id: int
    image: Optional[str] = Field(default=None, max_length=500)
    brand: Optional[str] = Field(default=None, max_length=255)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v: Any) -> str:
        return parse_decimal_text(v, "price")

    @field_validator("original_price", mode="before")
    @classmethod
    def validate_original_price(cls, v: Any) -> Optional[str]:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return parse_decimal_text(v, "originalPrice")

    @field_validator("category_id", mode="before")
    @classmethod
    def reject_bool_category(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("categoryId must be an integer")
        return v

    @field_validator("image")
    @classmethod
    def blank_image_is_missing(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class ProductOut(APIModel):
    """Product row as returned by the API."""

    id: int
    name: str
    description: Optional[str] = None
    price: str
    original_price: Optional[str] = None
    category_id: int
    seller_id: int
    image: str
    brand: Optional[str] = None
    is_active: bool
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class ProductCreatedResponse(MessageResponse):
    product: ProductOut
