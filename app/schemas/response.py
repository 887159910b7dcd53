"""
app/schemas/response.py

Purpose: Shared response shapes

- camelCase base model used by every API schema
- Standard error body returned by the exception handlers
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Any


class APIModel(BaseModel):
    """
    Base model for API payloads.

    Fields are declared in snake_case and travel as camelCase JSON.
    Either spelling is accepted on input; ORM rows are read via attributes.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None


class MessageResponse(APIModel):
    """Plain acknowledgement with a human-readable message."""
    message: str
