"""
app/api/categories.py

Purpose: Public category listing
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.db.database import get_session
from app.schemas.category import CategoryOut
from app.services import category_service

router = APIRouter(prefix="/categories")


@router.get("", response_model=List[CategoryOut])
async def list_categories(session: AsyncSession = Depends(get_session)):
    """Every product category. No authentication required."""
    return await category_service.list_categories(session)
