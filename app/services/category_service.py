"""
app/services/category_service.py

Purpose: Category lookups (read-only)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.models.category import Category


async def list_categories(session: AsyncSession) -> List[Category]:
    """Returns every category ordered by id."""
    result = await session.execute(select(Category).order_by(Category.id))
    return list(result.scalars().all())
