"""
app/services/catalog_service.py

Purpose: Seller product catalog

- Approval gate: only approved sellers manage products
- List the caller's products
- Add a product with validated prices and category
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.config import settings
from app.core.exceptions import ForbiddenError, StoreError, ValidationError
from app.core.logging import get_logger, LogContext
from app.flow.states import can_sell
from app.models.category import Category
from app.models.product import Product
from app.models.seller import Seller
from app.schemas.product import ProductCreate
from app.services.seller_service import get_seller_by_user_id
from utils.constants import ERR_SELLER_NOT_APPROVED, ERR_STORE, ERR_UNKNOWN_CATEGORY

logger = get_logger(__name__)


async def get_approved_seller(session: AsyncSession, user_id: int) -> Seller:
    """
    Resolves the caller's seller row and checks it may sell.

    Raises:
        ForbiddenError: If there is no seller row or it is not approved
    """
    seller = await get_seller_by_user_id(session, user_id)
    if seller is None or not can_sell(seller.approval_status):
        logger.warning(
            "Product access refused: seller not approved",
            extra={
                "user_id": user_id,
                "status": seller.approval_status if seller else None
            }
        )
        raise ForbiddenError(ERR_SELLER_NOT_APPROVED)
    return seller


async def list_own_products(session: AsyncSession, user_id: int) -> List[Product]:
    """
    Lists every product of the caller's store.

    Raises:
        ForbiddenError: If the caller is not an approved seller
    """
    seller = await get_approved_seller(session, user_id)
    result = await session.execute(
        select(Product).where(Product.seller_id == seller.id).order_by(Product.id)
    )
    return list(result.scalars().all())


async def add_product(session: AsyncSession, user_id: int, payload: ProductCreate) -> Product:
    """
    Adds a product to the caller's store.

    The approval gate runs before anything else, then the category reference
    is checked; nothing is written unless both pass.

    Args:
        session: Request session
        user_id: Caller's user id
        payload: Validated product fields (prices already decimal text)

    Returns:
        The new product row

    Raises:
        ForbiddenError: If the caller is not an approved seller
        ValidationError: If the category does not exist
        StoreError: If the insert fails
    """
    seller = await get_approved_seller(session, user_id)

    with LogContext(seller_id=seller.id):
        category = await session.get(Category, payload.category_id)
        if category is None:
            raise ValidationError(
                ERR_UNKNOWN_CATEGORY,
                details={"categoryId": payload.category_id}
            )

        product = Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            original_price=payload.original_price,
            category_id=payload.category_id,
            seller_id=seller.id,
            image=payload.image or settings.DEFAULT_PRODUCT_IMAGE,
            brand=payload.brand,
            is_active=True,
        )
        session.add(product)

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Failed to add product: {e}", exc_info=True)
            raise StoreError(ERR_STORE) from e

        logger.info(f"Product added: {product.name}", extra={"product_id": product.id})
        return product
