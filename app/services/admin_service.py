"""
app/services/admin_service.py

Purpose: Admin review of seller applications

- List all applications, oldest first, and the pending queue
- Approve: seller status and user promotion committed together
- Reject: status change with the reason kept on the seller row
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.exceptions import (
    InvalidStateTransitionError,
    ResourceNotFoundError,
    StoreError,
)
from app.core.logging import get_logger, LogContext
from app.flow.states import ApprovalStatus, is_valid_transition
from app.models.seller import Seller
from app.models.user import User
from app.services.user_service import promote_to_seller
from utils.constants import ERR_SELLER_NOT_FOUND, ERR_STORE
from utils.time_utils import utcnow

logger = get_logger(__name__)


async def list_all_sellers(session: AsyncSession) -> List[Seller]:
    """
    Lists every seller, oldest application first.
    """
    result = await session.execute(select(Seller).order_by(Seller.created_at, Seller.id))
    return list(result.scalars().all())


async def list_pending(session: AsyncSession) -> List[Seller]:
    """
    Lists the review queue: pending sellers, oldest application first.
    """
    result = await session.execute(
        select(Seller)
        .where(Seller.approval_status == ApprovalStatus.PENDING.value)
        .order_by(Seller.created_at, Seller.id)
    )
    return list(result.scalars().all())


async def _get_seller_for_review(session: AsyncSession, seller_id: int, target: ApprovalStatus) -> Seller:
    seller = await session.get(Seller, seller_id)
    if seller is None:
        raise ResourceNotFoundError(ERR_SELLER_NOT_FOUND)

    if not is_valid_transition(seller.approval_status, target):
        logger.warning(
            f"Refused transition {seller.approval_status} -> {target.value}",
            extra={"status": seller.approval_status}
        )
        raise InvalidStateTransitionError(
            f"Cannot mark a {seller.approval_status} seller as {target.value}",
            details={"approvalStatus": seller.approval_status}
        )
    return seller


async def approve(session: AsyncSession, seller_id: int) -> Seller:
    """
    Approves a seller application and promotes the owning user.

    Both rows are written in one transaction: if either write fails,
    neither is kept.

    Raises:
        ResourceNotFoundError: If the seller does not exist
        InvalidStateTransitionError: If the seller was rejected
        StoreError: If the transaction fails
    """
    with LogContext(seller_id=seller_id):
        seller = await _get_seller_for_review(session, seller_id, ApprovalStatus.APPROVED)

        now = utcnow()
        seller.approval_status = ApprovalStatus.APPROVED.value
        seller.rejection_reason = None
        seller.updated_at = now

        user = await session.get(User, seller.user_id)
        if user is None:
            await session.rollback()
            logger.error("Seller row references a missing user", extra={"user_id": seller.user_id})
            raise StoreError(ERR_STORE)
        promote_to_seller(user)

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Approval rolled back: {e}", exc_info=True)
            raise StoreError(ERR_STORE) from e

        logger.info(
            f"Seller approved: {seller.store_name}",
            extra={"user_id": user.id, "status": seller.approval_status}
        )
        return seller


async def reject(session: AsyncSession, seller_id: int, reason: Optional[str] = None) -> Seller:
    """
    Rejects a seller application.

    Args:
        session: Request session
        seller_id: Seller to reject
        reason: Optional explanation stored on the seller row

    Raises:
        ResourceNotFoundError: If the seller does not exist
        InvalidStateTransitionError: If the seller was already approved
        StoreError: If the update fails
    """
    with LogContext(seller_id=seller_id):
        seller = await _get_seller_for_review(session, seller_id, ApprovalStatus.REJECTED)

        seller.approval_status = ApprovalStatus.REJECTED.value
        seller.rejection_reason = reason
        seller.updated_at = utcnow()

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Failed to reject seller: {e}", exc_info=True)
            raise StoreError(ERR_STORE) from e

        logger.info(
            f"Seller rejected: {seller.store_name}",
            extra={"status": seller.approval_status}
        )
        return seller
