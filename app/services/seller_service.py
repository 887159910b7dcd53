"""
app/services/seller_service.py

Purpose: Seller application management

- Submit a seller application (one per user)
- Read the caller's own seller profile
- Resubmit a rejected application
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.core.exceptions import (
    DuplicateApplicationError,
    InvalidStateTransitionError,
    ResourceNotFoundError,
    StoreError,
)
from app.core.logging import get_logger, LogContext
from app.flow.states import ApprovalStatus, is_valid_transition
from app.models.seller import Seller
from app.schemas.auth import Principal
from app.schemas.seller import SellerApplication
from app.services.user_service import get_user_by_firebase_uid
from utils.constants import (
    ERR_DUPLICATE_APPLICATION,
    ERR_REAPPLY_NOT_REJECTED,
    ERR_SELLER_PROFILE_NOT_FOUND,
    ERR_STORE,
    ERR_USER_NOT_FOUND,
)
from utils.time_utils import utcnow

logger = get_logger(__name__)


async def get_seller_by_user_id(session: AsyncSession, user_id: int) -> Optional[Seller]:
    """
    Retrieves the seller row belonging to a user.

    Returns:
        Seller row or None if the user never applied
    """
    result = await session.execute(select(Seller).where(Seller.user_id == user_id).limit(1))
    return result.scalar_one_or_none()


async def apply(session: AsyncSession, principal: Principal, application: SellerApplication) -> Seller:
    """
    Submits a seller application for the caller.

    Identity fields (email, name, firebase UID) are copied from the principal.
    The unique constraint on sellers.user_id backs up the existence check
    when two submissions race.

    Args:
        session: Request session
        principal: Authenticated caller
        application: Validated application form

    Returns:
        The new seller row, status pending

    Raises:
        DuplicateApplicationError: If the caller already has a seller row
        StoreError: If the insert fails for another reason
    """
    with LogContext(user_id=principal.user_id):
        existing = await get_seller_by_user_id(session, principal.user_id)
        if existing is not None:
            logger.warning(
                "Duplicate seller application",
                extra={"seller_id": existing.id, "status": existing.approval_status}
            )
            raise DuplicateApplicationError(ERR_DUPLICATE_APPLICATION)

        now = utcnow()
        seller = Seller(
            user_id=principal.user_id,
            firebase_uid=principal.firebase_uid,
            email=principal.email,
            name=principal.name,
            store_name=application.store_name,
            store_description=application.store_description,
            gst_number=application.gst_number,
            address=application.address,
            phone_number=application.phone_number,
            approval_status=ApprovalStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        session.add(seller)

        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.warning("Seller application lost a race with a concurrent submission")
            raise DuplicateApplicationError(ERR_DUPLICATE_APPLICATION) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Failed to store seller application: {e}", exc_info=True)
            raise StoreError(ERR_STORE) from e

        logger.info(
            f"Seller application submitted: {seller.store_name}",
            extra={"seller_id": seller.id, "status": seller.approval_status}
        )
        return seller


async def get_own_profile(session: AsyncSession, firebase_uid: str) -> Seller:
    """
    Looks up the caller's seller profile from their identity-provider UID.

    Raises:
        ResourceNotFoundError: If the user or their seller row is missing
    """
    user = await get_user_by_firebase_uid(session, firebase_uid)
    if user is None:
        raise ResourceNotFoundError(ERR_USER_NOT_FOUND)

    seller = await get_seller_by_user_id(session, user.id)
    if seller is None:
        raise ResourceNotFoundError(ERR_SELLER_PROFILE_NOT_FOUND)

    return seller


async def reapply(session: AsyncSession, principal: Principal, application: SellerApplication) -> Seller:
    """
    Resubmits a rejected application in place.

    The existing row is reset to pending with the new form data so a user
    never holds more than one seller row.

    Raises:
        ResourceNotFoundError: If the caller never applied
        InvalidStateTransitionError: If the application is not rejected
    """
    with LogContext(user_id=principal.user_id):
        seller = await get_seller_by_user_id(session, principal.user_id)
        if seller is None:
            raise ResourceNotFoundError(ERR_SELLER_PROFILE_NOT_FOUND)

        if not is_valid_transition(seller.approval_status, ApprovalStatus.PENDING, by_seller=True):
            logger.warning(
                "Reapply refused",
                extra={"seller_id": seller.id, "status": seller.approval_status}
            )
            raise InvalidStateTransitionError(
                ERR_REAPPLY_NOT_REJECTED,
                details={"approvalStatus": seller.approval_status}
            )

        seller.store_name = application.store_name
        seller.store_description = application.store_description
        seller.gst_number = application.gst_number
        seller.address = application.address
        seller.phone_number = application.phone_number
        seller.approval_status = ApprovalStatus.PENDING.value
        seller.rejection_reason = None
        seller.updated_at = utcnow()

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Failed to resubmit seller application: {e}", exc_info=True)
            raise StoreError(ERR_STORE) from e

        logger.info("Seller application resubmitted", extra={"seller_id": seller.id})
        return seller
