"""
app/services/user_service.py

Purpose: User data management

- Resolve an identity to its marketplace user row
- Create users (admin bootstrap)
- Promote a user to seller once their application is approved
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.core.exceptions import StoreError
from app.core.logging import get_logger
from app.flow.states import ApprovalStatus, UserRole
from app.models.user import User
from app.schemas.auth import Principal
from utils.constants import ERR_STORE
from utils.time_utils import utcnow

logger = get_logger(__name__)


async def get_user_by_firebase_uid(session: AsyncSession, firebase_uid: str) -> Optional[User]:
    """
    Retrieves a user by identity-provider UID.

    Returns:
        User row or None if not registered
    """
    result = await session.execute(select(User).where(User.firebase_uid == firebase_uid).limit(1))
    return result.scalar_one_or_none()


def to_principal(user: User) -> Principal:
    return Principal(
        user_id=user.id,
        firebase_uid=user.firebase_uid,
        email=user.email,
        name=user.name,
        role=UserRole(user.role),
    )


async def create_user(
    session: AsyncSession,
    firebase_uid: str,
    email: str,
    name: Optional[str] = None,
    role: UserRole = UserRole.BUYER,
) -> User:
    """
    Inserts a user row.

    Raises:
        StoreError: If the insert fails (e.g. UID already registered)
    """
    user = User(
        firebase_uid=firebase_uid,
        email=email,
        name=name,
        role=role.value,
    )
    session.add(user)
    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Failed to create user {email}: {e}", exc_info=True)
        raise StoreError(ERR_STORE) from e

    logger.info("User created", extra={"user_id": user.id})
    return user


def promote_to_seller(user: User):
    """
    Marks a user as an approved seller. Admins keep their role.

    Only mutates the row; the caller commits together with the seller update.
    """
    if user.role != UserRole.ADMIN.value:
        user.role = UserRole.SELLER.value
    user.approval_status = ApprovalStatus.APPROVED.value
    user.updated_at = utcnow()
