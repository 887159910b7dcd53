"""
app/api/deps.py

Purpose: Authentication and authorization dependencies

- Extracts the bearer token and verifies it with the identity provider
- Resolves the identity to a marketplace principal
- Role (admin) and approval (seller) gates
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.core.exceptions import AuthenticationError, ForbiddenError
from app.core.logging import get_logger
from app.db.database import get_session
from app.models.seller import Seller
from app.schemas.auth import Identity, Principal
from app.services import catalog_service
from app.services.identity_service import IdentityProvider, get_identity_provider
from app.services.user_service import get_user_by_firebase_uid, to_principal
from utils.constants import ERR_ADMIN_ONLY, ERR_MISSING_TOKEN, ERR_UNREGISTERED_USER

logger = get_logger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Returns the token from an "Authorization: Bearer <token>" header.

    Raises:
        AuthenticationError: If the header is missing or malformed
    """
    if not authorization:
        raise AuthenticationError(ERR_MISSING_TOKEN)

    parts = authorization.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise AuthenticationError(ERR_MISSING_TOKEN)

    return parts[1].strip()


async def get_identity(
    authorization: Optional[str] = Header(None),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Verified identity of the caller."""
    token = extract_bearer_token(authorization)
    return await provider.verify_token(token)


async def get_current_principal(
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
) -> Principal:
    """
    Caller resolved to their user row.

    Raises:
        AuthenticationError: If the identity has no user row
    """
    user = await get_user_by_firebase_uid(session, identity.uid)
    if user is None:
        logger.info(f"Identity {identity.uid} has no user row")
        raise AuthenticationError(ERR_UNREGISTERED_USER)
    return to_principal(user)


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    """
    Raises:
        ForbiddenError: If the caller is not an admin
    """
    if not principal.is_admin:
        logger.warning("Admin route refused", extra={"user_id": principal.user_id})
        raise ForbiddenError(ERR_ADMIN_ONLY)
    return principal


async def require_approved_seller(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session),
) -> Seller:
    """
    Approval gate resolved before the request body is validated, so an
    unapproved seller is refused whatever they send.
    """
    return await catalog_service.get_approved_seller(session, principal.user_id)
