"""
app/api/admin.py

Purpose: Admin console endpoints

- List all sellers and the pending queue (oldest first)
- Approve / reject seller applications
"""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.api.deps import require_admin
from app.db.database import get_session
from app.schemas.seller import RejectRequest, SellerActionResponse, SellerOut
from app.services import admin_service
from utils.constants import MSG_SELLER_APPROVED, MSG_SELLER_REJECTED

router = APIRouter(prefix="/admin/sellers", dependencies=[Depends(require_admin)])


@router.get("", response_model=List[SellerOut])
async def list_sellers(session: AsyncSession = Depends(get_session)):
    """Every seller application, oldest first."""
    return await admin_service.list_all_sellers(session)


@router.get("/pending", response_model=List[SellerOut])
async def list_pending_sellers(session: AsyncSession = Depends(get_session)):
    """Applications waiting for review, oldest first."""
    return await admin_service.list_pending(session)


@router.put("/{seller_id}/approve", response_model=SellerActionResponse)
async def approve_seller(seller_id: int, session: AsyncSession = Depends(get_session)):
    """
    Approves the application and promotes the user to seller in one transaction.
    """
    seller = await admin_service.approve(session, seller_id)
    return SellerActionResponse(
        message=MSG_SELLER_APPROVED,
        seller=SellerOut.model_validate(seller),
    )


@router.put("/{seller_id}/reject", response_model=SellerActionResponse)
async def reject_seller(
    seller_id: int,
    body: Optional[RejectRequest] = Body(None),
    session: AsyncSession = Depends(get_session),
):
    """
    Rejects the application. The optional reason is stored on the seller.
    """
    reason = body.reason if body else None
    seller = await admin_service.reject(session, seller_id, reason)
    return SellerActionResponse(
        message=MSG_SELLER_REJECTED,
        seller=SellerOut.model_validate(seller),
    )
