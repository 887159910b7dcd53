"""
app/api/sellers.py

Purpose: Seller-facing endpoints

- Apply / reapply to become a seller
- Read own seller profile
- List and add products (approved sellers only)
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.api.deps import get_current_principal, get_identity, require_approved_seller
from app.db.database import get_session
from app.schemas.auth import Identity, Principal
from app.schemas.product import ProductCreate, ProductCreatedResponse, ProductOut
from app.schemas.seller import SellerActionResponse, SellerApplication, SellerOut
from app.services import catalog_service, seller_service
from utils.constants import (
    MSG_APPLICATION_RESUBMITTED,
    MSG_APPLICATION_SUBMITTED,
    MSG_PRODUCT_ADDED,
)

router = APIRouter(prefix="/sellers")


@router.post("/apply", response_model=SellerActionResponse)
async def apply_for_seller(
    application: SellerApplication,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Submits a seller application. A user may apply only once.
    """
    seller = await seller_service.apply(session, principal, application)
    return SellerActionResponse(
        message=MSG_APPLICATION_SUBMITTED,
        seller=SellerOut.model_validate(seller),
    )


@router.post("/reapply", response_model=SellerActionResponse)
async def reapply_for_seller(
    application: SellerApplication,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Resubmits a rejected application; it goes back to the pending queue.
    """
    seller = await seller_service.reapply(session, principal, application)
    return SellerActionResponse(
        message=MSG_APPLICATION_RESUBMITTED,
        seller=SellerOut.model_validate(seller),
    )


@router.get("/me", response_model=SellerOut)
async def get_my_seller_profile(
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """
    The caller's seller profile, whatever its approval status.
    """
    return await seller_service.get_own_profile(session, identity.uid)


@router.get("/products", response_model=List[ProductOut])
async def list_my_products(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session),
):
    return await catalog_service.list_own_products(session, principal.user_id)


@router.post(
    "/products",
    response_model=ProductCreatedResponse,
    dependencies=[Depends(require_approved_seller)],
)
async def add_my_product(
    payload: ProductCreate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Adds a product. Prices are stored exactly as the decimal text sent.
    """
    product = await catalog_service.add_product(session, principal.user_id, payload)
    return ProductCreatedResponse(
        message=MSG_PRODUCT_ADDED,
        product=ProductOut.model_validate(product),
    )
