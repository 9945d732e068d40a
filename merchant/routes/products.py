"""Product API routes for mock merchant"""

import logging

from fastapi import APIRouter, HTTPException, Depends

from ..models.product import Product, ProductFieldsRequest, ProductCreatedResponse
from ..database import ProductDatabase, get_product_db
from ..security.auth import Caller, optional_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(optional_user),
):
    """List the full catalog"""
    return product_db.get_all_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(optional_user),
):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductCreatedResponse, status_code=201)
async def create_product(
    request: ProductFieldsRequest,
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(require_admin),
):
    """Create a product (admin only)"""
    product = product_db.create_product(request)
    logger.info(f"Product {product.id} created by {caller.user_id}")
    return ProductCreatedResponse(id=product.id)


@router.put("/{product_id}", status_code=204, response_model=None)
async def update_product(
    product_id: str,
    request: ProductFieldsRequest,
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(require_admin),
):
    """Update a product (admin only)"""
    if not product_db.update_product(product_id, request):
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product {product_id} updated by {caller.user_id}")


@router.delete("/{product_id}", status_code=204, response_model=None)
async def delete_product(
    product_id: str,
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(require_admin),
):
    """Delete a product (admin only); existing orders keep their copy"""
    if not product_db.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product {product_id} deleted by {caller.user_id}")
