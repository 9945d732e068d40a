"""Checkout API routes for mock merchant"""

import logging

from fastapi import APIRouter, HTTPException, Depends

from ..models.checkout import CheckoutRequest, CheckoutResponse
from ..database import (
    CartDatabase,
    OrderDatabase,
    ProductDatabase,
    get_cart_db,
    get_order_db,
    get_product_db,
)
from ..security.auth import Caller, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    order_db: OrderDatabase = Depends(get_order_db),
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(require_user),
):
    """
    Convert the caller's cart into an order.

    The cart is read server-side at commit time and priced from the
    current catalog. On success the cart is emptied; on any refusal the
    cart is left exactly as it was.
    """
    lines = cart_db.get_lines(caller.user_id)
    if not lines:
        raise HTTPException(status_code=400, detail="Cart is empty")

    # Price every line before changing anything
    total = 0
    for line in lines:
        product = product_db.get_product(line.product_id)
        if not product:
            raise HTTPException(
                status_code=409,
                detail=f"Product {line.product_id} is no longer available",
            )
        total += product.price * line.quantity

    order = order_db.create_order(
        user_id=caller.user_id,
        request=request,
        items=lines,
        total=total,
    )

    # Clear the cart after successful checkout
    cart_db.clear_cart(caller.user_id)

    logger.info(f"Order {order.id} created for {caller.user_id}: {order.total} cents")

    return CheckoutResponse(order_id=order.id)
