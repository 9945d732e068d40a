"""Order API routes for mock merchant"""

from fastapi import APIRouter, HTTPException, Depends

from ..models.checkout import Order
from ..database import OrderDatabase, get_order_db
from ..security.auth import Caller, require_user, require_admin

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=list[Order])
async def list_all_orders(
    order_db: OrderDatabase = Depends(get_order_db),
    caller: Caller = Depends(require_admin),
):
    """List every order (admin only)"""
    return order_db.list_orders()


@router.get("/mine", response_model=list[Order])
async def list_my_orders(
    order_db: OrderDatabase = Depends(get_order_db),
    caller: Caller = Depends(require_user),
):
    """List the caller's orders"""
    return order_db.list_orders(user_id=caller.user_id)


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    order_db: OrderDatabase = Depends(get_order_db),
    caller: Caller = Depends(require_user),
):
    """Get order details; other users' orders read as not found"""
    order = order_db.get_order(order_id)
    if not order or (order.user_id != caller.user_id and not caller.is_admin):
        raise HTTPException(status_code=404, detail="Order not found")
    return order
