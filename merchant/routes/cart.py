"""Cart API routes for mock merchant"""

from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import CartLine, SetQuantityRequest
from ..database import CartDatabase, ProductDatabase, get_cart_db, get_product_db
from ..security.auth import Caller, require_user

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("", response_model=list[CartLine])
async def get_cart(
    cart_db: CartDatabase = Depends(get_cart_db),
    caller: Caller = Depends(require_user),
):
    """Get the caller's cart"""
    return cart_db.get_lines(caller.user_id)


@router.put("/items/{product_id}", status_code=204, response_model=None)
async def set_cart_item(
    product_id: str,
    request: SetQuantityRequest,
    cart_db: CartDatabase = Depends(get_cart_db),
    product_db: ProductDatabase = Depends(get_product_db),
    caller: Caller = Depends(require_user),
):
    """Set the quantity of a product in the cart"""
    if not product_db.get_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    cart_db.set_quantity(caller.user_id, product_id, request.quantity)


@router.delete("/items/{product_id}", status_code=204, response_model=None)
async def remove_from_cart(
    product_id: str,
    cart_db: CartDatabase = Depends(get_cart_db),
    caller: Caller = Depends(require_user),
):
    """Remove an item from the cart; absent items are ignored"""
    cart_db.remove_item(caller.user_id, product_id)


@router.delete("", status_code=204, response_model=None)
async def clear_cart(
    cart_db: CartDatabase = Depends(get_cart_db),
    caller: Caller = Depends(require_user),
):
    """Clear all items from the cart"""
    cart_db.clear_cart(caller.user_id)
