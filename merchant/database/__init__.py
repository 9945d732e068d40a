# Database modules
#
# Each app instance owns its databases (app.state); routes reach them
# through the dependency functions below.

from fastapi import Request

from .products import ProductDatabase, SEED_PRODUCTS
from .carts import CartDatabase
from .orders import OrderDatabase
from .users import UserDatabase


def get_product_db(request: Request) -> ProductDatabase:
    return request.app.state.product_db


def get_cart_db(request: Request) -> CartDatabase:
    return request.app.state.cart_db


def get_order_db(request: Request) -> OrderDatabase:
    return request.app.state.order_db


def get_user_db(request: Request) -> UserDatabase:
    return request.app.state.user_db


__all__ = [
    "ProductDatabase",
    "SEED_PRODUCTS",
    "CartDatabase",
    "OrderDatabase",
    "UserDatabase",
    "get_product_db",
    "get_cart_db",
    "get_order_db",
    "get_user_db",
]
