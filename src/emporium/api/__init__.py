"""Storefront API package."""

from emporium.api.routes import (
    address_router,
    auth_router,
    cart_router,
    order_router,
    product_router,
    review_router,
    wishlist_router,
)

ROUTERS = [
    auth_router,
    address_router,
    product_router,
    cart_router,
    order_router,
    wishlist_router,
    review_router,
]

__all__ = [
    "ROUTERS",
    "address_router",
    "auth_router",
    "cart_router",
    "order_router",
    "product_router",
    "review_router",
    "wishlist_router",
]
