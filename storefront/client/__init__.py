from storefront.client.api import ApiResponse, StorefrontAPI, TransportError
from storefront.client.adapter import join_cart, resolved_items, unresolved_items
from storefront.client.context import CartContext, CheckoutContext, ProductContext, UserContext
from storefront.client.controller import CartController, DeleteOutcome, DeleteState, FetchOutcome

__all__ = [
    "ApiResponse",
    "StorefrontAPI",
    "TransportError",
    "join_cart",
    "resolved_items",
    "unresolved_items",
    "CartContext",
    "CheckoutContext",
    "ProductContext",
    "UserContext",
    "CartController",
    "DeleteOutcome",
    "DeleteState",
    "FetchOutcome",
]
