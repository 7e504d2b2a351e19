"""Shared state handed to the cart controller.

The catalog and user are read by the cart, the cart is written only by the
cart controller, and the checkout total is written on every cart change and
read by the checkout step.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from storefront.client.models import DisplayCartItem, Product


@dataclass
class UserContext:
    user_id: Optional[str] = None
    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id and self.token)


@dataclass
class ProductContext:
    products: Optional[List[Product]] = None

    def load(self, api) -> None:
        response = api.get_products()
        if response.ok:
            self.products = [Product.model_validate(p) for p in response.data]


@dataclass
class CartContext:
    cart: List[DisplayCartItem] = field(default_factory=list)


@dataclass
class CheckoutContext:
    total_bill: float = 0
