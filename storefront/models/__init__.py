# Import all models to register them with SQLModel
from storefront.models.user import User, UserRead
from storefront.models.product import Product, ProductRead
from storefront.models.cart import Cart

__all__ = [
    "User",
    "UserRead",
    "Product",
    "ProductRead",
    "Cart",
]
