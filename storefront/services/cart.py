from typing import Optional
from sqlmodel import Session, select
from fastapi import HTTPException

from storefront.core.logger import get_logger
from storefront.models.cart import Cart, new_line_item
from storefront.models.product import Product
from storefront.models.document import utcnow

logger = get_logger(__name__)

class CartService:
    def __init__(self, session: Session):
        self.session = session

    def get_cart(self, user_id: str) -> Optional[Cart]:
        return self.session.exec(select(Cart).where(Cart.user_id == user_id)).first()

    def add_item(self, user_id: str, product_id: str, quantity: int = 1, size: Optional[str] = None) -> Cart:
        """Add a line item, merging with an existing line for the same product and size"""
        if not self.session.get(Product, product_id):
            raise HTTPException(status_code=404, detail="Product not found")

        cart = self.get_cart(user_id)
        if not cart:
            cart = Cart(user_id=user_id, items=[])

        items = [dict(item) for item in cart.items]
        for item in items:
            if item["productID"] == product_id and item.get("size") == size:
                item["quantity"] += quantity
                break
        else:
            items.append(new_line_item(product_id, quantity, size))

        # JSON columns only persist on reassignment
        cart.items = items
        cart.updated_at = utcnow()
        self.session.add(cart)
        self.session.commit()
        self.session.refresh(cart)
        logger.info("cart item added", user_id=user_id, product_id=product_id, quantity=quantity)
        return cart

    def delete_item(self, user_id: str, item_id: str) -> Optional[Cart]:
        """Remove a line item by id. Removing an absent id leaves the cart as it is."""
        cart = self.get_cart(user_id)
        if not cart:
            return None

        remaining = [item for item in cart.items if item["_id"] != item_id]
        if len(remaining) == len(cart.items):
            return cart

        cart.items = remaining
        cart.updated_at = utcnow()
        self.session.add(cart)
        self.session.commit()
        self.session.refresh(cart)
        logger.info("cart item deleted", user_id=user_id, item_id=item_id)
        return cart
