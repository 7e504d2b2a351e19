from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from storefront.core.logger import get_logger
from storefront.db.session import get_session
from storefront.models.user import User
from storefront.routers.user import get_current_user
from storefront.services.cart import CartService

router = APIRouter()
logger = get_logger(__name__)

EMPTY_CART_MESSAGE = "cart is empty"

class CartItemCreate(BaseModel):
    productID: str
    quantity: int = Field(default=1, ge=1)
    size: Optional[str] = None

class CartItemDelete(BaseModel):
    itemID: str

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

def ensure_owner(user_id: str, current_user: User):
    if current_user.id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized")

def storage_error(session: Session, action: str, user_id: str, error: SQLAlchemyError) -> JSONResponse:
    session.rollback()
    logger.error(f"failed to {action}", user_id=user_id, error=error)
    return JSONResponse(status_code=500, content={"error": f"Could not {action}"})

@router.get("/getCart/{user_id}")
def get_cart(
    user_id: str,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """Get the user's cart items, or a message when there are none"""
    ensure_owner(user_id, current_user)
    try:
        cart = service.get_cart(user_id)
    except SQLAlchemyError as e:
        return storage_error(service.session, "load cart", user_id, e)

    if not cart or not cart.items:
        return {"message": EMPTY_CART_MESSAGE}
    return {"items": cart.items}

@router.post("/addItem/{user_id}")
def add_item(
    user_id: str,
    item_in: CartItemCreate,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """Add item to cart"""
    ensure_owner(user_id, current_user)
    try:
        cart = service.add_item(user_id, item_in.productID, item_in.quantity, item_in.size)
    except SQLAlchemyError as e:
        return storage_error(service.session, "add item", user_id, e)
    return {"message": "Item added to cart", "items": cart.items}

@router.patch("/deleteItem/{user_id}")
def delete_item(
    user_id: str,
    item_in: CartItemDelete,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """Remove item from cart"""
    ensure_owner(user_id, current_user)
    try:
        cart = service.delete_item(user_id, item_in.itemID)
    except SQLAlchemyError as e:
        return storage_error(service.session, "delete item", user_id, e)
    return {"message": "Item removed from cart", "items": cart.items if cart else []}
