from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")


class CartItem(Document):
    """A raw cart line as stored on the server."""

    productID: str
    quantity: int
    size: Optional[str] = None


class Product(Document):
    category: Optional[str] = None
    title: Optional[str] = None
    price: float
    images: List[str] = []


class DisplayCartItem(Document):
    """A cart line joined with its product, ready to render."""

    productID: str
    category: Optional[str] = None
    quantity: int
    size: Optional[str] = None
    title: Optional[str] = None
    price: float
    images: List[str] = []

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class UnresolvedCartItem(BaseModel):
    """A cart line whose product is missing from the loaded catalog."""

    item: CartItem
    reason: str = "product not found"
