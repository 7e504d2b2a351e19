from typing import List, Optional
from datetime import datetime
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from storefront.models.document import new_object_id, utcnow

class Cart(SQLModel, table=True):
    """One cart document per user; line items are embedded."""
    id: str = Field(default_factory=new_object_id, primary_key=True)

    # References
    user_id: str = Field(foreign_key="user.id", index=True, unique=True)

    # Embedded line items: {_id, productID, quantity, size}
    items: List[dict] = Field(default=[], sa_column=Column(JSON))

    # Timestamps
    updated_at: datetime = Field(default_factory=utcnow)

def new_line_item(product_id: str, quantity: int, size: Optional[str]) -> dict:
    return {
        "_id": new_object_id(),
        "productID": product_id,
        "quantity": quantity,
        "size": size,
    }
