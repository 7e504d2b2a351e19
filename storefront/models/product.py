from typing import Optional, List
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from datetime import datetime
from storefront.models.document import DocumentRead, new_object_id, utcnow

class Product(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True)

    # Basic Info
    category: str = Field(index=True)
    title: str
    description: Optional[str] = None

    # Pricing
    price: float

    # Images, relative to the static asset prefix
    images: List[str] = Field(default=[], sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow)

class ProductRead(DocumentRead):
    category: str
    title: str
    description: Optional[str] = None
    price: float
    images: List[str] = []
