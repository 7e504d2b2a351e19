from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
from storefront.models.document import DocumentRead, new_object_id, utcnow

class User(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True)

    # Basic Info
    name: Optional[str] = None
    email: str = Field(unique=True, index=True)
    password_hash: str

    # Account Status
    is_admin: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)

class UserRead(DocumentRead):
    name: Optional[str] = None
    email: str
    is_admin: bool = False
