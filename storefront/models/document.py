from datetime import datetime, timezone
import secrets
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

def new_object_id() -> str:
    """24 hex characters, the shape of a document store ObjectId."""
    return secrets.token_hex(12)

class DocumentRead(BaseModel):
    """Base for API payloads that expose the document id as `_id`."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")

def utcnow() -> datetime:
    return datetime.now(timezone.utc)
