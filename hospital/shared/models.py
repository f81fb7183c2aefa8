from beanie import Document
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class TimestampMixin(BaseModel):
    """Mixin for adding timestamp fields to documents."""

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class BaseDocument(Document, TimestampMixin):
    """Base document class with timestamps and a write counter."""

    # Incremented on every write; updates are conditional on it
    version: int = 0

    model_config = ConfigDict(use_enum_values=True)

    class Settings:
        use_state_management = True
