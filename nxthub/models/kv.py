"""
Key-value entry table backing the SQL record store.
One row per collection; the value is the whole collection as JSON.
"""
from datetime import datetime

from sqlmodel import SQLModel, Field

from nxthub.models.base import utcnow


class KeyValueEntry(SQLModel, table=True):
    __tablename__ = "kv_entry"
    
    key: str = Field(primary_key=True)
    value: str
    
    # Timestamps
    updated_at: datetime = Field(default_factory=utcnow)
