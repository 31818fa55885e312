"""
Base record model shared by all persisted collections.
Records are stored as camelCase JSON to keep the browser-era key layout.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Base class for records persisted in a collection."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_record(self) -> Dict[str, Any]:
        """Serialize for storage (camelCase, optional fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
