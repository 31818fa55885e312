"""
User model.
Users are seeded once and never mutated by the core.
"""
from enum import Enum
from typing import Optional

from nxthub.models.base import RecordModel


class Role(str, Enum):
    MANAGER = "manager"
    EXECUTIVE = "executive"


class User(RecordModel):
    """
    A registered user. Managers are scoped to a department,
    executives observe every department read-only.
    """
    id: str
    name: str
    email: str  # unique, matched case-insensitively
    role: Role
    department: Optional[str] = None
    avatar: str = ""
