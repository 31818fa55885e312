"""
Session context - the identity every authorization decision is made under.
"""
from typing import Optional

from pydantic import BaseModel

from nxthub.models.user import Role


class SessionContext(BaseModel):
    """
    Resolved identity (role, department, email).
    A missing role is a guest context with no mutation rights.
    """
    role: Optional[Role] = None
    department: Optional[str] = None
    email: Optional[str] = None

    class Config:
        frozen = True

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    @property
    def is_executive(self) -> bool:
        return self.role == Role.EXECUTIVE

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER

    @classmethod
    def guest(cls) -> "SessionContext":
        return cls()
