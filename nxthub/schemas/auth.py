"""
Authentication schemas.
"""
from pydantic import BaseModel

from nxthub.models.session import SessionContext
from nxthub.models.user import User


class LoginRequest(BaseModel):
    """Email-only login request."""
    email: str
    
    class Config:
        json_schema_extra = {
            "example": {"email": "marketing@nxthub.com"}
        }


class LoginResult(BaseModel):
    """Resolved session plus the matched user for display."""
    session: SessionContext
    user: User
