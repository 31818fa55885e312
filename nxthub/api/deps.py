"""
API dependencies - shared across all routes.
"""
from typing import Optional

from fastapi import Query

from nxthub.models.session import SessionContext
from nxthub.models.user import Role


def get_session_context(
    role: Optional[Role] = Query(None),
    department: Optional[str] = Query(None),
    email: Optional[str] = Query(None)
) -> SessionContext:
    """Session identity carried in the query string; no role means guest."""
    return SessionContext(role=role, department=department or None, email=email or None)
