"""
Authentication API routes.
"""
from fastapi import APIRouter, Depends

from nxthub.config import settings
from nxthub.database import get_store
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.auth import LoginRequest, LoginResult
from nxthub.services.auth_service import AuthService

router = APIRouter(prefix=f"{settings.API_PREFIX}/auth", tags=["auth"])


@router.post("/login", response_model=LoginResult)
async def login(
    request: LoginRequest,
    store: KeyValueStore = Depends(get_store)
):
    """Sign in by email only."""
    auth_service = AuthService(store)
    return await auth_service.login(request.email)
