"""
Authentication service - email-only identity resolution.
No credential is checked: a registered email is enough to sign in.
"""
import asyncio
import logging
from typing import Optional

from nxthub.config import settings
from nxthub.core.exceptions import InvalidConfigurationError, UserNotFoundError
from nxthub.models.session import SessionContext
from nxthub.models.user import Role
from nxthub.repositories.store import KeyValueStore
from nxthub.repositories.user_repo import UserRepository
from nxthub.schemas.auth import LoginResult

logger = logging.getLogger(__name__)


class AuthService:
    """Service for login operations."""
    
    def __init__(self, store: KeyValueStore, delay: Optional[float] = None):
        self.store = store
        self.user_repo = UserRepository(store)
        self.delay = settings.LOGIN_DELAY_SECONDS if delay is None else delay
    
    async def resolve(self, email: str) -> LoginResult:
        """Map an email to a session context. Read-only."""
        email = (email or "").strip()
        user = await self.user_repo.get_by_email(email) if email else None
        if not user:
            logger.warning(f"Login attempt for unknown email '{email}'")
            raise UserNotFoundError(email or None)
        
        if user.role == Role.MANAGER and not user.department:
            logger.error(f"Manager {user.email} has no department assigned")
            raise InvalidConfigurationError()
        
        session = SessionContext(
            role=user.role,
            department=user.department,
            email=user.email
        )
        return LoginResult(session=session, user=user)
    
    async def login(self, email: str) -> LoginResult:
        """Resolve after the simulated network delay; cancelable while waiting."""
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        
        result = await self.resolve(email)
        logger.info(f"User {result.user.email} logged in as {result.user.role.value}")
        return result
