"""
User repository.
"""
from typing import Optional

from nxthub.core.seed_data import SEED_USERS
from nxthub.models.user import User
from nxthub.repositories.base import BaseRepository
from nxthub.repositories.store import KeyValueStore


class UserRepository(BaseRepository[User]):
    """Repository for User lookups."""
    
    def __init__(self, store: KeyValueStore):
        super().__init__(User, store, "users", SEED_USERS)
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive exact match)."""
        wanted = email.lower()
        for user in await self.list():
            if user.email.lower() == wanted:
                return user
        return None
