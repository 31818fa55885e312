"""
Influencer repository.
"""
from typing import List

from nxthub.core.seed_data import SEED_INFLUENCERS
from nxthub.models.influencer import Influencer
from nxthub.repositories.base import BaseRepository
from nxthub.repositories.store import KeyValueStore


class InfluencerRepository(BaseRepository[Influencer]):
    """Repository for Influencer collection operations."""
    
    def __init__(self, store: KeyValueStore):
        super().__init__(Influencer, store, "influencers", SEED_INFLUENCERS)
    
    async def get_by_owner(self, email: str) -> List[Influencer]:
        """Influencers created by the given session email."""
        return [i for i in await self.list() if i.created_by and i.created_by == email]
