"""
Campaign repository.
"""
from typing import List

from nxthub.core.seed_data import SEED_CAMPAIGNS
from nxthub.models.campaign import Campaign
from nxthub.repositories.base import BaseRepository
from nxthub.repositories.store import KeyValueStore


class CampaignRepository(BaseRepository[Campaign]):
    """Repository for Campaign collection operations."""
    
    def __init__(self, store: KeyValueStore):
        super().__init__(Campaign, store, "campaigns", SEED_CAMPAIGNS)
    
    async def get_by_department(self, department: str) -> List[Campaign]:
        """Campaigns of a department (case-insensitive)."""
        wanted = department.lower()
        return [c for c in await self.list() if c.department.lower() == wanted]
    
    async def list_recent(self) -> List[Campaign]:
        """All campaigns, most recently updated first."""
        return sorted(await self.list(), key=lambda c: c.activity_at, reverse=True)
