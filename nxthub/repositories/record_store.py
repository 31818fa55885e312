"""
Record store - the three persisted collections behind one key-value backend.
"""
import logging

from nxthub.repositories.campaign_repo import CampaignRepository
from nxthub.repositories.influencer_repo import InfluencerRepository
from nxthub.repositories.store import KeyValueStore
from nxthub.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class RecordStore:
    """Groups the users, influencers and campaigns collections."""
    
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.users = UserRepository(store)
        self.influencers = InfluencerRepository(store)
        self.campaigns = CampaignRepository(store)
    
    async def initialize(self) -> None:
        """Seed every collection that has no data yet."""
        for repo in (self.users, self.influencers, self.campaigns):
            if not await repo.is_initialized():
                await repo.reseed()
        logger.info("Record store initialized")
