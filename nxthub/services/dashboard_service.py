"""
Dashboard service - department-scoped statistics and recent activity.
"""
from collections import Counter

from nxthub.core.permissions import can_complete_campaign, can_edit_campaign
from nxthub.models.campaign import CampaignStatus
from nxthub.models.session import SessionContext
from nxthub.repositories.campaign_repo import CampaignRepository
from nxthub.repositories.influencer_repo import InfluencerRepository
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.campaign import CampaignView
from nxthub.schemas.dashboard import DashboardSummary
from nxthub.services.campaign_service import influencer_name


def display_name(session: SessionContext) -> str:
    if session.is_manager and session.department:
        return f"{session.department} Manager"
    if session.role:
        return session.role.value
    return "Guest"


class DashboardService:
    """Service for dashboard statistics."""
    
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.campaign_repo = CampaignRepository(store)
        self.influencer_repo = InfluencerRepository(store)
    
    async def summary(self, session: SessionContext) -> DashboardSummary:
        """Managers see their own department; everyone else sees all campaigns."""
        if session.is_manager and session.department:
            campaigns = await self.campaign_repo.get_by_department(session.department)
        else:
            campaigns = await self.campaign_repo.list()
        influencers = await self.influencer_repo.list()
        
        recent = sorted(campaigns, key=lambda c: c.activity_at, reverse=True)
        counts = Counter(c.status for c in campaigns)
        
        return DashboardSummary(
            display_name=display_name(session),
            total_influencers=len(influencers),
            total_campaigns=len(campaigns),
            approved_campaigns=counts[CampaignStatus.APPROVED],
            status_breakdown={status.value: counts[status] for status in CampaignStatus},
            recent_campaigns=[
                CampaignView(
                    campaign=c,
                    influencer_name=influencer_name(c.influencer_id, influencers),
                    can_edit=can_edit_campaign(session, c),
                    can_complete=can_complete_campaign(session, c)
                )
                for c in recent
            ]
        )
