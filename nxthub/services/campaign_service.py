"""
Campaign service - campaign lifecycle management.

Status lifecycle:
    Pending <-> Approved <-> Rejected   (set_status, department managers only)
    any non-terminal -> Completed       (complete, one-way)
"""
import logging
import uuid
from datetime import date
from typing import Optional, List

from nxthub.core.exceptions import (
    AlreadyCompletedError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from nxthub.core.permissions import (
    can_complete_campaign,
    can_create_campaign,
    can_edit_campaign,
)
from nxthub.models.base import utcnow
from nxthub.models.campaign import Campaign, CampaignStatus, EDITABLE_STATUSES
from nxthub.models.influencer import Influencer
from nxthub.models.session import SessionContext
from nxthub.repositories.campaign_repo import CampaignRepository
from nxthub.repositories.influencer_repo import InfluencerRepository
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.campaign import CampaignCreate, CampaignView

logger = logging.getLogger(__name__)

UNASSIGNED = "Unassigned"
ALL = "All"


def influencer_name(influencer_id: Optional[str], influencers: List[Influencer]) -> str:
    """Resolve a weak influencer reference; misses render as unassigned."""
    if influencer_id:
        for influencer in influencers:
            if influencer.id == influencer_id:
                return influencer.name
    return UNASSIGNED


class CampaignService:
    """Service for campaign operations."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.campaign_repo = CampaignRepository(store)
        self.influencer_repo = InfluencerRepository(store)

    async def list(
        self,
        search: Optional[str] = None,
        department: Optional[str] = None,
        start_date: Optional[date] = None
    ) -> List[Campaign]:
        """List campaigns with optional name search, department and start date filters."""
        campaigns = await self.campaign_repo.list()

        if search:
            needle = search.lower()
            campaigns = [c for c in campaigns if needle in c.name.lower()]
        if department and department != ALL:
            campaigns = [c for c in campaigns if c.department == department]
        if start_date:
            campaigns = [c for c in campaigns if c.start_date == start_date]

        return campaigns

    async def list_views(
        self,
        session: SessionContext,
        search: Optional[str] = None,
        department: Optional[str] = None,
        start_date: Optional[date] = None
    ) -> List[CampaignView]:
        """Campaigns with influencer names and per-session edit rights."""
        campaigns = await self.list(search, department, start_date)
        influencers = await self.influencer_repo.list()
        return [
            CampaignView(
                campaign=campaign,
                influencer_name=influencer_name(campaign.influencer_id, influencers),
                can_edit=can_edit_campaign(session, campaign),
                can_complete=can_complete_campaign(session, campaign)
            )
            for campaign in campaigns
        ]

    async def get(self, campaign_id: str) -> Campaign:
        """Get a campaign by ID."""
        campaign = await self.campaign_repo.get(campaign_id)
        if not campaign:
            raise NotFoundError("Campaign", campaign_id)
        return campaign

    async def create(self, draft: CampaignCreate, session: SessionContext) -> List[Campaign]:
        """Log a new campaign; it starts Pending."""
        if not can_create_campaign(session):
            logger.warning(f"Campaign creation denied for {session.email or 'guest'}")
            raise UnauthorizedError("Unauthorized: only department managers can log campaigns.")

        if not draft.name or not draft.name.strip():
            raise ValidationError("This field is required", field="name")
        if not draft.department:
            raise ValidationError("This field is required", field="department")
        if draft.budget is None:
            raise ValidationError("This field is required", field="budget")
        if not draft.start_date:
            raise ValidationError("This field is required", field="start_date")

        campaign = Campaign(
            id=f"c_{uuid.uuid4().hex[:12]}",
            name=draft.name.strip(),
            influencer_id=draft.influencer_id or None,
            department=draft.department,
            status=CampaignStatus.PENDING,
            budget=draft.budget,
            start_date=draft.start_date,
            end_date=draft.end_date or draft.start_date,
            deliverables=draft.deliverables,
            last_updated=utcnow()
        )

        campaigns = await self.campaign_repo.list()
        updated = await self.campaign_repo.replace_all([campaign, *campaigns])

        logger.info(f"Campaign '{campaign.name}' ({campaign.id}) logged by {session.email}")
        return updated

    async def set_status(
        self,
        campaign_id: str,
        new_status: CampaignStatus,
        session: SessionContext
    ) -> List[Campaign]:
        """Move a campaign between Pending, Approved and Rejected."""
        try:
            new_status = CampaignStatus(new_status)
        except ValueError:
            raise ValidationError(f"Unknown status '{new_status}'", field="status")

        campaigns = await self.campaign_repo.list()
        campaign = _find(campaigns, campaign_id)

        if not can_edit_campaign(session, campaign):
            logger.warning(
                f"Status change on {campaign_id} denied for {session.email or 'guest'}"
            )
            raise UnauthorizedError()

        if new_status not in EDITABLE_STATUSES:
            raise UnauthorizedError(
                "Unauthorized: campaigns can only be completed by logging completion."
            )

        if campaign.is_completed:
            raise AlreadyCompletedError(campaign_id)

        updated = [
            c.model_copy(update={"status": new_status, "last_updated": utcnow()})
            if c.id == campaign_id else c
            for c in campaigns
        ]
        updated = await self.campaign_repo.replace_all(updated)

        logger.info(f"Campaign {campaign_id} status updated to {new_status.value}")
        return updated

    async def complete(
        self,
        campaign_id: str,
        completion_date: Optional[date],
        summary: Optional[str],
        session: SessionContext,
        rating: Optional[int] = None
    ) -> List[Campaign]:
        """Log completion; Completed is terminal."""
        campaigns = await self.campaign_repo.list()
        campaign = _find(campaigns, campaign_id)

        if not can_edit_campaign(session, campaign):
            logger.warning(
                f"Completion of {campaign_id} denied for {session.email or 'guest'}"
            )
            raise UnauthorizedError()

        if campaign.is_completed:
            raise AlreadyCompletedError(campaign_id)

        if not completion_date:
            raise ValidationError("This field is required", field="completion_date")
        if not summary or not summary.strip():
            raise ValidationError("This field is required", field="summary")

        completed = campaign.model_copy(update={
            "status": CampaignStatus.COMPLETED,
            "completion_date": completion_date,
            "completion_summary": summary.strip(),
            "rating": rating,
            "last_updated": utcnow()
        })
        updated = [completed if c.id == campaign_id else c for c in campaigns]
        updated = await self.campaign_repo.replace_all(updated)

        logger.info(f"Campaign {campaign_id} completed on {completion_date.isoformat()}")
        return updated


def _find(campaigns: List[Campaign], campaign_id: str) -> Campaign:
    for campaign in campaigns:
        if campaign.id == campaign_id:
            return campaign
    raise NotFoundError("Campaign", campaign_id)
