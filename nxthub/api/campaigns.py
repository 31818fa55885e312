"""
Campaigns API routes.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from nxthub.api.deps import get_session_context
from nxthub.config import settings
from nxthub.database import get_store
from nxthub.models.campaign import Campaign
from nxthub.models.session import SessionContext
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.campaign import (
    CampaignComplete,
    CampaignCreate,
    CampaignStatusUpdate,
    CampaignView,
)
from nxthub.services.campaign_service import CampaignService

router = APIRouter(prefix=f"{settings.API_PREFIX}/campaigns", tags=["campaigns"])


@router.get("/", response_model=List[CampaignView])
async def list_campaigns(
    search: Optional[str] = Query(None),
    department: Optional[str] = Query(None, alias="filter_department"),
    start_date: Optional[date] = Query(None),
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """List campaigns with edit rights for the current session."""
    campaign_service = CampaignService(store)
    return await campaign_service.list_views(session, search, department, start_date)


@router.get("/{campaign_id}", response_model=Campaign)
async def get_campaign(
    campaign_id: str,
    store: KeyValueStore = Depends(get_store)
):
    """Get a campaign by ID."""
    campaign_service = CampaignService(store)
    return await campaign_service.get(campaign_id)


@router.post("/", response_model=List[Campaign], status_code=201)
async def create_campaign(
    campaign_data: CampaignCreate,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Log a new campaign."""
    campaign_service = CampaignService(store)
    return await campaign_service.create(campaign_data, session)


@router.patch("/{campaign_id}/status", response_model=List[Campaign])
async def update_campaign_status(
    campaign_id: str,
    status_data: CampaignStatusUpdate,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Approve, reject or reset a campaign."""
    campaign_service = CampaignService(store)
    return await campaign_service.set_status(campaign_id, status_data.status, session)


@router.post("/{campaign_id}/complete", response_model=List[Campaign])
async def complete_campaign(
    campaign_id: str,
    completion: CampaignComplete,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Log completion of a campaign."""
    campaign_service = CampaignService(store)
    return await campaign_service.complete(
        campaign_id,
        completion.completion_date,
        completion.summary,
        session,
        rating=completion.rating
    )
