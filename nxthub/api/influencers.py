"""
Influencers API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from nxthub.api.deps import get_session_context
from nxthub.config import settings
from nxthub.database import get_store
from nxthub.models.influencer import Influencer
from nxthub.models.session import SessionContext
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.influencer import InfluencerCreate
from nxthub.services.influencer_service import InfluencerService

router = APIRouter(prefix=f"{settings.API_PREFIX}/influencers", tags=["influencers"])


@router.get("/", response_model=List[Influencer])
async def list_influencers(
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    language: Optional[str] = Query(None),
    mine: bool = Query(False),
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """List influencers; `mine` restricts to the session's own records."""
    influencer_service = InfluencerService(store)
    return await influencer_service.list(search, category, language, mine, session)


@router.get("/{influencer_id}", response_model=Influencer)
async def get_influencer(
    influencer_id: str,
    store: KeyValueStore = Depends(get_store)
):
    """Get an influencer by ID."""
    influencer_service = InfluencerService(store)
    return await influencer_service.get(influencer_id)


@router.post("/", response_model=List[Influencer], status_code=201)
async def create_influencer(
    influencer_data: InfluencerCreate,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Add an influencer owned by the current session."""
    influencer_service = InfluencerService(store)
    return await influencer_service.create(influencer_data, session)


@router.put("/{influencer_id}", response_model=List[Influencer])
async def update_influencer(
    influencer_id: str,
    influencer: Influencer,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Replace an influencer record (creator only)."""
    influencer_service = InfluencerService(store)
    updated = influencer.model_copy(update={"id": influencer_id})
    return await influencer_service.update(updated, session)


@router.delete("/{influencer_id}", response_model=List[Influencer])
async def delete_influencer(
    influencer_id: str,
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Delete an influencer (creator only); missing ids are ignored."""
    influencer_service = InfluencerService(store)
    return await influencer_service.delete(influencer_id, session)
