"""
Dashboard API routes.
"""
from fastapi import APIRouter, Depends

from nxthub.api.deps import get_session_context
from nxthub.config import settings
from nxthub.database import get_store
from nxthub.models.session import SessionContext
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.dashboard import DashboardSummary
from nxthub.services.dashboard_service import DashboardService

router = APIRouter(prefix=f"{settings.API_PREFIX}/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardSummary)
async def get_dashboard(
    session: SessionContext = Depends(get_session_context),
    store: KeyValueStore = Depends(get_store)
):
    """Summary statistics scoped to the session's department."""
    dashboard_service = DashboardService(store)
    return await dashboard_service.summary(session)
