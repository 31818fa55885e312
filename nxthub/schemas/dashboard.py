"""
Dashboard schemas.
"""
from typing import Dict, List

from pydantic import BaseModel

from nxthub.schemas.campaign import CampaignView


class DashboardSummary(BaseModel):
    """Department-scoped statistics and recent activity."""
    display_name: str
    total_influencers: int
    total_campaigns: int
    approved_campaigns: int
    status_breakdown: Dict[str, int]
    recent_campaigns: List[CampaignView]
