"""
Campaign schemas.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from nxthub.models.campaign import Campaign, CampaignStatus


class CampaignCreate(BaseModel):
    """
    Draft for a new campaign.
    Required fields are checked by the service so the failure is a domain error.
    """
    name: Optional[str] = None
    influencer_id: Optional[str] = None
    department: Optional[str] = None
    budget: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    deliverables: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Diwali Launch",
                "influencer_id": "i1",
                "department": "Marketing",
                "budget": 7500,
                "start_date": "2025-10-20",
                "deliverables": "2 Instagram Reels"
            }
        }


class CampaignStatusUpdate(BaseModel):
    """Change a campaign's approval status."""
    status: CampaignStatus


class CampaignComplete(BaseModel):
    """Log completion of a campaign."""
    completion_date: Optional[date] = None
    summary: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class CampaignView(BaseModel):
    """Campaign as seen by a session."""
    campaign: Campaign
    influencer_name: str
    can_edit: bool
    can_complete: bool
