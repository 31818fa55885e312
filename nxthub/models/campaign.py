"""
Campaign model - influencer campaign with an approval lifecycle.
"""
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional

from nxthub.models.base import RecordModel


class CampaignStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"  # terminal


# Statuses reachable through a plain status change
EDITABLE_STATUSES = (
    CampaignStatus.PENDING,
    CampaignStatus.APPROVED,
    CampaignStatus.REJECTED,
)


class Campaign(RecordModel):
    """
    Campaign entity.
    `influencer_id` is a weak reference: the influencer may no longer exist.
    """
    id: str
    name: str
    influencer_id: Optional[str] = None
    department: str
    status: CampaignStatus = CampaignStatus.PENDING
    budget: float
    start_date: date
    end_date: Optional[date] = None
    deliverables: Optional[str] = None
    
    # Completion details
    completion_date: Optional[date] = None
    completion_summary: Optional[str] = None
    rating: Optional[int] = None
    
    # Timestamp for sorting recent activity
    last_updated: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == CampaignStatus.COMPLETED

    @property
    def activity_at(self) -> datetime:
        """Recency key: last update, falling back to the start date."""
        if self.last_updated:
            if self.last_updated.tzinfo is None:
                return self.last_updated.replace(tzinfo=timezone.utc)
            return self.last_updated
        return datetime.combine(self.start_date, time.min, tzinfo=timezone.utc)
