"""
Influencer model.
"""
from typing import Optional

from nxthub.models.base import RecordModel


class Platforms(RecordModel):
    """Platform usernames keyed by platform."""
    instagram: Optional[str] = None
    youtube: Optional[str] = None


class Influencer(RecordModel):
    """
    Influencer entity - a creator that campaigns can be assigned to.
    `created_by` is the ownership key: the email of the session that created it.
    """
    id: str
    name: str
    handle: str
    avatar: str = ""
    followers: str = ""
    category: str
    
    # Extended details
    email: Optional[str] = None
    mobile: Optional[str] = None
    location: Optional[str] = None
    language: Optional[str] = None  # comma-joined, e.g. "Telugu, English"
    last_price_paid: Optional[float] = None
    last_promo_date: Optional[str] = None
    platforms: Optional[Platforms] = None
    
    # Ownership
    created_by: Optional[str] = None
