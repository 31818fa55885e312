"""
Influencer schemas.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel

Platform = Literal["instagram", "youtube"]


class InfluencerCreate(BaseModel):
    """
    Draft for a new influencer.
    Any `created_by` supplied by the caller is ignored; the service stamps ownership.
    """
    name: Optional[str] = None
    platform: Platform = "instagram"
    handle: Optional[str] = None  # primary platform username
    secondary_platform: Optional[Platform] = None
    secondary_handle: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    category: Optional[str] = None
    languages: List[str] = []
    followers: Optional[str] = None
    avatar: Optional[str] = None
    last_price_paid: Optional[float] = None
    last_promo_date: Optional[str] = None
    created_by: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Priya Raman",
                "platform": "instagram",
                "handle": "priya.styles",
                "email": "priya@example.com",
                "mobile": "+91 90000 11111",
                "category": "Fashion",
                "languages": ["Tamil", "English"]
            }
        }
