"""
Authorization policy for NxtHub.
Pure predicates over a session and a target record; evaluated fresh on every mutation.
"""
from typing import Optional

from nxthub.models.campaign import Campaign
from nxthub.models.influencer import Influencer
from nxthub.models.session import SessionContext
from nxthub.models.user import Role


def _same_department(left: Optional[str], right: Optional[str]) -> bool:
    if not left or not right:
        return False
    return left.lower() == right.lower()


def can_edit_campaign(session: SessionContext, campaign: Campaign) -> bool:
    """
    Executives are read-only observers; managers may edit
    campaigns of their own department only.
    """
    if session.role == Role.EXECUTIVE:
        return False
    if session.role == Role.MANAGER:
        return _same_department(session.department, campaign.department)
    return False


def can_complete_campaign(session: SessionContext, campaign: Campaign) -> bool:
    """Log-completion gate: editable and not already completed."""
    return can_edit_campaign(session, campaign) and not campaign.is_completed


def can_create_campaign(session: SessionContext) -> bool:
    """Anyone signed in except executives."""
    return session.is_authenticated and not session.is_executive


def can_create_influencer(session: SessionContext) -> bool:
    """Influencers are stamped with the creator's email, so one is required."""
    return session.is_authenticated and bool(session.email)


def can_delete_influencer(session: SessionContext, influencer: Influencer) -> bool:
    """Ownership is matched exactly, never inferred."""
    if not influencer.created_by or not session.email:
        return False
    return influencer.created_by == session.email


def can_edit_influencer(session: SessionContext, influencer: Influencer) -> bool:
    """Editing requires ownership, same as deleting."""
    return can_delete_influencer(session, influencer)
