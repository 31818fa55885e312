"""
Influencer service - influencer records with creator-only edit/delete.
"""
import logging
import uuid
from typing import Optional, List
from urllib.parse import quote

from nxthub.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from nxthub.core.permissions import (
    can_create_influencer,
    can_delete_influencer,
    can_edit_influencer,
)
from nxthub.models.influencer import Influencer, Platforms
from nxthub.models.session import SessionContext
from nxthub.repositories.influencer_repo import InfluencerRepository
from nxthub.repositories.store import KeyValueStore
from nxthub.schemas.influencer import InfluencerCreate

logger = logging.getLogger(__name__)

ALL = "All"
DEFAULT_FOLLOWERS = "10K"
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=random"


def _required(value: Optional[str], field: str) -> str:
    if not value or not value.strip():
        raise ValidationError("This field is required", field=field)
    return value.strip()


class InfluencerService:
    """Service for influencer operations."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.influencer_repo = InfluencerRepository(store)

    async def list(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        language: Optional[str] = None,
        mine: bool = False,
        session: Optional[SessionContext] = None
    ) -> List[Influencer]:
        """
        List influencers.

        Args:
            search: substring of name or handle, case-insensitive
            category: exact category ("All" for any)
            language: language contained in the record's language list ("All" for any)
            mine: only records created by the session's email
            session: required for `mine`; a guest owns nothing
        """
        if mine:
            email = session.email if session else None
            if not email:
                return []
            influencers = await self.influencer_repo.get_by_owner(email)
        else:
            influencers = await self.influencer_repo.list()

        if search:
            needle = search.lower()
            influencers = [
                i for i in influencers
                if needle in i.name.lower() or needle in i.handle.lower()
            ]
        if category and category != ALL:
            influencers = [i for i in influencers if i.category == category]
        if language and language != ALL:
            influencers = [i for i in influencers if i.language and language in i.language]

        return influencers

    async def get(self, influencer_id: str) -> Influencer:
        """Get an influencer by ID."""
        influencer = await self.influencer_repo.get(influencer_id)
        if not influencer:
            raise NotFoundError("Influencer", influencer_id)
        return influencer

    async def create(self, draft: InfluencerCreate, session: SessionContext) -> List[Influencer]:
        """Add an influencer owned by the session's email."""
        if not can_create_influencer(session):
            logger.warning("Influencer creation denied for guest session")
            raise UnauthorizedError("Unauthorized: sign in to add influencers.")

        name = _required(draft.name, "name")
        username = _required(draft.handle, "handle").lstrip("@")
        if not username:
            raise ValidationError("This field is required", field="handle")
        email = _required(draft.email, "email")
        mobile = _required(draft.mobile, "mobile")
        category = _required(draft.category, "category")
        languages = [lang.strip() for lang in draft.languages if lang and lang.strip()]
        if not languages:
            raise ValidationError("Select at least one language", field="languages")

        platforms = {draft.platform: username}
        if draft.secondary_platform and draft.secondary_handle:
            platforms[draft.secondary_platform] = draft.secondary_handle.strip().lstrip("@")

        joined = ", ".join(languages)
        influencer = Influencer(
            id=f"i_{uuid.uuid4().hex[:12]}",
            name=name,
            handle=f"@{username}",
            avatar=draft.avatar or AVATAR_URL.format(name=quote(name)),
            followers=draft.followers or DEFAULT_FOLLOWERS,
            category=category,
            email=email,
            mobile=mobile,
            location=joined,
            language=joined,
            last_price_paid=draft.last_price_paid,
            last_promo_date=draft.last_promo_date,
            platforms=Platforms(**platforms),
            # Ownership is always the session's, whatever the draft says
            created_by=session.email
        )

        influencers = await self.influencer_repo.list()
        updated = await self.influencer_repo.replace_all([influencer, *influencers])

        logger.info(f"Influencer '{influencer.name}' ({influencer.id}) added by {session.email}")
        return updated

    async def update(self, updated: Influencer, session: SessionContext) -> List[Influencer]:
        """Replace an influencer record; only its creator may do so."""
        influencers = await self.influencer_repo.list()
        stored = next((i for i in influencers if i.id == updated.id), None)
        if not stored:
            raise NotFoundError("Influencer", updated.id)

        # Ownership comes from the stored record, never from the payload
        if not can_edit_influencer(session, stored):
            logger.warning(
                f"Edit of influencer {updated.id} denied for {session.email or 'guest'}"
            )
            raise UnauthorizedError("Unauthorized: only the creator can edit this influencer.")

        _required(updated.name, "name")
        if not _required(updated.handle, "handle").lstrip("@"):
            raise ValidationError("This field is required", field="handle")
        _required(updated.email, "email")
        _required(updated.mobile, "mobile")
        _required(updated.category, "category")
        if not updated.language or not updated.language.strip(" ,"):
            raise ValidationError("Select at least one language", field="language")

        replacement = updated.model_copy(update={"created_by": stored.created_by})
        result = await self.influencer_repo.replace_all(
            [replacement if i.id == updated.id else i for i in influencers]
        )

        logger.info(f"Influencer {updated.id} updated by {session.email}")
        return result

    async def delete(self, influencer_id: str, session: SessionContext) -> List[Influencer]:
        """Delete an influencer; deleting a missing id is a no-op."""
        influencers = await self.influencer_repo.list()
        stored = next((i for i in influencers if i.id == influencer_id), None)
        if not stored:
            logger.info(f"Influencer {influencer_id} already absent, nothing to delete")
            return influencers

        if not can_delete_influencer(session, stored):
            logger.warning(
                f"Delete of influencer {influencer_id} denied for {session.email or 'guest'}"
            )
            raise UnauthorizedError("Unauthorized: only the creator can delete this influencer.")

        result = await self.influencer_repo.replace_all(
            [i for i in influencers if i.id != influencer_id]
        )

        logger.info(f"Influencer {influencer_id} deleted by {session.email}")
        return result
