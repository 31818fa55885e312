"""
Tests for influencer ownership: stamped on create, checked against the stored record.
"""
import pytest

from nxthub.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from nxthub.models.session import SessionContext
from nxthub.models.user import Role
from nxthub.schemas.influencer import InfluencerCreate
from nxthub.services.influencer_service import InfluencerService


def make_draft(**overrides) -> InfluencerCreate:
    fields = {
        "name": "Priya Raman",
        "platform": "instagram",
        "handle": "priya.styles",
        "email": "priya@example.com",
        "mobile": "+91 90000 11111",
        "category": "Fashion",
        "languages": ["Tamil", "English"],
    }
    fields.update(overrides)
    return InfluencerCreate(**fields)


class TestCreate:

    @pytest.mark.asyncio
    async def test_ownership_is_stamped_from_session(self, store, sales_session):
        draft = make_draft(created_by="someone-else@nxthub.com")

        updated = await InfluencerService(store).create(draft, sales_session)

        new = updated[0]
        assert new.created_by == "sales@nxthub.com"
        assert new.id.startswith("i_")
        assert len(updated) == 5

    @pytest.mark.asyncio
    async def test_record_is_normalized(self, store, sales_session):
        draft = make_draft(handle="@priya.styles", secondary_platform="youtube", secondary_handle="PriyaTube")

        new = (await InfluencerService(store).create(draft, sales_session))[0]

        assert new.handle == "@priya.styles"
        assert new.platforms.instagram == "priya.styles"
        assert new.platforms.youtube == "PriyaTube"
        assert new.language == "Tamil, English"
        assert new.location == "Tamil, English"
        assert new.followers == "10K"
        assert new.avatar.startswith("https://ui-avatars.com/api/?name=Priya%20Raman")

    @pytest.mark.asyncio
    async def test_executives_can_add_influencers(self, store, exec_session):
        new = (await InfluencerService(store).create(make_draft(), exec_session))[0]
        assert new.created_by == "exec@nxthub.com"

    @pytest.mark.asyncio
    async def test_guest_cannot_add(self, store, guest_session):
        with pytest.raises(UnauthorizedError):
            await InfluencerService(store).create(make_draft(), guest_session)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", ""),
            ("handle", None),
            ("handle", "@"),
            ("email", "  "),
            ("mobile", None),
            ("category", ""),
            ("languages", []),
            ("languages", [" "]),
        ],
    )
    async def test_required_fields(self, store, sales_session, field, value):
        service = InfluencerService(store)

        with pytest.raises(ValidationError) as exc:
            await service.create(make_draft(**{field: value}), sales_session)

        assert exc.value.field == field
        assert len(await service.list()) == 4


class TestUpdate:

    @pytest.mark.asyncio
    async def test_owner_replaces_record(self, store, marketing_session):
        service = InfluencerService(store)
        stored = await service.get("i1")

        updated = await service.update(stored.model_copy(update={"name": "Vignesh S."}), marketing_session)

        assert next(i for i in updated if i.id == "i1").name == "Vignesh S."

    @pytest.mark.asyncio
    async def test_owner_cannot_restamp_ownership(self, store, marketing_session):
        service = InfluencerService(store)
        stored = await service.get("i1")

        await service.update(stored.model_copy(update={"created_by": "sales@nxthub.com"}), marketing_session)

        assert (await service.get("i1")).created_by == "marketing@nxthub.com"

    @pytest.mark.asyncio
    async def test_payload_ownership_is_not_trusted(self, store, sales_session):
        service = InfluencerService(store)
        stored = await service.get("i1")
        forged = stored.model_copy(update={"name": "Hijacked", "created_by": "sales@nxthub.com"})

        with pytest.raises(UnauthorizedError):
            await service.update(forged, sales_session)

        assert await service.get("i1") == stored

    @pytest.mark.asyncio
    async def test_missing_record(self, store, marketing_session):
        service = InfluencerService(store)
        stored = await service.get("i1")

        with pytest.raises(NotFoundError):
            await service.update(stored.model_copy(update={"id": "i_missing"}), marketing_session)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", ""),
            ("handle", "@"),
            ("email", "  "),
            ("mobile", None),
            ("category", ""),
            ("language", None),
            ("language", " , "),
        ],
    )
    async def test_required_fields_on_edit(self, store, marketing_session, field, value):
        service = InfluencerService(store)
        stored = await service.get("i1")

        with pytest.raises(ValidationError) as exc:
            await service.update(stored.model_copy(update={field: value}), marketing_session)

        assert exc.value.field == field
        assert await service.get("i1") == stored


class TestDelete:

    @pytest.mark.asyncio
    async def test_unknown_email_cannot_delete(self, store):
        session = SessionContext(email="vignesh.sadula@example.com")

        with pytest.raises(UnauthorizedError):
            await InfluencerService(store).delete("i1", session)

        assert len(await InfluencerService(store).list()) == 4

    @pytest.mark.asyncio
    async def test_other_manager_is_unauthorized(self, store, sales_session):
        with pytest.raises(UnauthorizedError):
            await InfluencerService(store).delete("i1", sales_session)

    @pytest.mark.asyncio
    async def test_owner_deletes(self, store, marketing_session):
        updated = await InfluencerService(store).delete("i3", marketing_session)
        assert [i.id for i in updated] == ["i1", "i2", "i4"]

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store, marketing_session):
        service = InfluencerService(store)

        first = await service.delete("i3", marketing_session)
        second = await service.delete("i3", marketing_session)

        assert second == first

    @pytest.mark.asyncio
    async def test_missing_id_is_noop_for_anyone(self, store, guest_session):
        service = InfluencerService(store)
        before = await service.list()

        assert await service.delete("i_missing", guest_session) == before


class TestList:

    @pytest.mark.asyncio
    async def test_search_matches_name_or_handle(self, store):
        service = InfluencerService(store)

        assert [i.id for i in await service.list(search="sarah")] == ["i2"]
        assert [i.id for i in await service.list(search="@MIKE")] == ["i3"]

    @pytest.mark.asyncio
    async def test_category_and_language(self, store):
        service = InfluencerService(store)

        assert [i.id for i in await service.list(category="Gaming")] == ["i4"]
        assert [i.id for i in await service.list(language="English")] == ["i2", "i3", "i4"]
        assert len(await service.list(category="All", language="All")) == 4

    @pytest.mark.asyncio
    async def test_mine(self, store, marketing_session, guest_session):
        service = InfluencerService(store)

        assert [i.id for i in await service.list(mine=True, session=marketing_session)] == ["i1", "i3"]
        assert await service.list(mine=True, session=guest_session) == []
        assert await service.list(mine=True) == []

    @pytest.mark.asyncio
    async def test_mine_for_sales_manager(self, store):
        session = SessionContext(role=Role.MANAGER, department="Sales", email="sales@nxthub.com")
        assert [i.id for i in await InfluencerService(store).list(mine=True, session=session)] == ["i2"]
