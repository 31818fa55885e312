"""
Tests for email-only login resolution.
"""
import asyncio
import json

import pytest

from nxthub.core.exceptions import InvalidConfigurationError, UserNotFoundError
from nxthub.core.seed_data import SEED_USERS
from nxthub.models.user import Role
from nxthub.repositories.base import storage_key
from nxthub.services.auth_service import AuthService


class TestResolve:

    @pytest.mark.asyncio
    async def test_manager_resolves_to_department_session(self, store):
        result = await AuthService(store, delay=0).resolve("marketing@nxthub.com")

        assert result.session.role == Role.MANAGER
        assert result.session.department == "Marketing"
        assert result.session.email == "marketing@nxthub.com"
        assert result.user.name == "Marketing Manager"

    @pytest.mark.asyncio
    async def test_email_match_is_case_insensitive(self, store):
        result = await AuthService(store, delay=0).resolve("  Exec@NxtHub.com ")

        assert result.session.role == Role.EXECUTIVE
        assert result.session.email == "exec@nxthub.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["notregistered@x.com", "", "marketing@nxthub"])
    async def test_unknown_email(self, store, email):
        with pytest.raises(UserNotFoundError):
            await AuthService(store, delay=0).resolve(email)

    @pytest.mark.asyncio
    async def test_manager_without_department_is_misconfigured(self, store):
        users = SEED_USERS + [
            {"id": "u9", "name": "Lost Manager", "email": "lost@nxthub.com", "role": "manager", "avatar": ""}
        ]
        store.data[storage_key("users")] = json.dumps(users)

        with pytest.raises(InvalidConfigurationError):
            await AuthService(store, delay=0).resolve("lost@nxthub.com")

    @pytest.mark.asyncio
    async def test_executive_without_department_is_fine(self, store):
        users = [{"id": "u9", "name": "Board", "email": "board@nxthub.com", "role": "executive", "avatar": ""}]
        store.data[storage_key("users")] = json.dumps(users)

        result = await AuthService(store, delay=0).resolve("board@nxthub.com")

        assert result.session.department is None

    @pytest.mark.asyncio
    async def test_resolve_does_not_write(self, store):
        await AuthService(store, delay=0).resolve("sales@nxthub.com")
        before = dict(store.data)

        await AuthService(store, delay=0).resolve("sales@nxthub.com")

        assert store.data == before


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_without_delay(self, store):
        result = await AuthService(store, delay=0).login("sales@nxthub.com")
        assert result.session.department == "Sales"

    @pytest.mark.asyncio
    async def test_login_delay_can_be_cancelled(self, store):
        task = asyncio.create_task(AuthService(store, delay=30).login("sales@nxthub.com"))
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
