"""
Key-value storage backends.
The record store only needs single-key get/set; each key holds a whole collection.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from nxthub.models.base import utcnow
from nxthub.models.kv import KeyValueEntry


class KeyValueStore(ABC):
    """Durable key-value capability: get(key) -> blob | None, set(key, blob)."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and the `memory` backend."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SQLKeyValueStore(KeyValueStore):
    """
    Store backed by the `kv_entry` table.
    Each set is a single-row upsert committed in its own transaction.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )

    async def get(self, key: str) -> Optional[str]:
        async with self.session_factory() as session:
            entry = await session.get(KeyValueEntry, key)
            return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        async with self.session_factory() as session:
            entry = await session.get(KeyValueEntry, key)
            if entry:
                entry.value = value
                entry.updated_at = utcnow()
            else:
                entry = KeyValueEntry(key=key, value=value)
            session.add(entry)
            await session.commit()
