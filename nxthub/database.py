from functools import lru_cache

from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import create_async_engine

from .config import settings
from .repositories.store import KeyValueStore, InMemoryKeyValueStore, SQLKeyValueStore

# Create Async Engine
engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, future=True)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


@lru_cache
def get_store() -> KeyValueStore:
    """Key-value backend selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryKeyValueStore()
    return SQLKeyValueStore(engine)
