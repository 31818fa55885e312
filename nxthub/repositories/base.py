"""
Base repository over one whole-collection key.
"""
import json
import logging
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict

from pydantic import BaseModel, TypeAdapter

from nxthub.config import settings
from nxthub.repositories.store import KeyValueStore

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


def storage_key(collection: str) -> str:
    """Fixed key a collection is stored under, e.g. `nxthub_campaigns_data`."""
    return f"{settings.STORAGE_KEY_PREFIX}_{collection}_data"


class BaseRepository(Generic[ModelType]):
    """
    Generic collection repository with get / replace-all semantics.
    Inherit and specify the model class, collection name and seed.
    """
    
    def __init__(
        self,
        model: Type[ModelType],
        store: KeyValueStore,
        collection: str,
        seed: List[Dict[str, Any]]
    ):
        self.model = model
        self.store = store
        self.collection = collection
        self.key = storage_key(collection)
        self.seed = seed
        self._adapter = TypeAdapter(List[model])
    
    async def list(self) -> List[ModelType]:
        """
        Get the persisted collection.
        Absent or unreadable data is replaced by the seed.
        """
        raw = await self.store.get(self.key)
        if raw is None:
            return await self.reseed()
        
        try:
            return self._adapter.validate_json(raw)
        except ValueError as e:
            logger.error(f"Error parsing {self.collection} from storage, reseeding: {e}")
            return await self.reseed()
    
    async def replace_all(self, items: List[ModelType]) -> List[ModelType]:
        """Persist the full collection in a single write."""
        payload = json.dumps([item.to_record() for item in items])
        await self.store.set(self.key, payload)
        return list(items)
    
    async def reseed(self) -> List[ModelType]:
        """Write the baseline dataset and return it."""
        items = self._adapter.validate_python(self.seed)
        logger.info(f"Seeding {self.collection} with {len(items)} records")
        return await self.replace_all(items)
    
    async def is_initialized(self) -> bool:
        return await self.store.get(self.key) is not None
    
    async def get(self, id: str) -> Optional[ModelType]:
        """Get a record by ID."""
        for item in await self.list():
            if item.id == id:
                return item
        return None
    
