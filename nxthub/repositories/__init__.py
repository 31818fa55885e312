# Repositories package - whole-collection persistence
from nxthub.repositories.store import KeyValueStore, InMemoryKeyValueStore, SQLKeyValueStore
from nxthub.repositories.record_store import RecordStore
