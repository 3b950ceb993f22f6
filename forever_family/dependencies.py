"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from forever_family.config import get_settings
from forever_family.store import CollectionStore, InMemoryCollectionStore, JsonFileStore

_collection_store: CollectionStore | None = None


def get_collection_store() -> CollectionStore:
    """
    Return a singleton store so every request goes through the same data dir.
    """
    global _collection_store
    if _collection_store:
        return _collection_store

    settings = get_settings()
    if settings.use_in_memory_store:
        _collection_store = InMemoryCollectionStore()
    else:
        _collection_store = JsonFileStore(settings.data_dir)
    return _collection_store
