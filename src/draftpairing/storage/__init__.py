from draftpairing.storage.base import DraftRepository
from draftpairing.storage.json_store import JsonFileRepository
from draftpairing.storage.memory import InMemoryRepository

__all__ = ["DraftRepository", "InMemoryRepository", "JsonFileRepository"]
