"""Storage adapters for Pomotodo."""

from .json_store import InMemoryTaskRepository, JsonFileTaskRepository

__all__ = ["InMemoryTaskRepository", "JsonFileTaskRepository"]
