"""Storage/store factory (file|sql|memory) driven by configuration."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..session import Database
from ..sql_storage import SqlStorage
from ..storage import DurableStorage, FileStorage, MemoryStorage
from .topic_repo import TopicStore


def durable_storage(config: Mapping[str, Any], database: Optional[Database] = None) -> DurableStorage:
    backend = (config.get("STORAGE_BACKEND") or "file").lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return FileStorage(config.get("STORAGE_DIR") or ".debate_board")
    if backend == "sql":
        if database is None:
            database = Database().connect(config["DATABASE_URL"], echo=config.get("SQL_ECHO", False))
        return SqlStorage(database)
    raise ValueError(f"unsupported storage backend: {backend}")


def topic_store(config: Mapping[str, Any], storage: DurableStorage) -> TopicStore:
    return TopicStore(
        storage,
        config.get("TOPICS_STORAGE_KEY") or "dpd_topics",
        malformed_policy=(config.get("MALFORMED_DATA_POLICY") or "raise").lower(),
    )
