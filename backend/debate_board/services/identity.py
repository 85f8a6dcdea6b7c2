"""Anonymous per-client identity, created once and kept in durable storage."""
from __future__ import annotations

import uuid

from loguru import logger

from ..db.storage import DurableStorage

CLIENT_ID_KEY = "dpd_user_id"


def generate_client_id() -> str:
    return "user_" + uuid.uuid4().hex[:13]


def get_or_create_client_id(storage: DurableStorage, key: str = CLIENT_ID_KEY) -> str:
    existing = storage.get_item(key)
    if existing:
        return existing
    new_id = generate_client_id()
    storage.set_item(key, new_id)
    logger.info(f"generated client id {new_id}")
    return new_id
