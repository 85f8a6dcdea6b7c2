"""Topic store and gateway exposed as a Flask extension."""
from __future__ import annotations

import asyncio
import threading
from typing import Awaitable, Optional, TypeVar

from flask import Flask
from loguru import logger

from ..db.repositories.factory import durable_storage, topic_store
from ..db.repositories.topic_repo import TopicStore
from ..db.session import db
from ..services.latency import SimulatedLatency
from ..services.topic_service import TopicService

T = TypeVar("T")


class BoardExt:
    def __init__(self) -> None:
        self.store: Optional[TopicStore] = None
        self.service: Optional[TopicService] = None
        self._lock = threading.Lock()

    def init_app(self, app: Flask) -> None:
        database = None
        if (app.config.get("STORAGE_BACKEND") or "").lower() == "sql":
            db.init_app(app)
            database = db
        storage = durable_storage(app.config, database)
        self.store = topic_store(app.config, storage)
        self.service = TopicService(
            self.store,
            SimulatedLatency(
                fetch=float(app.config.get("FETCH_LATENCY", 0.0)),
                mutation=float(app.config.get("MUTATION_LATENCY", 0.0)),
            ),
        )
        self.store.load()
        logger.info(f"board ready with {len(self.store.topics)} topics")
        app.extensions["debate_board"] = self

    def run(self, op: Awaitable[T]) -> T:
        """Run one gateway coroutine; requests from worker threads are applied one at a time."""
        with self._lock:
            return asyncio.run(op)  # type: ignore[arg-type]


board_ext = BoardExt()
