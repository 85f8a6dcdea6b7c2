"""Shared builders and doubles for the board tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from debate_board.db.repositories.topic_repo import TopicStore
from debate_board.db.storage import MemoryStorage
from debate_board.services.latency import NoLatency
from debate_board.services.topic_service import TopicService

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
FIXED_MS = int(FIXED_NOW.timestamp() * 1000)


def run(coro):
    return asyncio.run(coro)


class FrozenClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FlakyStorage(MemoryStorage):
    """Memory storage whose writes (or reads) can be switched to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.fail_reads = False

    def get_item(self, key):
        if self.fail_reads:
            raise OSError("disk unavailable")
        return super().get_item(key)

    def set_item(self, key, value):
        if self.fail_writes:
            raise OSError("disk full")
        super().set_item(key, value)


class RecordingSink:
    def __init__(self) -> None:
        self.events: List[tuple] = []

    def render_loading(self) -> None:
        self.events.append(("loading",))

    def render_list(self, topics) -> None:
        self.events.append(("list", [t.id for t in topics]))

    def render_error(self, message: str) -> None:
        self.events.append(("error", message))

    def render_notice(self, message: str) -> None:
        self.events.append(("notice", message))

    def kinds(self) -> List[str]:
        return [e[0] for e in self.events]


def make_service(storage=None, latency=None, clock=None, loaded: bool = True) -> TopicService:
    store = TopicStore(storage if storage is not None else MemoryStorage())
    if loaded:
        store.load()
    return TopicService(store, latency or NoLatency(), clock=clock)
