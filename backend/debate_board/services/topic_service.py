"""Asynchronous mutation gateway for topics and replies.

Every operation looks like a remote call: it awaits the configured latency
provider before touching the record store, and reports its result as an
``Outcome`` instead of raising. Operations queue on a single lock so that two
calls issued back to back still apply their locate/modify/persist steps one
after the other, in the order they were issued.

Nothing in memory changes until ``persist`` has succeeded, so a failed call
leaves both the collection and durable storage exactly as they were.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from loguru import logger

from ..db.repositories.topic_repo import TopicStore
from ..domain.outcome import Outcome
from ..domain.topic import ANONYMOUS, Category, Reply, Topic, iso_timestamp
from ..errors import BoardError, GatewayUnavailable, NotFoundError, ValidationError
from .latency import LatencyProvider, NoLatency

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class NewTopic:
    title: str
    content: str
    category: Category | str
    author: Optional[str] = None
    user_id: Optional[str] = None


@dataclass
class NewReply:
    content: str
    author: Optional[str] = None
    user_id: Optional[str] = None


def parse_category(value: Category | str) -> Category:
    try:
        return Category((value or "").strip().lower() if isinstance(value, str) else value)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise ValidationError(f"unknown category {value!r}; expected one of: {allowed}") from None


def _author(value: Optional[str]) -> str:
    return (value or "").strip() or ANONYMOUS


def validate_topic(draft: NewTopic) -> NewTopic:
    """Return a trimmed copy of ``draft`` or raise ``ValidationError``."""
    title = (draft.title or "").strip()
    content = (draft.content or "").strip()
    if not title or not content:
        raise ValidationError("title and content are required")
    return NewTopic(
        title=title,
        content=content,
        category=parse_category(draft.category),
        author=_author(draft.author),
        user_id=draft.user_id,
    )


def validate_reply(draft: NewReply) -> NewReply:
    content = (draft.content or "").strip()
    if not content:
        raise ValidationError("reply content is required")
    return NewReply(content=content, author=_author(draft.author), user_id=draft.user_id)


class IdSequence:
    """Millisecond-clock ids, bumped past anything already taken so they never repeat."""

    def __init__(self) -> None:
        self.last = 0

    def next(self, now: datetime, taken: Iterable[int] = ()) -> int:
        floor = max([self.last, *taken])
        self.last = max(int(now.timestamp() * 1000), floor + 1)
        return self.last


class TopicService:
    def __init__(
        self,
        store: TopicStore,
        latency: Optional[LatencyProvider] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self.latency = latency or NoLatency()
        self.clock = clock or utcnow
        self._lock = asyncio.Lock()
        self._topic_ids = IdSequence()
        self._reply_ids = IdSequence()

    @property
    def topics(self) -> List[Topic]:
        return self.store.topics

    def _ensure_loaded(self) -> None:
        # A mutation must never persist over a collection it has not read.
        if not self.store.loaded:
            self.store.load()

    async def fetch_topics(self) -> Outcome[List[Topic]]:
        async with self._lock:
            try:
                await self.latency.wait("fetch")
                topics = self.store.load()
            except BoardError as e:
                logger.error(f"fetching topics failed: {e.message}")
                return Outcome.fail(e)
            except Exception as e:
                logger.exception("fetching topics failed")
                return Outcome.fail(GatewayUnavailable(str(e)))
        logger.info(f"loaded {len(topics)} topics")
        return Outcome.ok(list(topics))

    async def create_topic(self, draft: NewTopic) -> Outcome[Topic]:
        try:
            draft = validate_topic(draft)
        except ValidationError as e:
            logger.warning(f"rejected topic: {e.message}")
            return Outcome.fail(e)

        async with self._lock:
            try:
                await self.latency.wait("mutation")
                self._ensure_loaded()
                now = self.clock()
                topic = Topic(
                    id=self._topic_ids.next(now, (t.id for t in self.store.topics)),
                    title=draft.title,
                    content=draft.content,
                    author=draft.author or ANONYMOUS,
                    category=Category(draft.category),
                    date=iso_timestamp(now),
                    replies=[],
                    user_id=draft.user_id,
                )
                self.store.persist([topic, *self.store.topics])
            except BoardError as e:
                logger.error(f"creating topic failed: {e.message}")
                return Outcome.fail(e)
            except Exception as e:
                logger.exception("creating topic failed")
                return Outcome.fail(GatewayUnavailable(str(e)))
            self.store.topics.insert(0, topic)

        logger.info(f"created topic {topic.id} in {topic.category.value}")
        return Outcome.ok(topic)

    async def create_reply(self, topic_id: int, draft: NewReply) -> Outcome[Reply]:
        try:
            draft = validate_reply(draft)
        except ValidationError as e:
            logger.warning(f"rejected reply to {topic_id}: {e.message}")
            return Outcome.fail(e)

        async with self._lock:
            try:
                await self.latency.wait("mutation")
                self._ensure_loaded()
                topic = self.store.find(topic_id)
                if topic is None:
                    raise NotFoundError(f"topic {topic_id} not found")
                now = self.clock()
                taken = (r.id for t in self.store.topics for r in t.replies)
                reply = Reply(
                    id=self._reply_ids.next(now, taken),
                    author=draft.author or ANONYMOUS,
                    content=draft.content,
                    date=iso_timestamp(now),
                    user_id=draft.user_id,
                )
                self.store.persist(
                    [replace(t, replies=[*t.replies, reply]) if t is topic else t for t in self.store.topics]
                )
            except NotFoundError as e:
                logger.warning(e.message)
                return Outcome.fail(e)
            except BoardError as e:
                logger.error(f"creating reply on {topic_id} failed: {e.message}")
                return Outcome.fail(e)
            except Exception as e:
                logger.exception(f"creating reply on {topic_id} failed")
                return Outcome.fail(GatewayUnavailable(str(e)))
            topic.replies.append(reply)

        logger.info(f"created reply {reply.id} on topic {topic_id}")
        return Outcome.ok(reply)
