"""Record store: the canonical topic collection and its durable JSON round-trip."""
from __future__ import annotations

import json
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from ..storage import DurableStorage
from ...domain.seed import sample_topics
from ...domain.topic import Category, Reply, Topic
from ...errors import MalformedStorageData, PersistenceFailure
from ...models import ReplyRecord, TopicList, TopicRecord

MALFORMED_POLICIES = ("raise", "seed")


def _reply_to_dc(r: ReplyRecord) -> Reply:
    return Reply(id=r.id, author=r.author, content=r.content, date=r.date, user_id=r.user_id)


def _to_dc(rec: TopicRecord) -> Topic:
    return Topic(
        id=rec.id,
        title=rec.title,
        content=rec.content,
        author=rec.author,
        category=Category(rec.category),
        date=rec.date,
        replies=[_reply_to_dc(r) for r in rec.replies],
        user_id=rec.user_id,
    )


def to_record(t: Topic) -> TopicRecord:
    return TopicRecord(
        id=t.id,
        title=t.title,
        content=t.content,
        author=t.author,
        category=t.category,
        date=t.date,
        replies=[reply_to_record(r) for r in t.replies],
        user_id=t.user_id,
    )


def reply_to_record(r: Reply) -> ReplyRecord:
    return ReplyRecord(id=r.id, author=r.author, content=r.content, date=r.date, user_id=r.user_id)


def encode_topics(topics: Iterable[Topic]) -> str:
    rows = TopicList.dump_python([to_record(t) for t in topics], by_alias=True, exclude_none=True)
    return json.dumps(rows, ensure_ascii=False)


def decode_topics(raw: str) -> List[Topic]:
    """Parse a stored collection. Raises ``ValueError`` on any structural problem."""
    records = TopicList.validate_json(raw)
    topics = [_to_dc(r) for r in records]
    seen: set[int] = set()
    for t in topics:
        if t.id in seen:
            raise ValueError(f"duplicate topic id {t.id}")
        seen.add(t.id)
        if len(t.reply_ids()) != len(t.replies):
            raise ValueError(f"duplicate reply id in topic {t.id}")
    return topics


class TopicStore:
    def __init__(
        self,
        storage: DurableStorage,
        key: str = "dpd_topics",
        *,
        malformed_policy: str = "raise",
    ) -> None:
        if malformed_policy not in MALFORMED_POLICIES:
            raise ValueError(f"unsupported malformed data policy: {malformed_policy}")
        self.storage = storage
        self.key = key
        self.malformed_policy = malformed_policy
        self.topics: List[Topic] = []
        self.loaded = False

    def load(self) -> List[Topic]:
        """Read the stored collection, or the sample topics when nothing has been stored yet.

        Sample topics are not written back here; the first mutation persists them
        together with the new record.
        """
        try:
            raw = self.storage.get_item(self.key)
        except Exception as e:
            logger.exception(f"reading {self.key} failed")
            raise PersistenceFailure(f"could not read stored topics: {e}") from e

        if raw is None:
            logger.info("no stored topics, starting from sample data")
            topics = sample_topics()
        else:
            try:
                topics = decode_topics(raw)
            except ValueError as e:
                if self.malformed_policy != "seed":
                    raise MalformedStorageData(f"stored topics under {self.key!r} are malformed: {e}") from e
                logger.warning(f"stored topics under {self.key} are malformed, falling back to sample data: {e}")
                topics = sample_topics()

        self.topics = topics
        self.loaded = True
        return topics

    def persist(self, topics: Sequence[Topic]) -> None:
        """Overwrite durable storage with the full collection."""
        payload = encode_topics(topics)
        try:
            self.storage.set_item(self.key, payload)
        except Exception as e:
            logger.exception(f"writing {self.key} failed")
            raise PersistenceFailure(f"could not save topics: {e}") from e

    def find(self, topic_id: int) -> Optional[Topic]:
        for t in self.topics:
            if t.id == topic_id:
                return t
        return None

    def reset(self) -> None:
        self.storage.remove_item(self.key)
        self.topics = []
        self.loaded = False
