"""Domain dataclasses for Topic and Reply entities (storage-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

ANONYMOUS = "Anonymous"


class Category(str, Enum):
    ETHICS = "ethics"
    POLITICS = "politics"
    SCIENCE = "science"
    EDUCATION = "education"
    SOCIETY = "society"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True)
class Reply:
    id: int
    content: str
    date: str
    author: str = ANONYMOUS
    user_id: Optional[str] = None


@dataclass(slots=True)
class Topic:
    id: int
    title: str
    content: str
    category: Category
    date: str
    author: str = ANONYMOUS
    replies: List[Reply] = field(default_factory=list)
    user_id: Optional[str] = None

    def reply_ids(self) -> set[int]:
        return {r.id for r in self.replies}


def iso_timestamp(moment: datetime) -> str:
    """Format like a browser's ``Date.toISOString()``: UTC, milliseconds, ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
