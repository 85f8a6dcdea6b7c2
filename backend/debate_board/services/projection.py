"""Filter state and the pure topic projection handed to the render sink."""
from __future__ import annotations

from typing import List, Sequence, Union

from ..domain.topic import Category, Topic
from ..errors import ValidationError

ALL = "all"

FilterState = Union[Category, str]


def parse_filter(value: str | Category | None) -> FilterState:
    """Normalise a filter value to ``"all"`` or a ``Category``."""
    if isinstance(value, Category):
        return value
    text = (value or ALL).strip().lower()
    if text == ALL:
        return ALL
    try:
        return Category(text)
    except ValueError:
        raise ValidationError(f"unknown filter {value!r}") from None


def project(topics: Sequence[Topic], active: FilterState = ALL) -> List[Topic]:
    if active == ALL:
        return list(topics)
    category = parse_filter(active)
    return [t for t in topics if t.category == category]
