"""Filter & projection: order preservation and totality over every filter value."""

import pytest

from debate_board.domain.seed import sample_topics
from debate_board.domain.topic import Category, Topic
from debate_board.errors import ValidationError
from debate_board.services.projection import ALL, parse_filter, project


def _mixed() -> list:
    cats = [Category.SCIENCE, Category.ETHICS, Category.SCIENCE, Category.OTHER, Category.SCIENCE]
    return [
        Topic(id=i, title=f"t{i}", content="c", category=c, date="2026-01-01T00:00:00Z")
        for i, c in enumerate(cats, start=10)
    ]


def test_all_returns_collection_in_order():
    seed = sample_topics()
    assert project(seed, ALL) == seed
    assert [t.id for t in project(seed, "all")] == [1, 2, 3]


def test_projection_returns_new_list():
    seed = sample_topics()
    assert project(seed) is not seed


@pytest.mark.parametrize("flt", [ALL] + list(Category))
def test_projection_is_ordered_subsequence(flt):
    topics = _mixed()
    result = project(topics, flt)
    positions = [topics.index(t) for t in result]
    assert positions == sorted(positions)
    if flt == ALL:
        assert result == topics
    else:
        assert all(t.category is flt for t in result)
        assert len(result) == sum(1 for t in topics if t.category is flt)


def test_category_filter_keeps_stable_order():
    assert [t.id for t in project(_mixed(), Category.SCIENCE)] == [10, 12, 14]


def test_empty_category_is_empty_not_error():
    topics = [t for t in sample_topics() if t.category is not Category.POLITICS]
    assert project(topics, "politics") == []


def test_projection_does_not_mutate():
    topics = _mixed()
    before = list(topics)
    project(topics, "ethics")
    assert topics == before


@pytest.mark.parametrize("raw,expected", [
    (None, ALL),
    ("", ALL),
    (" All ", ALL),
    ("Science", Category.SCIENCE),
    (Category.SOCIETY, Category.SOCIETY),
])
def test_parse_filter(raw, expected):
    assert parse_filter(raw) == expected


def test_parse_filter_rejects_unknown():
    with pytest.raises(ValidationError):
        parse_filter("sports")
