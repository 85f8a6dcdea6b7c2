"""Topics blueprint: the REST surface over the topic store."""
from __future__ import annotations

from typing import Type, TypeVar

import pydantic
from flask import Blueprint, request

from ...db.repositories.topic_repo import reply_to_record, to_record
from ...domain.topic import Reply, Topic
from ...errors import NotFoundError, ValidationError, ok
from ...integrations.board_ext import board_ext
from ...services.projection import parse_filter, project
from ...services.topic_service import NewReply, NewTopic, TopicService
from .schemas import ReplyCreateIn, TopicCreateIn


bp = Blueprint("topics", __name__)

M = TypeVar("M", bound=pydantic.BaseModel)


def _service() -> TopicService:
    if board_ext.service is None:
        raise RuntimeError("board extension is not initialized")
    return board_ext.service


def _payload(model: Type[M]) -> M:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def _topic_out(t: Topic) -> dict:
    return to_record(t).model_dump(by_alias=True, exclude_none=True)


def _reply_out(r: Reply) -> dict:
    return reply_to_record(r).model_dump(by_alias=True, exclude_none=True)


@bp.get("/", strict_slashes=False)
def list_topics():
    active = parse_filter(request.args.get("category"))
    return ok([_topic_out(t) for t in project(_service().topics, active)])


@bp.get("/category/<category>")
def list_topics_by_category(category: str):
    return ok([_topic_out(t) for t in project(_service().topics, parse_filter(category))])


@bp.get("/<int:topic_id>")
def get_topic(topic_id: int):
    topic = _service().store.find(topic_id)
    if topic is None:
        raise NotFoundError(f"topic {topic_id} not found")
    return ok(_topic_out(topic))


@bp.post("/", strict_slashes=False)
def create_topic():
    payload = _payload(TopicCreateIn)
    draft = NewTopic(
        title=payload.title,
        content=payload.content,
        category=payload.category,
        author=payload.author,
        user_id=payload.user_id,
    )
    topic = board_ext.run(_service().create_topic(draft)).unwrap()
    return ok(_topic_out(topic), 201)


@bp.post("/<int:topic_id>/replies")
def create_reply(topic_id: int):
    payload = _payload(ReplyCreateIn)
    draft = NewReply(content=payload.content, author=payload.author, user_id=payload.user_id)
    reply = board_ext.run(_service().create_reply(topic_id, draft)).unwrap()
    return ok(_reply_out(reply), 201)
