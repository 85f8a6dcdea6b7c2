"""Board controller: owns view state and re-renders after every state change."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from loguru import logger

from ..db.repositories.factory import durable_storage, topic_store
from ..db.storage import DurableStorage
from ..domain.outcome import Outcome
from ..domain.topic import Reply, Topic
from ..errors import ErrorCode, ValidationError
from ..render.sink import RenderSink
from .identity import get_or_create_client_id
from .latency import LatencyProvider, SimulatedLatency
from .projection import ALL, FilterState, parse_filter, project
from .topic_service import NewReply, NewTopic, TopicService

LOAD_FAILED = "Failed to load topics. Please try again later."
TOPIC_FAILED = "Failed to post topic. Please try again."
TOPIC_POSTED = "Topic posted successfully!"
REPLY_FAILED = "Failed to post reply. Please try again."
REPLY_POSTED = "Reply posted successfully!"


@dataclass
class BoardState:
    filter: FilterState = ALL
    is_loading: bool = False
    loaded: bool = False


class BoardController:
    def __init__(self, service: TopicService, sink: RenderSink, client_id: Optional[str] = None) -> None:
        self.service = service
        self.sink = sink
        self.client_id = client_id
        self.state = BoardState()

    def visible_topics(self) -> List[Topic]:
        return project(self.service.topics, self.state.filter)

    def refresh(self) -> List[Topic]:
        visible = self.visible_topics()
        self.sink.render_list(visible)
        return visible

    async def load(self) -> Outcome[List[Topic]]:
        self.state.is_loading = True
        self.sink.render_loading()
        outcome = await self.service.fetch_topics()
        self.state.is_loading = False
        if not outcome.success:
            self.sink.render_error(LOAD_FAILED)
            return outcome
        self.state.loaded = True
        return Outcome.ok(self.refresh())

    def set_filter(self, value: str) -> Outcome[List[Topic]]:
        try:
            self.state.filter = parse_filter(value)
        except ValidationError as e:
            self.sink.render_notice(e.message)
            return Outcome.fail(e)
        logger.debug(f"filter set to {self.state.filter}")
        return Outcome.ok(self.refresh())

    async def submit_topic(
        self, title: str, content: str, category: str, author: Optional[str] = None
    ) -> Outcome[Topic]:
        draft = NewTopic(title=title, content=content, category=category, author=author, user_id=self.client_id)
        outcome = await self.service.create_topic(draft)
        if outcome.code is ErrorCode.INVALID_INPUT:
            self.sink.render_notice(outcome.error.message)
        elif not outcome.success:
            self.sink.render_error(TOPIC_FAILED)
        else:
            self.sink.render_notice(TOPIC_POSTED)
            self.refresh()
        return outcome

    async def submit_reply(self, topic_id: int, content: str, author: Optional[str] = None) -> Outcome[Reply]:
        outcome = await self.service.create_reply(
            topic_id, NewReply(content=content, author=author, user_id=self.client_id)
        )
        if outcome.code is ErrorCode.INVALID_INPUT:
            self.sink.render_notice(outcome.error.message)
        elif not outcome.success:
            self.sink.render_error(REPLY_FAILED)
        else:
            self.sink.render_notice(REPLY_POSTED)
            self.refresh()
        return outcome


def create_board(
    config: Mapping[str, Any],
    sink: RenderSink,
    *,
    storage: Optional[DurableStorage] = None,
    latency: Optional[LatencyProvider] = None,
) -> BoardController:
    """Wire storage, store, gateway and identity from configuration values."""
    storage = storage or durable_storage(config)
    store = topic_store(config, storage)
    latency = latency or SimulatedLatency(
        fetch=float(config.get("FETCH_LATENCY", 1.0)),
        mutation=float(config.get("MUTATION_LATENCY", 0.5)),
    )
    client_id = get_or_create_client_id(storage, config.get("CLIENT_ID_STORAGE_KEY") or "dpd_user_id")
    return BoardController(TopicService(store, latency), sink, client_id=client_id)
