"""Contract between the board controller and whatever draws the topics."""
from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.topic import Topic


class RenderSink(Protocol):
    def render_loading(self) -> None: ...

    def render_list(self, topics: Sequence[Topic]) -> None:
        """Draw ``topics`` in order; an empty sequence gets the "no topics" placeholder."""
        ...

    def render_error(self, message: str) -> None: ...

    def render_notice(self, message: str) -> None: ...
