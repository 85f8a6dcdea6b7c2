"""Plain-text render sink for terminals."""
from __future__ import annotations

import sys
import textwrap
from typing import Sequence, TextIO

from ..domain.topic import Reply, Topic, parse_timestamp

EMPTY_PLACEHOLDER = "No topics in this category yet. Be the first to post one!"
LOADING = "Loading topics..."


def format_date(value: str) -> str:
    moment = parse_timestamp(value)
    return f"{moment:%b} {moment.day}, {moment.year}"


def reply_count(n: int) -> str:
    return f"{n} {'reply' if n == 1 else 'replies'}"


class TextRenderer:
    def __init__(self, out: TextIO | None = None, width: int = 78) -> None:
        self.out = out or sys.stdout
        self.width = width

    def _write(self, line: str = "") -> None:
        self.out.write(line + "\n")

    def _wrap(self, text: str, indent: str = "") -> None:
        for line in textwrap.wrap(text, self.width - len(indent)) or [""]:
            self._write(indent + line)

    def render_loading(self) -> None:
        self._write(LOADING)

    def render_error(self, message: str) -> None:
        self._write(f"error: {message}")

    def render_notice(self, message: str) -> None:
        self._write(f"notice: {message}")

    def render_list(self, topics: Sequence[Topic]) -> None:
        if not topics:
            self._write(EMPTY_PLACEHOLDER)
            return
        for topic in topics:
            self.render_topic(topic)

    def render_topic(self, topic: Topic) -> None:
        self._write("=" * self.width)
        self._write(f"[{topic.id}] {topic.title}")
        self._write(f"Posted by: {topic.author} on {format_date(topic.date)}")
        self._write()
        self._wrap(topic.content)
        self._write()
        self._write(f"Category: {topic.category.label} | {reply_count(len(topic.replies))}")
        for reply in topic.replies:
            self.render_reply(reply)

    def render_reply(self, reply: Reply) -> None:
        self._write(f"    {reply.author} • {format_date(reply.date)}")
        self._wrap(reply.content, indent="    ")
