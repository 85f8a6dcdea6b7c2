"""Command line entry point: browse and post to the board, or serve the REST API."""
from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import asdict
from typing import List, Optional

from loguru import logger

from . import create_app
from .config import BaseConfig
from .domain.topic import Category
from .render.text import TextRenderer
from .services.board import BoardController, create_board
from .services.projection import parse_filter

FILTERS = ["all"] + [c.value for c in Category]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="debate-board", description="Anonymous discussion board")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="show topics")
    p_list.add_argument("-c", "--category", default="all", choices=FILTERS)

    p_post = sub.add_parser("post", help="start a new topic")
    p_post.add_argument("--title", required=True)
    p_post.add_argument("--content", required=True)
    p_post.add_argument("--category", required=True, choices=[c.value for c in Category])
    p_post.add_argument("--author", default=None, help="display name (optional)")

    p_reply = sub.add_parser("reply", help="reply to a topic")
    p_reply.add_argument("topic_id", type=int)
    p_reply.add_argument("--content", required=True)
    p_reply.add_argument("--author", default=None, help="display name (optional)")

    sub.add_parser("whoami", help="print this client's anonymous id")

    p_serve = sub.add_parser("serve", help="run the REST API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=3000)
    return parser


async def run_command(args: argparse.Namespace, board: BoardController) -> int:
    if args.command == "list":
        board.state.filter = parse_filter(args.category)
        return 0 if (await board.load()).success else 1

    fetched = await board.service.fetch_topics()
    if not fetched.success:
        board.sink.render_error(fetched.error.message)
        return 1
    if args.command == "post":
        outcome = await board.submit_topic(args.title, args.content, args.category, args.author)
        return 0 if outcome.success else 1
    if args.command == "reply":
        outcome = await board.submit_reply(args.topic_id, args.content, args.author)
        return 0 if outcome.success else 1
    return 2


def main(argv: Optional[List[str]] = None, config: Optional[BaseConfig] = None) -> int:
    args = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    config = config or BaseConfig()
    if args.command == "serve":
        create_app(config).run(host=args.host, port=args.port)
        return 0

    board = create_board(asdict(config), TextRenderer())
    if args.command == "whoami":
        print(board.client_id)
        return 0
    return asyncio.run(run_command(args, board))


if __name__ == "__main__":
    sys.exit(main())
