"""Command line entry point against a file-backed board."""

import sys

import pytest
from loguru import logger

from debate_board import cli
from debate_board.config import BaseConfig


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def _main(argv, root):
    config = BaseConfig(STORAGE_BACKEND="file", STORAGE_DIR=str(root), FETCH_LATENCY=0.0, MUTATION_LATENCY=0.0)
    return cli.main(argv, config)


def test_list_shows_seed(tmp_path, capsys):
    assert _main(["list"], tmp_path) == 0
    out = capsys.readouterr().out
    assert "Is AI Art Really Art?" in out


def test_list_empty_category(tmp_path, capsys):
    assert _main(["list", "--category", "ethics"], tmp_path) == 0
    assert "No topics in this category yet" in capsys.readouterr().out


def test_post_then_reply_persists(tmp_path, capsys):
    assert _main(["post", "--title", "Four day week?", "--content", "Go.", "--category", "society"], tmp_path) == 0
    assert (tmp_path / "dpd_topics.json").exists()
    assert _main(["reply", "2", "--content", "Sure"], tmp_path) == 0
    capsys.readouterr()
    _main(["list", "-c", "society"], tmp_path)
    out = capsys.readouterr().out
    assert out.index("Four day week?") < out.index("Is AI Art Really Art?")
    assert "Sure" in out


def test_reply_to_missing_topic_fails(tmp_path, capsys):
    assert _main(["reply", "424242", "--content", "hi"], tmp_path) == 1
    assert "Failed to post reply" in capsys.readouterr().out


def test_whoami_is_stable(tmp_path, capsys):
    _main(["whoami"], tmp_path)
    first = capsys.readouterr().out.strip()
    _main(["whoami"], tmp_path)
    assert capsys.readouterr().out.strip() == first
    assert first.startswith("user_")
