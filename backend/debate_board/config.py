"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class BaseConfig:
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")

    # Durable storage backend: file | sql | memory
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "file")
    STORAGE_DIR: str = os.getenv("STORAGE_DIR", ".debate_board")

    # Database (sql backend only)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///debate_board.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    # Storage keys
    TOPICS_STORAGE_KEY: str = os.getenv("TOPICS_STORAGE_KEY", "dpd_topics")
    CLIENT_ID_STORAGE_KEY: str = os.getenv("CLIENT_ID_STORAGE_KEY", "dpd_user_id")

    # Simulated latency in seconds
    FETCH_LATENCY: float = float(os.getenv("FETCH_LATENCY", 1.0))
    MUTATION_LATENCY: float = float(os.getenv("MUTATION_LATENCY", 0.5))

    # raise | seed
    MALFORMED_DATA_POLICY: str = os.getenv("MALFORMED_DATA_POLICY", "raise")

    CORS_ORIGIN: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")


@dataclass
class TestingConfig(BaseConfig):
    STORAGE_BACKEND: str = "memory"
    FETCH_LATENCY: float = 0.0
    MUTATION_LATENCY: float = 0.0
