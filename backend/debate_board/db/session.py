"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from typing import Optional

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker

from .base import Base


class Database:
    def __init__(self) -> None:
        self.engine = None
        self.Session = None  # type: ignore[assignment]

    def connect(self, url: str, echo: bool = False) -> "Database":
        self.engine = create_engine(url, echo=echo, pool_pre_ping=True, future=True)
        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False, future=True)
        )
        Base.metadata.create_all(self.engine)
        return self

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        echo: bool = app.config.get("SQL_ECHO", False)
        self.connect(url, echo=echo)

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()

    def dispose(self, _: Optional[object] = None) -> None:
        if self.Session is not None:
            self.Session.remove()
        if self.engine is not None:
            self.engine.dispose()


db = Database()
