"""SQLAlchemy-backed durable storage namespace."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete

from .models.record import StorageRecord
from .session import Database


class SqlStorage:
    def __init__(self, database: Database) -> None:
        if database.Session is None:
            raise RuntimeError("Database is not connected; call connect() or init_app() first")
        self.database = database

    def get_item(self, key: str) -> Optional[str]:
        session = self.database.Session()
        row = session.get(StorageRecord, key)
        return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        session = self.database.Session()
        try:
            row = session.get(StorageRecord, key)
            if row is None:
                session.add(StorageRecord(key=key, value=value))
            else:
                row.value = value
            session.commit()
        except Exception:
            session.rollback()
            raise

    def remove_item(self, key: str) -> None:
        session = self.database.Session()
        session.execute(delete(StorageRecord).where(StorageRecord.key == key))
        session.commit()
