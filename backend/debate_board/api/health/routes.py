"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...errors import ok
from ...integrations.board_ext import board_ext


bp = Blueprint("health", __name__)


@bp.get("/", strict_slashes=False)
def alive():
    return ok({"status": "ok"})


@bp.get("/store")
def store_status():
    store = board_ext.store
    return ok({
        "initialized": store is not None,
        "topics": len(store.topics) if store is not None else 0,
    })
