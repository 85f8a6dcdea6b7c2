"""Board error taxonomy, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from enum import Enum
from typing import Any

from flask import Flask, jsonify


class ErrorCode(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILURE = "persistence_failure"
    MALFORMED_DATA = "malformed_data"
    UNAVAILABLE = "unavailable"


class BoardError(Exception):
    code: ErrorCode = ErrorCode.UNAVAILABLE
    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code.value, "message": self.message}


class ValidationError(BoardError):
    """A required field is missing/blank or a category is not recognized."""

    code = ErrorCode.INVALID_INPUT
    status = 422


class NotFoundError(BoardError):
    code = ErrorCode.NOT_FOUND
    status = 404


class PersistenceFailure(BoardError):
    """Durable storage could not be read or written."""

    code = ErrorCode.PERSISTENCE_FAILURE
    status = 500


class MalformedStorageData(BoardError):
    code = ErrorCode.MALFORMED_DATA
    status = 500


class GatewayUnavailable(BoardError):
    """The simulated (or real) remote call failed before reaching the store."""

    code = ErrorCode.UNAVAILABLE
    status = 503


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BoardError)
    def board_error(err: BoardError):  # type: ignore[override]
        return jsonify(err.to_dict()), err.status

    @app.errorhandler(400)
    def bad_request(err: Exception):  # type: ignore[override]
        return jsonify({"error": "bad_request", "message": str(err)}), 400

    @app.errorhandler(404)
    def not_found(err: Exception):  # type: ignore[override]
        return jsonify({"error": "not_found", "message": str(err)}), 404

    @app.errorhandler(422)
    def unprocessable(err: Exception):  # type: ignore[override]
        return jsonify({"error": "unprocessable_entity", "message": str(err)}), 422

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        return jsonify({"error": "internal_server_error", "message": "unexpected error"}), 500


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status
