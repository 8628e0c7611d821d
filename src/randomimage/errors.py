from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_CATEGORY = "INVALID_CATEGORY"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    CATEGORY_NO_VALID_URLS = "CATEGORY_NO_VALID_URLS"
    NO_CATEGORY_FILES = "NO_CATEGORY_FILES"
    NO_IMAGES_AVAILABLE = "NO_IMAGES_AVAILABLE"
    FILE_READ_FAILED = "FILE_READ_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CATEGORY: 400,
    ErrorCode.CATEGORY_NOT_FOUND: 404,
    ErrorCode.CATEGORY_NO_VALID_URLS: 422,
    ErrorCode.NO_CATEGORY_FILES: 404,
    ErrorCode.NO_IMAGES_AVAILABLE: 404,
    ErrorCode.FILE_READ_FAILED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class RandomImageError(Exception):
    """Raised by the core and by request handlers for all expected failures.

    Caught by server.py and serialised into the JSON error envelope.
    ``meta`` is for logs only and never reaches the client.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status: int | None = None,
        meta: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status if status is not None else STATUS_BY_CODE[code]
        self.meta = meta or {}

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }
