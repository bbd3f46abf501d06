"""Error types raised by fetchcache.

The request helper never raises these for ordinary failures (it folds them
into ``RequestResult.error``). They surface from the cache orchestrator, which
lets fetch failures propagate to its caller unchanged.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    FETCH_FAILED = "FETCH_FAILED"
    HTTP_STATUS = "HTTP_STATUS"
    INVALID_INPUT = "INVALID_INPUT"


class FetchCacheError(Exception):
    """Base exception carrying a machine-readable code."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }


class NetworkError(FetchCacheError):
    """The fetch collaborator could not obtain a successful response.

    ``status_code`` is set when the server answered with a non-2xx status and
    ``None`` for transport failures (DNS, refused connection, timeout).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        recoverable: bool,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, recoverable)
        self.status_code = status_code
