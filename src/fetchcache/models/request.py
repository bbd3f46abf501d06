from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class MethodType(StrEnum):
    """HTTP methods supported by the request helper."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestError(BaseModel):
    """Error half of a request result.

    ``code`` is only present when the server returned a structured
    ``{"code": ..., "message": ...}`` JSON body.
    """

    code: int | float | None = None  # Passed through as the server sent it
    message: str


class RequestResult(BaseModel):
    """Uniform result of ``ApiClient.request``.

    Exactly one of ``error`` or ``text`` is set. ``data`` accompanies ``text``
    when the response declared a JSON content type.
    """

    error: RequestError | None = None
    data: Any = None
    text: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the fields that were set.

        Unlike ``model_dump(exclude_none=True)`` this keeps ``data`` when a JSON
        body was literally ``null``.
        """
        dumped = self.model_dump(include=self.model_fields_set)
        if self.error is not None:
            dumped["error"] = self.error.model_dump(exclude_none=True)
        return dumped
