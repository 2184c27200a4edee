"""Query state model shared by the controller and presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from querypad.config import DEFAULT_QUERY


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    PARSE = "parse"


class QueryView(BaseModel):
    """Immutable snapshot handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    query_text: str
    status: QueryStatus
    is_loading: bool
    result_text: str | None = None
    error_message: str | None = None


@dataclass(slots=True)
class QueryState:
    """Editable query text plus the outcome of the latest submission.

    Only the transition helpers below touch ``status``, ``result`` and the
    error fields, so a result and an error are never populated together.
    """

    query_text: str = DEFAULT_QUERY
    status: QueryStatus = QueryStatus.IDLE
    result: Any = None
    error_message: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def has_result(self) -> bool:
        return self.status is QueryStatus.SUCCESS

    def set_query_text(self, text: str) -> None:
        self.query_text = text

    def begin(self) -> None:
        self._clear_outcome()
        self.status = QueryStatus.LOADING

    def succeed(self, result: Any) -> None:
        self._clear_outcome()
        self.result = result
        self.status = QueryStatus.SUCCESS

    def fail(self, kind: ErrorKind, message: str) -> None:
        self._clear_outcome()
        self.error_kind = kind
        self.error_message = message
        self.status = QueryStatus.ERROR

    def reset(self) -> None:
        self._clear_outcome()
        self.status = QueryStatus.IDLE

    def view(self, render: Callable[[Any], str]) -> QueryView:
        return QueryView(
            query_text=self.query_text,
            status=self.status,
            is_loading=self.is_loading,
            result_text=render(self.result) if self.has_result else None,
            error_message=self.error_message,
        )

    def _clear_outcome(self) -> None:
        self.result = None
        self.error_message = None
        self.error_kind = None


__all__ = [
    "ErrorKind",
    "QueryState",
    "QueryStatus",
    "QueryView",
]
