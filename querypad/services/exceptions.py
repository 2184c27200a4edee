"""Failures raised while talking to the query endpoint."""

from __future__ import annotations

from querypad.domain.models import ErrorKind


class SubmissionError(RuntimeError):
    kind: ErrorKind = ErrorKind.TRANSPORT


class TransportError(SubmissionError):
    """The request could not be sent or no response came back."""

    kind = ErrorKind.TRANSPORT


class HttpStatusError(SubmissionError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Endpoint responded with status {status_code}.")
        self.status_code = status_code


class ParseError(SubmissionError):
    """A successful response carried a body that is not valid JSON."""

    kind = ErrorKind.PARSE


__all__ = [
    "HttpStatusError",
    "ParseError",
    "SubmissionError",
    "TransportError",
]
