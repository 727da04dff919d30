"""Errors raised by script generation."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    SERVICE_FAILURE = "service_failure"
    MALFORMED_RESPONSE = "malformed_response"


class GenerationError(RuntimeError):
    """A script could not be generated.

    ``kind`` tells whether the generation service call failed or its reply
    could not be parsed into a script; ``cause`` holds the underlying
    exception, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.args[0]}"
