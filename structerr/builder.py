"""Fluent construction of Error instances from an ErrorKind."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .error import Error
from .kind import ErrorKind


class ErrorBuilder:
    """Collects a kind, a name and optional overrides, then builds an Error."""

    def __init__(self, kind: ErrorKind | None = None, name: str = "UnknownError") -> None:
        self.kind = ErrorKind.default() if kind is None else kind
        self.name = name
        self.code: int | None = None
        self.message: str | None = None
        self.details: dict[str, Any] = {}

    def with_code(self, code: int) -> ErrorBuilder:
        """Override the kind's code."""
        self.code = code
        return self

    def with_message(self, message: str) -> ErrorBuilder:
        """Override the kind's description as the message."""
        self.message = message
        return self

    def with_details(self, details: Mapping[str, Any]) -> ErrorBuilder:
        """Replace the details."""
        self.details = dict(details)
        return self

    def build(self) -> Error:
        """Build the Error, falling back to the kind's code and description."""
        return Error(
            self.kind.code if self.code is None else self.code,
            f"{self.kind.side}::{self.kind.name}::{self.name}",
            self.kind.description if self.message is None else self.message,
            self.details,
        )