"""Turning foreign exceptions into structured Error instances."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .error import Error


class ErrorConverter(ABC):
    """Base for converters that map an exception onto an Error.

    Subclasses implement :meth:`convert` as a classmethod; callers use
    :meth:`convert_error`, which records the original exception first.
    """

    @classmethod
    def store_origin(
        cls,
        error: BaseException,
        text: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> tuple[str, dict[str, Any]]:
        """Pick the message and enrich the context with the original error.

        With ``text`` given, the message is ``text`` and the context gains an
        ``origin`` entry holding the original error's text. Without it, the
        message is the error's own text and the context is left as it is.
        The given context is never modified.
        """
        enriched = dict(context or {})
        if text is None:
            return str(error), enriched
        enriched["origin"] = str(error)
        return text, enriched

    @classmethod
    def convert_error(
        cls,
        error: BaseException,
        text: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Error:
        """Store the origin of ``error``, then hand over to :meth:`convert`."""
        message, enriched = cls.store_origin(error, text, context)
        return cls.convert(error, message, enriched)

    @classmethod
    @abstractmethod
    def convert(cls, error: BaseException, text: str, context: dict[str, Any]) -> Error:
        """Build the Error for ``error`` from the final message and context."""