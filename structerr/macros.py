"""Declarative definition of error kinds and typed error classes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .builder import ErrorBuilder
from .error import Error
from .kind import ErrorKind

_MAX_CODE = 0xFFFF


def _check_code(code: Any) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"error code must be an int, not {type(code).__name__}")
    if not 0 <= code <= _MAX_CODE:
        raise ValueError(f"error code out of range 0..{_MAX_CODE}: {code}")
    return code


class DefinedError(Exception):
    """Base of the error classes produced by :func:`define_error`.

    Each subclass is bound to an :class:`ErrorKind` and carries a default
    code and message; instances may override code, message and details.
    """

    kind: ClassVar[ErrorKind | None] = None
    default_code: ClassVar[int] = 500
    default_message: ClassVar[str] = ""

    def __init__(
        self,
        code: int | None = None,
        message: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        if type(self).kind is None:
            raise TypeError(f"{type(self).__name__} is not bound to an error kind")
        super().__init__()
        self._code = None if code is None else _check_code(code)
        self._message = message
        self._details = None if details is None else dict(details)

    @property
    def code(self) -> int:
        """The overriding code, or the class default."""
        return self.default_code if self._code is None else self._code

    @property
    def message(self) -> str:
        """The overriding message, or the class default."""
        return self.default_message if self._message is None else self._message

    @property
    def details(self) -> dict[str, Any]:
        """A copy of the details, empty when none were given."""
        return dict(self._details or {})

    def with_code(self, code: int) -> DefinedError:
        """Set a custom code and return self."""
        self._code = _check_code(code)
        return self

    def with_message(self, message: str) -> DefinedError:
        """Set a custom message and return self."""
        self._message = message
        return self

    def with_details(self, details: Mapping[str, Any]) -> DefinedError:
        """Set the details and return self."""
        self._details = dict(details)
        return self

    @property
    def class_name(self) -> str:
        """The class path: side::kind::name."""
        kind = type(self).kind
        return f"{kind.side}::{kind.name}::{type(self).__name__}"

    def to_error(self) -> Error:
        """Convert into a generic :class:`Error`."""
        return (
            ErrorBuilder(type(self).kind, type(self).__name__)
            .with_code(self.code)
            .with_message(self.message)
            .with_details(self.details)
            .build()
        )

    def __str__(self) -> str:
        return f"{self.class_name} ({self.code}): {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"details={self.details!r})"
        )


def define_kinds(specs: Mapping[str, tuple[int, str]]) -> dict[str, ErrorKind]:
    """Create kinds from ``{name: (code, description)}``."""
    kinds = {}
    for name, spec in specs.items():
        code, description = spec
        kinds[name] = ErrorKind(name, code, description)
    return kinds


def define_error(
    name: str,
    kind: ErrorKind,
    code: int | None = None,
    message: str | None = None,
) -> type[DefinedError]:
    """Create a DefinedError subclass bound to ``kind``.

    ``code`` and ``message`` override the kind's code and description.
    """
    if not isinstance(kind, ErrorKind):
        raise TypeError(f"kind must be an ErrorKind, not {type(kind).__name__}")
    if not name.isidentifier():
        raise ValueError(f"invalid error name: {name!r}")
    namespace = {
        "kind": kind,
        "default_code": kind.code if code is None else _check_code(code),
        "default_message": kind.description if message is None else message,
        "__doc__": f"Error : {name} (Kind: {kind.name})",
    }
    return type(name, (DefinedError,), namespace)


def define_errors(specs: Mapping[str, Any]) -> dict[str, type[DefinedError]]:
    """Create error classes from ``{name: spec}``.

    A spec is a kind, ``(kind, code)`` or ``(kind, code, message)``.
    """
    errors = {}
    for name, spec in specs.items():
        if isinstance(spec, ErrorKind):
            errors[name] = define_error(name, spec)
        elif isinstance(spec, tuple) and 1 <= len(spec) <= 3:
            errors[name] = define_error(name, *spec)
        else:
            raise ValueError(f"invalid error spec for {name!r}: {spec!r}")
    return errors