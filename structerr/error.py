"""A structured, serialisable error."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_MAX_CODE = 0xFFFF


def _check_code(code: Any) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"error code must be an int, not {type(code).__name__}")
    if not 0 <= code <= _MAX_CODE:
        raise ValueError(f"error code out of range 0..{_MAX_CODE}: {code}")
    return code


class Error(Exception):
    """An error carrying a code, a class path, a message and details.

    The code is not part of the serialised form.
    """

    def __init__(
        self,
        code: int,
        class_name: str,
        message: str,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        details = {} if details is None else details
        if not isinstance(details, Mapping):
            raise TypeError("details must be a mapping")
        super().__init__(code, class_name, message, dict(details))
        self.code = _check_code(code)
        self.class_name = str(class_name)
        self.message = str(message)
        self._details = {str(key): details[key] for key in sorted(details)}

    @property
    def details(self) -> dict[str, Any]:
        """A copy of the details, ordered by key."""
        return dict(self._details)

    def __str__(self) -> str:
        return f"{self.class_name} ({self.code}) - {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, class_name={self.class_name!r}, "
            f"message={self.message!r}, details={self._details!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (
            self.code == other.code
            and self.class_name == other.class_name
            and self.message == other.message
            and self._details == other._details
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """The serialised form: class, message and details (no code)."""
        return {"class": self.class_name, "message": self.message, "details": self.details}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], code: int | None = None) -> Error:
        """Build an error from its serialised form.

        The code is taken from ``code`` when given, else from ``data["code"]``.
        """
        if code is None:
            if "code" not in data:
                raise ValueError("missing field 'code'")
            code = data["code"]
        for field in ("class", "message", "details"):
            if field not in data:
                raise ValueError(f"missing field {field!r}")
        if not isinstance(data["class"], str) or not isinstance(data["message"], str):
            raise TypeError("'class' and 'message' must be strings")
        if not isinstance(data["details"], Mapping):
            raise TypeError("'details' must be a mapping")
        return cls(code, data["class"], data["message"], data["details"])

    def to_json(self) -> str:
        """The serialised form as a JSON string."""
        return json.dumps(self.to_dict())

    def to_io_error(self) -> OSError:
        """An OSError whose message is this error's text."""
        return OSError(str(self))