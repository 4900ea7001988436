"""Categories of errors with a default status code and description."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_CODE = 0xFFFF


@dataclass(frozen=True)
class ErrorKind:
    """A named error category with a numeric code and a description."""

    name: str
    code: int
    description: str

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"error code must be an int, not {type(self.code).__name__}")
        if not 0 <= self.code <= _MAX_CODE:
            raise ValueError(f"error code out of range 0..{_MAX_CODE}: {self.code}")

    @property
    def side(self) -> str:
        """'Client' for codes below 500, 'Server' otherwise."""
        return "Client" if self.code <= 499 else "Server"

    @classmethod
    def default(cls) -> ErrorKind:
        """The fallback kind: an internal server error (500)."""
        return cls("InternalServerError", 500, "Internal Server Error")