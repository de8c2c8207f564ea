"""Exceptions raised by pagenav."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its valid range."""

    def __init__(self, argument: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {argument}: {value!r} ({reason})")
        self.argument = argument
        self.value = value
