"""Errors raised while interpreting a swagger specification."""

from __future__ import annotations

from collections.abc import Iterable


class InvalidSpecError(Exception):
    """The structure of a swagger spec prevents code generation."""

    def __init__(self, path: Iterable[str] | None, reason: str) -> None:
        self.path: tuple[str, ...] = tuple(path or ())
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        if not self.path:
            return f"Invalid spec: {self.reason}"
        return f"Invalid spec at {'.'.join(self.path)}: {self.reason}"

    def __str__(self) -> str:
        return self._message()