from __future__ import annotations

"""Errors raised while reading persisted question trees."""

import os
from typing import Optional


class MalformedTreeFile(ValueError):
    """Raised when a tree file does not follow the A:/Q: record grammar."""

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.message = message
        self.source = source
        self.line_number = line_number
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        base = self.message
        if self.source:
            base = f"{base} ({self._relative_path(self.source)})"
        if self.line_number is not None:
            base = f"{base} line {self.line_number}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover
            return path

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["MalformedTreeFile"]
