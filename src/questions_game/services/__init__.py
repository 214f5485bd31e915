"""Service Layer: Game sessions."""

from __future__ import annotations

from .game_service import GameSession

__all__ = [
    "GameSession",
]
