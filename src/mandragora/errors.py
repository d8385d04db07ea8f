"""
Mandragora error hierarchy.

Every rule violation raised by the engine derives from MandragoraError so
callers can catch the whole family at once.
"""

from __future__ import annotations
from typing import Optional

__all__ = ["MandragoraError", "InvalidMoveError", "UnknownPatternError"]


class MandragoraError(Exception):
    """Base exception for all mandragora errors."""


class InvalidMoveError(MandragoraError, ValueError):
    """
    Raised by execute_move when the source area is missing, empty or not
    eligible for the acting side. Callers are expected to check
    is_valid_move first, so this signals a programming error.
    """

    def __init__(self, area_id: int, is_player_turn: bool, reason: Optional[str] = None):
        self.area_id = area_id
        self.is_player_turn = is_player_turn
        self.reason = reason or "invalid move"
        side = "player" if is_player_turn else "opponent"
        super().__init__(f"Invalid move from area {area_id} for {side}: {self.reason}")


class UnknownPatternError(MandragoraError, KeyError):
    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(pattern_id)

    def __str__(self) -> str:
        return f"Unknown board pattern: {self.pattern_id!r}"
