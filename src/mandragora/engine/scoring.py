# Scoring rules
#   Mandragora              1 point
#   Korrigan / Pachypodium  2 (first player) / 3 (second player)
#   Citrillus / Adenium     3 (first player) / 4 (second player)
# Unknown or missing pieces are worth 0 and never raise.

from __future__ import annotations
from typing import Any, Iterable

from mandragora.engine.board import ADENIUM, CITRILLUS, KORRIGAN, MANDRAGORA, PACHYPODIUM

_COMMON = {MANDRAGORA}
_MID_TIER = {KORRIGAN, PACHYPODIUM}
_HIGH_TIER = {CITRILLUS, ADENIUM}


def score_value(piece: Any, is_first_player: bool) -> int:
    kind = getattr(piece, "type", None)
    if kind is None and isinstance(piece, dict):
        kind = piece.get("type")
    if kind in _COMMON:
        return 1
    if kind in _MID_TIER:
        return 2 if is_first_player else 3
    if kind in _HIGH_TIER:
        return 3 if is_first_player else 4
    return 0


def total_score(pieces: Iterable[Any], is_first_player: bool) -> int:
    """Sum of score_value over a collection; None entries count as 0."""
    if not pieces:
        return 0
    return sum(score_value(p, is_first_player) for p in pieces)
