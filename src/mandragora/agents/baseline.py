# Baseline move choosers, mostly for simulations.
from __future__ import annotations
import random
from typing import Optional

from mandragora.engine.board import BoardState
from mandragora.engine.core import legal_areas


def first_valid_move(state: BoardState, is_player_turn: bool) -> Optional[int]:
    """Lowest legal area id, or None when the side is stuck."""
    acts = legal_areas(state, is_player_turn)
    return acts[0] if acts else None

def random_move(state: BoardState, is_player_turn: bool, rng: Optional[random.Random] = None) -> Optional[int]:
    acts = legal_areas(state, is_player_turn)
    if not acts:
        return None
    return (rng or random).choice(acts)
