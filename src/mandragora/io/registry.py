# src/mandragora/io/registry.py
import logging
from typing import Callable, Dict, Optional, Tuple

from mandragora.agents.analyzer import recommend_move
from mandragora.agents.baseline import first_valid_move, random_move
from mandragora.engine.board import BoardState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Agent adapters: (state, is_player_turn) -> (area_id | None, analyzer score | None)
# ---------------------------------------------------------------------
def _analyzer_action(state: BoardState, is_player_turn: bool) -> Tuple[Optional[int], Optional[float]]:
    best = recommend_move(state, is_player_turn)
    if best is None:
        return None, None
    return best.area_id, best.total_value

def _first_action(state: BoardState, is_player_turn: bool) -> Tuple[Optional[int], Optional[float]]:
    return first_valid_move(state, is_player_turn), None

def _random_action(state: BoardState, is_player_turn: bool) -> Tuple[Optional[int], Optional[float]]:
    return random_move(state, is_player_turn), None

AGENTS: Dict[str, Callable[[BoardState, bool], Tuple[Optional[int], Optional[float]]]] = {
    "analyzer": _analyzer_action,
    "first": _first_action,
    "random": _random_action,
}
ALIASES = {"ai": "analyzer", "minimax": "analyzer", "alpha_beta": "analyzer", "greedy": "first"}

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------
def resolve_agent(agent: Optional[str]) -> str:
    name = (agent or "analyzer").lower()
    return ALIASES.get(name, name)

def pick_scored_action(state: BoardState, is_player_turn: bool, agent: str = "analyzer") -> Tuple[Optional[int], Optional[float]]:
    name = resolve_agent(agent)
    fn = AGENTS.get(name)
    if fn is None:
        logger.warning("unknown agent %r, falling back to first legal move", agent)
        fn = _first_action
    return fn(state, is_player_turn)

def pick_action(state: BoardState, is_player_turn: bool, agent: str = "analyzer") -> Optional[int]:
    return pick_scored_action(state, is_player_turn, agent)[0]
