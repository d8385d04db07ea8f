# Mandragora core engine (state-based public API)
#
#   is_valid_move(area_id, state, is_player_turn)  -> bool
#   execute_move(area_id, state, is_player_turn)   -> MoveResult
#   has_any_valid_move(state, is_player_turn)      -> bool
#
# Everything here is pure: the input BoardState is never modified.

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple

from mandragora.engine.board import (
    BoardState, Piece, PLAYER, OPPONENT, base_of, is_allowed, side_key,
)
from mandragora.engine.paths import distribution_pattern
from mandragora.engine.scoring import total_score
from mandragora.errors import InvalidMoveError

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    new_state: BoardState
    scored_pieces: Tuple[Piece, ...]
    extra_turn: bool


@dataclass
class MoveRecord:
    side: str
    from_area: int
    to_areas: List[int]
    pieces_moved: List[Piece]
    extra_turn: bool = False
    analyzer_score: Optional[float] = None
    timestamp: float = field(default_factory=time.time)


@dataclass
class GameResult:
    player_points: int
    opponent_points: int
    winner: str            # "player" | "opponent" | "draw"
    moves: int = 0
    history: List[MoveRecord] = field(default_factory=list)

# ---------------------------------------------------------------------
# Validity
# ---------------------------------------------------------------------

def is_valid_move(area_id: int, state: BoardState, is_player_turn: bool) -> bool:
    area = state.area(area_id)
    if area is None or not area.pieces:
        return False
    return is_allowed(area.allowed, is_player_turn)

def legal_areas(state: BoardState, is_player_turn: bool) -> List[int]:
    return [a.id for a in state.areas if a.pieces and is_allowed(a.allowed, is_player_turn)]

def has_any_valid_move(state: BoardState, is_player_turn: bool) -> bool:
    return any(a.pieces and is_allowed(a.allowed, is_player_turn) for a in state.areas)

def is_terminal_for_next_side(state: BoardState, next_is_player_turn: bool) -> bool:
    """The game ends as soon as the side about to act has nothing to move."""
    return not has_any_valid_move(state, next_is_player_turn)

def next_turn(is_player_turn: bool, extra_turn: bool) -> bool:
    return is_player_turn if extra_turn else not is_player_turn

# ---------------------------------------------------------------------
# Distribution
# ---------------------------------------------------------------------

def _distribute(
    state: BoardState,
    area_id: int,
    is_player_turn: bool,
) -> Tuple[BoardState, Tuple[Piece, ...], bool, List[int]]:
    # last in, first out: the top of the stack is dropped first
    pieces = list(reversed(state.pieces(area_id)))
    pattern = distribution_pattern(area_id, len(pieces), is_player_turn)
    own_base = base_of(is_player_turn)

    stacks: Dict[int, List[Piece]] = {area_id: []}
    scored: List[Piece] = []
    extra_turn = False
    for i, (piece, target) in enumerate(zip(pieces, pattern)):
        if target == own_base:
            scored.append(piece)
            extra_turn = i == len(pieces) - 1
            continue
        if target not in stacks:
            stacks[target] = list(state.pieces(target))
        stacks[target].append(piece)

    new_state = state.with_pieces(stacks).with_scored(is_player_turn, scored)
    return new_state, tuple(scored), extra_turn, pattern

def simulate_move(area_id: int, state: BoardState, is_player_turn: bool) -> MoveResult:
    """
    Distribution without the validity check. The analyzer uses it to look at
    hypothetical moves, e.g. the other side's replies.
    """
    new_state, scored, extra_turn, _ = _distribute(state, area_id, is_player_turn)
    return MoveResult(new_state, scored, extra_turn)

def execute_move(area_id: int, state: BoardState, is_player_turn: bool) -> MoveResult:
    """
    Pick up every piece of `area_id` and sow them along the mover's path.
    Pieces reaching the mover's own base are scored; the last one landing
    there earns an extra turn.

    Raises InvalidMoveError if the area is missing, empty or not eligible.
    """
    area = state.area(area_id)
    if area is None:
        reason = "no such area"
    elif not area.pieces:
        reason = "area is empty"
    elif not is_allowed(area.allowed, is_player_turn):
        reason = f"area belongs to {area.allowed}"
    else:
        reason = None
    if reason is not None:
        logger.debug("rejected move from %s (%s): %s", area_id, side_key(is_player_turn), reason)
        raise InvalidMoveError(area_id, is_player_turn, reason)

    return simulate_move(area_id, state, is_player_turn)

# ---------------------------------------------------------------------
# Scores & records
# ---------------------------------------------------------------------

def side_points(state: BoardState, is_player_turn: bool) -> int:
    return total_score(state.scored(is_player_turn), state.is_first_player(is_player_turn))

def game_result(state: BoardState, moves: int = 0, history: List[MoveRecord] | None = None) -> GameResult:
    p = side_points(state, True)
    o = side_points(state, False)
    winner = PLAYER if p > o else OPPONENT if o > p else "draw"
    return GameResult(p, o, winner, moves, list(history or []))

def build_move_record(
    area_id: int,
    state: BoardState,
    is_player_turn: bool,
    extra_turn: bool,
    analyzer_score: Optional[float] = None,
) -> MoveRecord:
    """Record a move against the state BEFORE it was played."""
    pieces = list(reversed(state.pieces(area_id)))
    return MoveRecord(
        side=side_key(is_player_turn),
        from_area=area_id,
        to_areas=distribution_pattern(area_id, len(pieces), is_player_turn),
        pieces_moved=pieces,
        extra_turn=extra_turn,
        analyzer_score=analyzer_score,
    )
