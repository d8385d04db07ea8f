# Strategic metrics used by the move analyzer.
# Each metric is computed for one side on one board; the analyzer scores a
# move by the change of each metric between the board before and after it.

from __future__ import annotations
from typing import NamedTuple, Optional

from mandragora.engine.board import BELONGING_AREAS, BoardState, base_of, side_key
from mandragora.engine.core import legal_areas
from mandragora.engine.paths import distribution_pattern, landing_area
from mandragora.engine.scoring import score_value

EXTRA_MOVE_PENALTY = -100
SCORING_PENALTY = -80
EXTRA_MOVE_WARNING = "WARNING: grants opponent an extra move"
SCORING_WARNING = "WARNING: grants opponent scoring opportunity"


class Opportunities(NamedTuple):
    extra_turns: int
    scoring: int


class Penalty(NamedTuple):
    deduction: int
    warning: str

# ---------------------------------------------------------------------
# Per-side metrics
# ---------------------------------------------------------------------

def board_presence(state: BoardState, is_player_turn: bool) -> int:
    """Pieces sitting in the side's base, owned and shared areas."""
    return sum(len(state.pieces(i)) for i in BELONGING_AREAS[side_key(is_player_turn)])

def future_perfect_moves(state: BoardState, is_player_turn: bool) -> int:
    """Legal moves whose last piece would land in the side's own base."""
    base = base_of(is_player_turn)
    count = 0
    for area_id in legal_areas(state, is_player_turn):
        if landing_area(area_id, len(state.pieces(area_id)), is_player_turn) == base:
            count += 1
    return count

def average_piece_value(state: BoardState, is_player_turn: bool) -> float:
    is_first = state.is_first_player(is_player_turn)
    values = [
        score_value(p, is_first)
        for i in BELONGING_AREAS[side_key(is_player_turn)]
        for p in state.pieces(i)
    ]
    if not values:
        return 0.0
    return sum(values) / len(values)

def flexibility(state: BoardState, is_player_turn: bool) -> int:
    return len(legal_areas(state, is_player_turn))

# ---------------------------------------------------------------------
# Opponent threats
# ---------------------------------------------------------------------

def opportunities(state: BoardState, is_player_turn: bool) -> Opportunities:
    """
    Count the side's legal moves that would earn an extra turn and those
    that would score at least one piece.
    """
    base = base_of(is_player_turn)
    extra = scoring = 0
    for area_id in legal_areas(state, is_player_turn):
        pattern = distribution_pattern(area_id, len(state.pieces(area_id)), is_player_turn)
        if pattern[-1] == base:
            extra += 1
        if base in pattern:
            scoring += 1
    return Opportunities(extra, scoring)

def threat_penalty(before: Opportunities, after: Opportunities) -> Optional[Penalty]:
    """Only opportunities the move newly creates are charged to it."""
    if after.extra_turns > before.extra_turns:
        return Penalty(EXTRA_MOVE_PENALTY, EXTRA_MOVE_WARNING)
    if after.scoring > before.scoring:
        return Penalty(SCORING_PENALTY, SCORING_WARNING)
    return None

def opponent_threat_penalty(
    before_state: BoardState,
    after_state: BoardState,
    is_player_turn: bool,
) -> Optional[Penalty]:
    other = not is_player_turn
    return threat_penalty(opportunities(before_state, other), opportunities(after_state, other))

# ---------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------

def normalize_value(raw: float, penalized: bool) -> float:
    """
    Clamp to [-100, 100]. A penalized move never shows as positive and a
    clean move never shows as negative.
    """
    value = max(-100.0, min(100.0, float(raw)))
    return min(value, 0.0) if penalized else max(value, 0.0)

# ---------------------------------------------------------------------
# Snapshot of all metrics
# ---------------------------------------------------------------------

class SideMetrics(NamedTuple):
    board_presence: int
    perfect_moves: int
    avg_piece_value: float
    flexibility: int

    def delta(self, before: "SideMetrics") -> "SideMetrics":
        return SideMetrics(*(a - b for a, b in zip(self, before)))


def side_metrics(state: BoardState, is_player_turn: bool) -> SideMetrics:
    return SideMetrics(
        board_presence(state, is_player_turn),
        future_perfect_moves(state, is_player_turn),
        average_piece_value(state, is_player_turn),
        flexibility(state, is_player_turn),
    )
