# Move analyzer (delta heuristics + alpha-beta look-ahead)
#
# Every legal source area of the side to act gets a MoveAnalysis:
#   raw = points*10 + extra_turn*90
#       + board_presence_delta*5 + perfect_moves_delta*20
#       + avg_piece_value_delta*20 + flexibility_delta*3
#       + threat_penalty + DISCOUNT * look_ahead
# then normalized to [-100, 100] (penalized <= 0, clean >= 0).
#
# Look-ahead values are always on the analyzed side's scale: the analyzed
# side maximizes, the other side minimizes, and an extra turn keeps the
# same side on move for the next ply.

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from mandragora import config
from mandragora.agents.heuristics import (
    Opportunities, Penalty, normalize_value, opportunities, side_metrics, threat_penalty,
)
from mandragora.engine.board import BoardState, base_of, side_key
from mandragora.engine.core import legal_areas, next_turn, simulate_move
from mandragora.engine.paths import distribution_pattern
from mandragora.engine.scoring import total_score

logger = logging.getLogger(__name__)

POINTS_WEIGHT = 10
EXTRA_TURN_BONUS = 90
BOARD_PRESENCE_WEIGHT = 5
PERFECT_MOVES_WEIGHT = 20
AVG_PIECE_VALUE_WEIGHT = 20     # +2 per 0.1 of average value
FLEXIBILITY_WEIGHT = 3

EARLY_SCORE_WEIGHT = 5
EARLY_MOBILITY_WEIGHT = 3
LATE_SCORE_WEIGHT = 15

FORCED_PENALTY_WARNING = "WARNING: best continuation grants opponent an opening"


@dataclass
class MoveAnalysis:
    area_id: int
    total_value: float
    factors: List[Tuple[str, float]] = field(default_factory=list)
    warning: Optional[str] = None
    raw_value: float = 0.0

    @property
    def penalized(self) -> bool:
        return self.warning is not None

    def factor(self, name: str) -> float:
        return dict(self.factors)[name]

    @property
    def explanation(self) -> str:
        f = dict(self.factors)
        points = int(f.get("points", 0))
        parts = [f"Area {self.area_id}: gains {points} point{'' if points == 1 else 's'}"]
        if f.get("extra_turn"):
            parts.append("★ EXTRA TURN")
        parts.append(f"board presence {int(f.get('board_presence', 0)):+d}")
        parts.append(f"perfect moves {int(f.get('perfect_moves', 0)):+d}")
        parts.append(f"avg piece value {f.get('avg_piece_value', 0.0):+.2f}")
        parts.append(f"flexibility {int(f.get('flexibility', 0)):+d}")
        parts.append(f"future value {f.get('future_value', 0.0):.1f}")
        if self.warning:
            parts.append(self.warning)
        return ", ".join(parts)

# ---------------------------------------------------------------------
# Static evaluation (leaf nodes)
# ---------------------------------------------------------------------

def static_evaluation(state: BoardState, is_player_turn: bool) -> float:
    """
    Phase aware: with many pieces left, weigh scored-piece difference and
    mobility; late in the game only the scored-piece difference counts.
    """
    diff = len(state.scored(is_player_turn)) - len(state.scored(not is_player_turn))
    if state.pieces_in_play() > config.EARLY_GAME_THRESHOLD:
        mobility = len(legal_areas(state, is_player_turn))
        return float(diff * EARLY_SCORE_WEIGHT + mobility * EARLY_MOBILITY_WEIGHT)
    return float(diff * LATE_SCORE_WEIGHT)

# ---------------------------------------------------------------------
# One ply: immediate points, extra turn, threat penalty
# ---------------------------------------------------------------------

def _ply(
    state: BoardState,
    area_id: int,
    is_player_turn: bool,
    before: Opportunities,
) -> Tuple[float, BoardState, bool, Optional[Penalty]]:
    """Value of a single move from the mover's own point of view."""
    new_state, scored, extra_turn = simulate_move(area_id, state, is_player_turn)
    points = total_score(scored, state.is_first_player(is_player_turn))
    penalty = threat_penalty(before, opportunities(new_state, not is_player_turn))
    value = points * POINTS_WEIGHT + (EXTRA_TURN_BONUS if extra_turn else 0)
    if penalty is not None:
        value += penalty.deduction
    return float(value), new_state, extra_turn, penalty

def _order_moves(state: BoardState, is_player_turn: bool) -> List[int]:
    """Cheap one-ply ordering (improves pruning): extra turns, then scoring moves."""
    base = base_of(is_player_turn)

    def key(area_id: int) -> Tuple[bool, bool]:
        pattern = distribution_pattern(area_id, len(state.pieces(area_id)), is_player_turn)
        return pattern[-1] != base, base not in pattern

    return sorted(legal_areas(state, is_player_turn), key=key)

# ---------------------------------------------------------------------
# Alpha-beta core
# ---------------------------------------------------------------------

def _search(
    state: BoardState,
    is_player_turn: bool,
    depth: int,
    alpha: float,
    beta: float,
    root_is_player: bool,
    stats: Dict[str, int],
) -> Tuple[float, bool]:
    """
    Returns (value on the root side's scale, penalized) where `penalized`
    tells whether the chosen line forces the root side into a move that
    opens something for the opponent.
    """
    stats["nodes"] += 1
    if depth <= 0:
        return static_evaluation(state, root_is_player), False
    moves = _order_moves(state, is_player_turn)
    if not moves:
        return static_evaluation(state, root_is_player), False

    is_max = is_player_turn == root_is_player
    before = opportunities(state, not is_player_turn)
    best = -math.inf if is_max else math.inf
    best_penalized = False

    d = config.DISCOUNT_FACTOR
    for mv in moves:
        value, ns, extra, penalty = _ply(state, mv, is_player_turn, before)
        # window on the child's scale: parent score is value + d * child (max)
        # or -value + d * child (min)
        signed = value if is_max else -value
        if d > 0:
            lo, hi = (alpha - signed) / d, (beta - signed) / d
        else:
            lo, hi = -math.inf, math.inf
        child, child_penalized = _search(
            ns, next_turn(is_player_turn, extra), depth - 1, lo, hi, root_is_player, stats,
        )
        if is_max:
            score = signed + d * child
            penalized = penalty is not None or child_penalized
            if score > best or (score == best and best_penalized and not penalized):
                best, best_penalized = score, penalized
            alpha = max(alpha, best)
        else:
            score = signed + d * child
            if score < best:
                best, best_penalized = score, child_penalized
            beta = min(beta, best)
        if beta <= alpha:
            stats["cutoffs"] += 1
            break
    return best, best_penalized

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def analyze_moves(
    state: BoardState,
    is_player_turn: bool,
    depth: Optional[int] = None,
) -> List[MoveAnalysis]:
    """
    Score every legal move for the side to act. Output follows area-id
    order; sort by total_value (stable) to rank. Read-only on `state`.
    """
    depth = config.SEARCH_DEPTH if depth is None else depth
    moves = legal_areas(state, is_player_turn)
    if not moves:
        return []

    is_first = state.is_first_player(is_player_turn)
    before_metrics = side_metrics(state, is_player_turn)
    before_threats = opportunities(state, not is_player_turn)
    stats = {"nodes": 0, "cutoffs": 0}

    results = []
    for area_id in moves:
        new_state, scored, extra_turn = simulate_move(area_id, state, is_player_turn)
        points = total_score(scored, is_first)
        delta = side_metrics(new_state, is_player_turn).delta(before_metrics)
        penalty = threat_penalty(before_threats, opportunities(new_state, not is_player_turn))

        future, future_penalized = _search(
            new_state,
            next_turn(is_player_turn, extra_turn),
            depth - 1,
            -math.inf,
            math.inf,
            is_player_turn,
            stats,
        )

        raw = (
            points * POINTS_WEIGHT
            + (EXTRA_TURN_BONUS if extra_turn else 0)
            + delta.board_presence * BOARD_PRESENCE_WEIGHT
            + delta.perfect_moves * PERFECT_MOVES_WEIGHT
            + delta.avg_piece_value * AVG_PIECE_VALUE_WEIGHT
            + delta.flexibility * FLEXIBILITY_WEIGHT
            + (penalty.deduction if penalty else 0)
            + config.DISCOUNT_FACTOR * future
        )
        if penalty is not None:
            warning = penalty.warning
        elif future_penalized:
            warning = FORCED_PENALTY_WARNING
        else:
            warning = None

        results.append(MoveAnalysis(
            area_id=area_id,
            total_value=normalize_value(raw, warning is not None),
            factors=[
                ("points", points),
                ("extra_turn", 1 if extra_turn else 0),
                ("board_presence", delta.board_presence),
                ("perfect_moves", delta.perfect_moves),
                ("avg_piece_value", delta.avg_piece_value),
                ("flexibility", delta.flexibility),
                ("future_value", future),
            ],
            warning=warning,
            raw_value=raw,
        ))

    logger.debug(
        "analyzed %d moves for %s (nodes=%d, cutoffs=%d)",
        len(results), side_key(is_player_turn), stats["nodes"], stats["cutoffs"],
    )
    return results

def rank_moves(analysis: List[MoveAnalysis]) -> List[MoveAnalysis]:
    """Best first; ties keep area-id order."""
    return sorted(analysis, key=lambda m: m.total_value, reverse=True)

def recommend_move(state: BoardState, is_player_turn: bool, depth: Optional[int] = None) -> Optional[MoveAnalysis]:
    ranked = rank_moves(analyze_moves(state, is_player_turn, depth=depth))
    return ranked[0] if ranked else None
