# Mandragora board model
# Ten areas: two bases (0 = player base, 9 = opponent base) and eight
# playable areas (1..8). Areas 2 and 4 are shared by both sides.
#
#   eligibility  player: 1, 3, 5   opponent: 6, 7, 8   both: 2, 4
#
# A board is an immutable snapshot. Every update returns a new BoardState,
# so search branches never alias each other.

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

PLAYER = "player"
OPPONENT = "opponent"
BOTH = "both"
ELIGIBILITY = (PLAYER, OPPONENT, BOTH)

PLAYER_BASE = 0
OPPONENT_BASE = 9
BASES = (PLAYER_BASE, OPPONENT_BASE)
AREA_IDS = tuple(range(10))
PLAYABLE_IDS = tuple(range(1, 9))
SHARED_IDS = (2, 4)

DEFAULT_ELIGIBILITY: Dict[int, str] = {
    0: PLAYER,
    1: PLAYER, 3: PLAYER, 5: PLAYER,
    2: BOTH, 4: BOTH,
    6: OPPONENT, 7: OPPONENT, 8: OPPONENT,
    9: OPPONENT,
}

# base + owned + shared
BELONGING_AREAS: Dict[str, Tuple[int, ...]] = {
    PLAYER: (0, 1, 3, 5, 2, 4),
    OPPONENT: (9, 6, 7, 8, 2, 4),
}

# piece kinds
MANDRAGORA = "Mandragora"
KORRIGAN = "Korrigan"
PACHYPODIUM = "Pachypodium"
CITRILLUS = "Citrillus"
ADENIUM = "Adenium"
PIECE_TYPES = (MANDRAGORA, KORRIGAN, PACHYPODIUM, CITRILLUS, ADENIUM)

# ---------------------------------------------------------------------
# Side helpers
# ---------------------------------------------------------------------

def side_key(is_player_turn: bool) -> str:
    return PLAYER if is_player_turn else OPPONENT

def other_side(side: str) -> str:
    return OPPONENT if side == PLAYER else PLAYER

def base_of(is_player_turn: bool) -> int:
    return PLAYER_BASE if is_player_turn else OPPONENT_BASE

def is_allowed(allowed: str, is_player_turn: bool) -> bool:
    return allowed == BOTH or allowed == side_key(is_player_turn)

# ---------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Piece:
    type: Optional[str] = MANDRAGORA
    color: str = "White"
    first_player: int = 1
    second_player: int = 1


@dataclass(frozen=True)
class Area:
    id: int
    allowed: str
    pieces: Tuple[Piece, ...] = ()


@dataclass(frozen=True)
class BoardState:
    areas: Tuple[Area, ...]
    player_score: Tuple[Piece, ...] = ()
    opponent_score: Tuple[Piece, ...] = ()
    player_goes_first: bool = True
    _index: Dict[int, int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        areas = tuple(sorted(self.areas, key=lambda a: a.id))
        ids = tuple(a.id for a in areas)
        if ids != AREA_IDS:
            raise ValueError(f"board must hold exactly areas {list(AREA_IDS)}, got {list(ids)}")
        object.__setattr__(self, "areas", areas)
        object.__setattr__(self, "_index", {a.id: i for i, a in enumerate(areas)})

    # -- lookups -------------------------------------------------------

    def area(self, area_id: int) -> Optional[Area]:
        i = self._index.get(area_id)
        return None if i is None else self.areas[i]

    def pieces(self, area_id: int) -> Tuple[Piece, ...]:
        a = self.area(area_id)
        return a.pieces if a is not None else ()

    def scored(self, is_player_turn: bool) -> Tuple[Piece, ...]:
        return self.player_score if is_player_turn else self.opponent_score

    def is_first_player(self, is_player_turn: bool) -> bool:
        """Whether the given side moved first in this game."""
        return self.player_goes_first == is_player_turn

    def pieces_in_play(self) -> int:
        return sum(len(a.pieces) for a in self.areas)

    def total_pieces(self) -> int:
        return self.pieces_in_play() + len(self.player_score) + len(self.opponent_score)

    # -- copy-on-write updates ----------------------------------------

    def with_pieces(self, updates: Mapping[int, Sequence[Piece]]) -> "BoardState":
        areas = tuple(
            replace(a, pieces=tuple(updates[a.id])) if a.id in updates else a
            for a in self.areas
        )
        return replace(self, areas=areas)

    def with_scored(self, is_player_turn: bool, pieces: Iterable[Piece]) -> "BoardState":
        pieces = tuple(pieces)
        if not pieces:
            return self
        if is_player_turn:
            return replace(self, player_score=self.player_score + pieces)
        return replace(self, opponent_score=self.opponent_score + pieces)

# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------

def empty_board(player_goes_first: bool = True) -> BoardState:
    return BoardState(
        areas=tuple(Area(i, DEFAULT_ELIGIBILITY[i]) for i in AREA_IDS),
        player_goes_first=player_goes_first,
    )

def make_board(
    placement: Mapping[int, Sequence[Piece]] | None = None,
    player_score: Sequence[Piece] = (),
    opponent_score: Sequence[Piece] = (),
    player_goes_first: bool = True,
    eligibility: Mapping[int, str] | None = None,
) -> BoardState:
    """
    Build a board from {area_id: [pieces bottom..top]}. Missing areas are
    empty; eligibility defaults to the standard layout.
    """
    placement = placement or {}
    allowed = dict(DEFAULT_ELIGIBILITY)
    if eligibility:
        allowed.update(eligibility)
    areas = tuple(Area(i, allowed[i], tuple(placement.get(i, ()))) for i in AREA_IDS)
    return BoardState(
        areas=areas,
        player_score=tuple(player_score),
        opponent_score=tuple(opponent_score),
        player_goes_first=player_goes_first,
    )

def describe(state: BoardState) -> List[str]:
    """One line per area, top of stack last; handy for logs and scripts."""
    lines = []
    for a in state.areas:
        kinds = ",".join((p.type or "?")[0] for p in a.pieces)
        lines.append(f"{a.id} [{a.allowed:>8}] {kinds}")
    lines.append(f"scored player={len(state.player_score)} opponent={len(state.opponent_score)}")
    return lines
