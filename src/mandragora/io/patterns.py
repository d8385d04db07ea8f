# src/mandragora/io/patterns.py
# Named starting layouts. Each playable area starts with three pieces,
# listed bottom -> top (the last one is moved first).

from __future__ import annotations
from typing import Dict, List, NamedTuple, Tuple

from mandragora.engine.board import (
    ADENIUM, CITRILLUS, KORRIGAN, MANDRAGORA, PACHYPODIUM, BoardState, Piece, make_board,
)
from mandragora.errors import UnknownPatternError

M = Piece(MANDRAGORA, "White", 1, 1)
K = Piece(KORRIGAN, "Black", 2, 3)
P = Piece(PACHYPODIUM, "Black", 2, 3)
C = Piece(CITRILLUS, "Green", 3, 4)
A = Piece(ADENIUM, "Pink", 3, 4)


class BoardPattern(NamedTuple):
    id: str
    name: str
    description: str
    placement: Dict[int, Tuple[Piece, ...]]


PATTERNS: Tuple[BoardPattern, ...] = (
    BoardPattern(
        "pattern-a", "Pattern A",
        "The standard pattern with a balanced mix of all piece types",
        {1: (M, C, M), 2: (M, M, M), 3: (P, M, P), 4: (M, M, M),
         5: (M, M, M), 6: (M, A, M), 7: (K, M, K), 8: (M, M, M)},
    ),
    BoardPattern(
        "pattern-b", "Pattern B",
        "A pattern with Korrigan and Pachypodium focus",
        {1: (M, M, M), 2: (M, C, M), 3: (M, M, M), 4: (M, A, M),
         5: (P, M, P), 6: (M, M, M), 7: (M, M, M), 8: (K, M, K)},
    ),
    BoardPattern(
        "pattern-c", "Pattern C",
        "A pattern with mixed special pieces and Mandragoras",
        {1: (M, M, M), 2: (M, C, M), 3: (P, M, P), 4: (M, A, M),
         5: (M, M, M), 6: (M, M, M), 7: (K, M, K), 8: (M, M, M)},
    ),
    BoardPattern(
        "pattern-d", "Pattern D",
        "A pattern with mixed Mandragoras and special pieces",
        {1: (M, M, M), 2: (P, M, K), 3: (M, C, M), 4: (K, M, K),
         5: (M, M, M), 6: (M, M, M), 7: (M, A, M), 8: (M, M, M)},
    ),
    BoardPattern(
        "pattern-e", "Pattern E",
        "A balanced pattern with Mandragora clusters and mixed piece groups",
        {1: (P, M, P), 2: (M, M, M), 3: (M, C, M), 4: (M, M, M),
         5: (M, M, M), 6: (K, M, K), 7: (M, A, M), 8: (M, M, M)},
    ),
)

_BY_ID = {p.id: p for p in PATTERNS}
DEFAULT_PATTERN = "pattern-a"


def list_patterns() -> List[BoardPattern]:
    return list(PATTERNS)

def get_pattern(pattern_id: str) -> BoardPattern:
    try:
        return _BY_ID[pattern_id]
    except KeyError:
        raise UnknownPatternError(pattern_id) from None

def new_game(pattern_id: str = DEFAULT_PATTERN, player_goes_first: bool = True) -> BoardState:
    """Initial board for a named pattern."""
    pattern = get_pattern(pattern_id)
    return make_board(pattern.placement, player_goes_first=player_goes_first)
