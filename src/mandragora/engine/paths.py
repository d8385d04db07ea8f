# Movement paths
#   player:   1 -> 2 -> 3 -> 4 -> 5 -> 0 -> 6 -> 4 -> 7 -> 2 -> 8 -> (1)
#   opponent: 6 -> 4 -> 7 -> 2 -> 8 -> 9 -> 1 -> 2 -> 3 -> 4 -> 5 -> (6)
# Shared areas 2 and 4 occur twice on each path; a move always starts from
# the first occurrence.

from __future__ import annotations
from typing import List, Tuple

PLAYER_PATH: Tuple[int, ...] = (1, 2, 3, 4, 5, 0, 6, 4, 7, 2, 8)
OPPONENT_PATH: Tuple[int, ...] = (6, 4, 7, 2, 8, 9, 1, 2, 3, 4, 5)


def path_for(is_player_turn: bool) -> Tuple[int, ...]:
    return PLAYER_PATH if is_player_turn else OPPONENT_PATH


def distribution_pattern(area_id: int, num_pieces: int, is_player_turn: bool) -> List[int]:
    """
    Destination area ids for `num_pieces` pieces picked up from `area_id`,
    in drop order (top of the stack first). Wraps cyclically; a long enough
    move may come back through the source area, which is an ordinary landing.
    """
    if num_pieces <= 0:
        return []
    path = path_for(is_player_turn)
    if area_id not in path:
        raise ValueError(f"Area {area_id} is not on the {'player' if is_player_turn else 'opponent'} path")

    idx = path.index(area_id)
    pattern = []
    for _ in range(num_pieces):
        idx = (idx + 1) % len(path)
        pattern.append(path[idx])
    return pattern


def landing_area(area_id: int, num_pieces: int, is_player_turn: bool) -> int:
    """Where the last piece lands (no board needed)."""
    path = path_for(is_player_turn)
    return path[(path.index(area_id) + num_pieces) % len(path)]
