import pytest

from mandragora.engine.paths import (
    OPPONENT_PATH, PLAYER_PATH, distribution_pattern, landing_area,
)


def test_paths_have_own_base_once():
    assert PLAYER_PATH.count(0) == 1 and 9 not in PLAYER_PATH
    assert OPPONENT_PATH.count(9) == 1 and 0 not in OPPONENT_PATH

def test_single_step_into_player_base():
    assert distribution_pattern(5, 1, True) == [0]

def test_single_step_into_opponent_base():
    assert distribution_pattern(8, 1, False) == [9]

def test_shared_area_starts_from_first_occurrence():
    # player path index of 2 is 1, not 9
    assert distribution_pattern(2, 9, True) == [3, 4, 5, 0, 6, 4, 7, 2, 8]
    assert distribution_pattern(4, 2, False) == [7, 2]

def test_zero_pieces_gives_empty_pattern():
    assert distribution_pattern(3, 0, True) == []

@pytest.mark.parametrize("is_player_turn", [True, False])
def test_full_lap_returns_to_source(is_player_turn):
    path = PLAYER_PATH if is_player_turn else OPPONENT_PATH
    for area in set(path):
        pattern = distribution_pattern(area, len(path), is_player_turn)
        assert len(pattern) == len(path)
        assert pattern[-1] == area
        assert area not in pattern[:-1] or area in (2, 4)

def test_wraparound_past_path_end():
    assert distribution_pattern(8, 3, True) == [1, 2, 3]
    assert distribution_pattern(5, 2, False) == [6, 4]

def test_landing_area_matches_pattern():
    for n in range(1, 15):
        assert landing_area(1, n, True) == distribution_pattern(1, n, True)[-1]

def test_area_off_path_is_rejected():
    with pytest.raises(ValueError):
        distribution_pattern(9, 1, True)
