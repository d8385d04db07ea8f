import pytest

from mandragora.agents.heuristics import (
    EXTRA_MOVE_WARNING, SCORING_WARNING, Opportunities, average_piece_value, board_presence,
    flexibility, future_perfect_moves, normalize_value, opponent_threat_penalty, opportunities,
    side_metrics, threat_penalty,
)
from mandragora.engine.core import execute_move
from conftest import C, M


def test_board_presence_counts_shared_areas_for_both(board):
    b = board({1: [M, M], 2: [M], 6: [M, M, M]})
    assert board_presence(b, True) == 3
    assert board_presence(b, False) == 4

def test_future_perfect_moves(board):
    # 5 -> 0 and 4 -> 5,0 finish in the base; 1 -> 2 does not
    b = board({5: [M], 4: [M, M], 1: [M]})
    assert future_perfect_moves(b, True) == 2

def test_average_piece_value_depends_on_turn_order(board):
    b = board({1: [M, C]})
    assert average_piece_value(b, True) == pytest.approx(2.0)
    b = board({1: [M, C]}, player_goes_first=False)
    assert average_piece_value(b, True) == pytest.approx(2.5)
    assert average_piece_value(board(), True) == 0.0

def test_flexibility(board):
    b = board({1: [M], 2: [M], 7: [M]})
    assert flexibility(b, True) == 2
    assert flexibility(b, False) == 2

def test_opportunities(board):
    # 8 -> 9 extra turn; 7 -> 2,8 nothing; 6 x5 -> 4,7,2,8,9 extra turn
    b = board({8: [M], 7: [M, M], 6: [M] * 5})
    assert opportunities(b, False) == Opportunities(extra_turns=2, scoring=2)
    # 8 x2 -> 9,1 scores without an extra turn
    b = board({8: [M, M]})
    assert opportunities(b, False) == Opportunities(extra_turns=0, scoring=1)

def test_threat_penalty_prefers_extra_turn_warning():
    p = threat_penalty(Opportunities(0, 0), Opportunities(1, 1))
    assert p.deduction == -100 and p.warning == EXTRA_MOVE_WARNING
    p = threat_penalty(Opportunities(1, 0), Opportunities(1, 1))
    assert p.deduction == -80 and p.warning == SCORING_WARNING
    assert threat_penalty(Opportunities(1, 1), Opportunities(1, 1)) is None
    assert threat_penalty(Opportunities(2, 2), Opportunities(0, 1)) is None

def test_new_extra_turn_opening_is_penalized(board):
    # 2 x9 -> 3,4,5,0,6,4,7,2,8 leaves a lone piece on empty area 8
    before = board({2: [M] * 9})
    after = execute_move(2, before, True).new_state
    p = opponent_threat_penalty(before, after, True)
    assert p is not None and p.warning == EXTRA_MOVE_WARNING

def test_existing_opening_is_not_blamed_on_the_move(board):
    # area 8 already offers the opponent an extra turn before the move
    before = board({2: [M] * 9, 8: [M]})
    after = execute_move(2, before, True).new_state
    assert opponent_threat_penalty(before, after, True) is None

@pytest.mark.parametrize("raw, penalized, expected", [
    (150, False, 100.0),
    (42.5, False, 42.5),
    (-30, False, 0.0),
    (40, True, 0.0),
    (-20, True, -20.0),
    (-130, True, -100.0),
])
def test_normalize_value(raw, penalized, expected):
    assert normalize_value(raw, penalized) == expected

def test_side_metrics_delta(board):
    before = board({5: [M]})
    after = execute_move(5, before, True).new_state
    d = side_metrics(after, True).delta(side_metrics(before, True))
    assert d.board_presence == -1
    assert d.perfect_moves == -1
    assert d.avg_piece_value == pytest.approx(-1.0)
    assert d.flexibility == -1
