import pytest

from mandragora.engine.board import Piece
from mandragora.engine.scoring import score_value, total_score
from conftest import A, C, K, M, P


@pytest.mark.parametrize("piece, first, second", [
    (M, 1, 1),
    (K, 2, 3),
    (P, 2, 3),
    (C, 3, 4),
    (A, 3, 4),
])
def test_score_table(piece, first, second):
    assert score_value(piece, True) == first
    assert score_value(piece, False) == second

def test_malformed_pieces_score_zero():
    assert score_value(None, True) == 0
    assert score_value(Piece(type=None), False) == 0
    assert score_value(Piece(type="Cactus"), True) == 0
    assert score_value(object(), True) == 0

def test_plain_dicts_are_accepted():
    assert score_value({"type": "Korrigan"}, True) == 2
    assert score_value({}, True) == 0

def test_total_score():
    assert total_score([M, K, None, C], False) == 1 + 3 + 0 + 4
    assert total_score([], True) == 0
    assert total_score(None, True) == 0
