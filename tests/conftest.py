# tests/conftest.py
import sys, pathlib
import pytest

# Add ./src to sys.path so `import mandragora...` works in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mandragora.engine.board import (  # noqa: E402
    ADENIUM, CITRILLUS, KORRIGAN, MANDRAGORA, PACHYPODIUM, Piece, make_board,
)

M = Piece(MANDRAGORA, "White", 1, 1)
K = Piece(KORRIGAN, "Black", 2, 3)
P = Piece(PACHYPODIUM, "Black", 2, 3)
C = Piece(CITRILLUS, "Green", 3, 4)
A = Piece(ADENIUM, "Pink", 3, 4)

@pytest.fixture
def pieces():
    """The five piece kinds keyed by initial."""
    return {"M": M, "K": K, "P": P, "C": C, "A": A}

@pytest.fixture
def board():
    """Factory: board({area_id: [bottom..top]}, **kwargs) on the standard layout."""
    return make_board
