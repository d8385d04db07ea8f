from mandragora.engine.board import OPPONENT, PLAYER
from mandragora.sim.simulate import run_comprehensive_simulations, simulate_game, summarize


def test_game_runs_to_completion():
    res = simulate_game("first", "first", "pattern-a", max_moves=500)
    assert 0 < res.moves <= 500
    assert len(res.history) == res.moves
    assert res.winner in (PLAYER, OPPONENT, "draw")

def test_winner_matches_points():
    res = simulate_game("analyzer", "random", "pattern-b")
    if res.player_points > res.opponent_points:
        assert res.winner == PLAYER
    elif res.player_points < res.opponent_points:
        assert res.winner == OPPONENT
    else:
        assert res.winner == "draw"

def test_history_alternates_unless_extra_turn():
    res = simulate_game("first", "random", "pattern-c", player_goes_first=False)
    assert res.history[0].side == OPPONENT
    for prev, cur in zip(res.history, res.history[1:]):
        if prev.extra_turn:
            assert cur.side == prev.side
        else:
            assert cur.side != prev.side

def test_analyzer_moves_carry_scores():
    res = simulate_game("analyzer", "first", "pattern-a", max_moves=6)
    player_moves = [r for r in res.history if r.side == PLAYER]
    assert player_moves and all(r.analyzer_score is not None for r in player_moves)

def test_comprehensive_simulations_in_process():
    df = run_comprehensive_simulations(["first", "random"], ["pattern-a"], num_games=1, workers=0)
    assert len(df) == 4
    assert {"Player_Strategy", "Opponent_Strategy", "Winner", "Player_Score"} <= set(df.columns)
    assert len(summarize(df)) == 4
