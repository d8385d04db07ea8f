# Self-play simulations between move choosers.
from __future__ import annotations
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from itertools import product
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
from tqdm import tqdm

from mandragora.engine.core import (
    GameResult, build_move_record, execute_move, game_result, is_terminal_for_next_side, next_turn,
)
from mandragora.engine.board import describe, side_key
from mandragora.io.patterns import DEFAULT_PATTERN, new_game
from mandragora.io.registry import pick_scored_action, resolve_agent

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 500


def simulate_game(
    player_agent: str = "analyzer",
    opponent_agent: str = "first",
    pattern_id: str = DEFAULT_PATTERN,
    player_goes_first: bool = True,
    max_moves: int = DEFAULT_MAX_MOVES,
) -> GameResult:
    """
    Play one game to the end: the side to act picks a move, the move is
    executed, the turn passes unless an extra turn was earned, and the game
    stops once the next side has no legal move (or after `max_moves`).
    """
    state = new_game(pattern_id, player_goes_first)
    is_player_turn = player_goes_first
    history = []
    moves = 0

    while moves < max_moves and not is_terminal_for_next_side(state, is_player_turn):
        agent = player_agent if is_player_turn else opponent_agent
        area_id, score = pick_scored_action(state, is_player_turn, agent)
        if area_id is None:
            break
        result = execute_move(area_id, state, is_player_turn)
        history.append(build_move_record(area_id, state, is_player_turn, result.extra_turn, score))
        state = result.new_state
        is_player_turn = next_turn(is_player_turn, result.extra_turn)
        moves += 1

    if moves >= max_moves:
        logger.warning("game stopped after %d moves without a terminal position", moves)
    logger.debug("final board:\n%s", "\n".join(describe(state)))
    outcome = game_result(state, moves=moves, history=history)
    logger.info(
        "%s vs %s on %s: %d-%d (%s, %d moves, %s to move)",
        player_agent, opponent_agent, pattern_id,
        outcome.player_points, outcome.opponent_points, outcome.winner, moves, side_key(is_player_turn),
    )
    return outcome

def run_simulations_for_pair(
    pair: Tuple[str, str],
    pattern_id: str,
    num_games: int,
    player_goes_first: bool = True,
) -> List[Dict]:
    player, opponent = pair
    rows = []
    for _ in tqdm(range(num_games), desc=f"{player} vs {opponent} ({pattern_id})", leave=False):
        start = time.time()
        res = simulate_game(player, opponent, pattern_id, player_goes_first)
        rows.append({
            "Player_Strategy": player,
            "Opponent_Strategy": opponent,
            "Pattern": pattern_id,
            "Player_First": player_goes_first,
            "Player_Score": res.player_points,
            "Opponent_Score": res.opponent_points,
            "Winner": res.winner,
            "Moves": res.moves,
            "Time_Seconds": round(time.time() - start, 3),
        })
    return rows

def run_comprehensive_simulations(
    agents: Sequence[str] = ("analyzer", "first", "random"),
    patterns: Iterable[str] = (DEFAULT_PATTERN,),
    num_games: int = 10,
    workers: Optional[int] = None,
) -> pd.DataFrame:
    """Every agent pairing on every pattern; workers=0 runs in-process."""
    agents = [resolve_agent(a) for a in agents]
    jobs = [(pair, pattern) for pattern in patterns for pair in product(agents, agents)]
    results: List[Dict] = []

    with tqdm(total=len(jobs), desc="Overall Progress") as overall:
        if workers == 0:
            for pair, pattern in jobs:
                results.extend(run_simulations_for_pair(pair, pattern, num_games))
                overall.update(1)
        else:
            with ProcessPoolExecutor(max_workers=workers) as executor:
                futures = []
                for pair, pattern in jobs:
                    future = executor.submit(run_simulations_for_pair, pair, pattern, num_games)
                    future.add_done_callback(lambda _: overall.update(1))
                    futures.append(future)
                for future in futures:
                    results.extend(future.result())

    return pd.DataFrame(results)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Win/draw rates per pairing."""
    return (
        df.groupby(["Player_Strategy", "Opponent_Strategy"])["Winner"]
        .value_counts(normalize=True)
        .unstack()
        .fillna(0)
    )
