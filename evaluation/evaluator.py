"""
Match harness for the CPU tiers.

Plays agents against each other on the real rules engine and tallies the
results. Used by the difficulty ladder below and the agent strength tests.
"""
import argparse
import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional

from tqdm import tqdm

from config import Config
from game import Difficulty, Mode, Phase, Player, apply_move, legal_moves, new_game, start_game
from ai.selector import make_agent


# ─── Default opening settings ────────────────────────────────────
RANDOM_OPENING_PLIES = 2

logger = logging.getLogger(__name__)


# ─── Match result ────────────────────────────────────────────────

@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def score_a(self):
        """Score for player A (win=1, draw=0.5, loss=0)."""
        return (self.wins_a + 0.5 * self.draws) / self.games if self.games else 0.5


# ─── Sequential match engine ─────────────────────────────────────

def play_agents(agent_a, agent_b, num_games, mode=Mode.BASIC,
                random_opening_plies=RANDOM_OPENING_PLIES,
                rng: Optional[random.Random] = None, show_progress=False) -> MatchResult:
    """Sequential match between two agents with select_action(state) -> int.

    Agent A moves first (as X) in even-numbered games and second in odd ones.

    Args:
        agent_a: First agent.
        agent_b: Second agent.
        num_games: Total games to play.
        mode: Win condition for every game.
        random_opening_plies: Random moves at the start for diversity.
        rng: Random source for the opening plies.
        show_progress: Show a tqdm progress bar.

    Returns:
        MatchResult counted from agent A's side.
    """
    rng = rng if rng is not None else random.Random()
    result = MatchResult()

    games = range(num_games)
    if show_progress:
        games = tqdm(games, desc=f"{agent_a.name} vs {agent_b.name}", ncols=80, leave=False)

    for i in games:
        state = start_game(new_game(mode))
        a_is_x = (i % 2 == 0)

        for _ in range(random_opening_plies):
            legal = legal_moves(state)
            if not legal:
                break
            state = apply_move(state, rng.choice(legal))

        while state.phase is Phase.PLAYING:
            is_a_turn = (state.current_player is Player.X) == a_is_x
            agent = agent_a if is_a_turn else agent_b
            state = apply_move(state, agent.select_action(state))

        result.games += 1
        if state.winner is None:
            result.draws += 1
        elif (state.winner is Player.X) == a_is_x:
            result.wins_a += 1
        else:
            result.wins_b += 1

    return result


def run_difficulty_ladder(num_games=20, mode=Mode.BASIC, seed: Optional[int] = None,
                          config: Optional[Config] = None,
                          show_progress=True) -> Dict[Difficulty, MatchResult]:
    """
    Play every tier against Easy.

    Returns:
        dict mapping each difficulty to its MatchResult (A = that tier).
    """
    rng = random.Random(seed)
    results = {}

    for difficulty in Difficulty:
        agent = make_agent(difficulty, random.Random(rng.random()), config)
        baseline = make_agent(Difficulty.EASY, random.Random(rng.random()), config)
        r = play_agents(agent, baseline, num_games, mode=mode,
                        rng=random.Random(rng.random()), show_progress=show_progress)
        results[difficulty] = r
        logger.info("%-6s vs easy: win %.0f%% draw %.0f%% loss %.0f%% (%d games)",
                    difficulty.value, r.win_rate_a * 100, r.draw_rate * 100,
                    r.win_rate_b * 100, r.games)

    return results


def main():
    """Run the difficulty ladder from command line."""
    parser = argparse.ArgumentParser(description='Play each CPU tier against Easy')
    parser.add_argument('--games', type=int, default=20, help='Games per tier')
    parser.add_argument('--mode', type=str, default='basic', choices=[m.value for m in Mode],
                        help='Win condition')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--verbose', action='store_true', help='Log search statistics')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    run_difficulty_ladder(num_games=args.games, mode=Mode(args.mode), seed=args.seed)


if __name__ == '__main__':
    main()
