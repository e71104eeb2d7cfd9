"""
Difficulty dispatch for CPU moves.
"""
import logging
import random
from typing import Optional

from config import Config
from game import Difficulty, GameState, NoLegalMovesError, apply_move, legal_moves, validate

from .baselines import ExpertAgent, HeuristicAgent, MinimaxAgent, RandomAgent

logger = logging.getLogger(__name__)

AGENTS = {
    Difficulty.EASY: RandomAgent,
    Difficulty.MEDIUM: HeuristicAgent,
    Difficulty.HARD: MinimaxAgent,
    Difficulty.EXPERT: ExpertAgent,
}


def make_agent(difficulty: Difficulty, rng: Optional[random.Random] = None,
               config: Optional[Config] = None):
    return AGENTS[difficulty](rng=rng, config=config)


def select_cpu_move(state: GameState, difficulty: Optional[Difficulty] = None,
                    rng: Optional[random.Random] = None, config: Optional[Config] = None) -> int:
    """
    Choose a move for the player to move.

    Args:
        state: Current game state.
        difficulty: Tier to play at; defaults to state.difficulty.
        rng: Random source for the Easy tier and Medium tie-breaks.
        config: Search and heuristic settings.

    Returns:
        A legal global index.

    Raises:
        NoLegalMovesError: If the position has no legal move.
    """
    if not legal_moves(state):
        raise NoLegalMovesError("No valid moves available for CPU")

    if difficulty is None:
        difficulty = state.difficulty
    return make_agent(difficulty, rng, config).select_action(state)


def play_cpu_turn(state: GameState, difficulty: Optional[Difficulty] = None,
                  rng: Optional[random.Random] = None, config: Optional[Config] = None) -> GameState:
    """Select a CPU move, re-check it, and apply it.

    A move that fails validation is replaced by an Easy-tier move.
    """
    move = select_cpu_move(state, difficulty, rng, config)

    error = validate(state, move)
    if error is not None:
        logger.warning("Invalid CPU move %d (%s); falling back to a random move", move, error)
        move = select_cpu_move(state, Difficulty.EASY, rng, config)

    return apply_move(state, move)
