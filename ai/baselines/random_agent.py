"""
Random Agent - Easy difficulty.
Picks uniformly among the legal moves.
"""
import random
from typing import Optional

from game import GameState, NoLegalMovesError, legal_moves


class RandomAgent:
    """Agent that plays random legal moves."""

    def __init__(self, rng: Optional[random.Random] = None, config=None):
        self.name = "Random"
        self.rng = rng if rng is not None else random.Random()

    def select_action(self, state: GameState) -> int:
        """Select a random legal move.

        Args:
            state: Current game state

        Returns:
            action: Global cell index (0-80)
        """
        moves = legal_moves(state)

        if not moves:
            raise NoLegalMovesError("No valid moves available")

        return self.rng.choice(moves)
