"""
Heuristic Greedy Agent - Medium difficulty.
Win, block, otherwise one-step positional scoring. No search.
"""
import random
from typing import List, Optional

from config import Config, HeuristicWeights
from game import GameState, NoLegalMovesError, legal_moves
from game.constraint import is_sub_board_won, would_trigger_free_choice
from game.indexing import CENTER, CellKind, classify

from ..tactics import find_tactical_move


def position_score(cell: int, weights: HeuristicWeights) -> int:
    """Centre > corner > edge value of a local cell."""
    kind = classify(cell)
    if kind is CellKind.CENTER:
        return weights.center
    if kind is CellKind.CORNER:
        return weights.corner
    return weights.edge


def grid_control(state: GameState, move: int, weights: HeuristicWeights) -> int:
    """
    Score where a move sends the opponent.

    Free choice for the opponent scores weights.free_choice. A destination
    already won is neutral. A destination holding only opponent stones, or
    one whose centre is still open, is penalised. Fullness is judged after
    the move; stone counts before it.
    """
    player = state.current_player
    winners = state.sub_board_winners

    if would_trigger_free_choice(move, state.board, winners):
        return weights.free_choice

    target = move % 9
    if is_sub_board_won(winners, target):
        return 0

    cells = state.sub_board(target)
    mine = cells.count(player)
    theirs = cells.count(player.opponent)

    if theirs > 0 and mine == 0:
        return weights.opponent_stronghold
    if cells[CENTER] is None:
        return weights.open_center
    return 0


class HeuristicAgent:
    """Agent that uses heuristics to evaluate and select moves."""

    def __init__(self, rng: Optional[random.Random] = None, config: Optional[Config] = None):
        self.name = "Heuristic"
        self.rng = rng if rng is not None else random.Random()
        self.config = config if config is not None else Config()

    def select_action(self, state: GameState) -> int:
        """Select best move based on heuristic evaluation.

        Args:
            state: Current game state

        Returns:
            action: Global cell index (0-80)
        """
        moves = legal_moves(state)

        if not moves:
            raise NoLegalMovesError("No valid moves available")

        tactical = find_tactical_move(state, moves)
        if tactical is not None:
            return tactical

        best_score = None
        best_moves: List[int] = []
        for move in moves:
            score = self._evaluate_move(state, move)
            if best_score is None or score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)

        return self.rng.choice(best_moves)

    def _evaluate_move(self, state: GameState, move: int) -> int:
        weights = self.config.heuristics
        return position_score(move % 9, weights) + grid_control(state, move, weights)
