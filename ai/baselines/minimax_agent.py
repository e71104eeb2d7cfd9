"""
Minimax Agent with Alpha-Beta Pruning - Hard difficulty.
Depth-limited search with heuristic evaluation.
"""
import logging
import random
from typing import Callable, List, Optional, Sequence

from config import Config, HeuristicWeights
from game import GameState, Mode, NoLegalMovesError, Phase, Player, apply_move, legal_moves
from game.constraint import is_sub_board_full
from game.indexing import CENTER, NUM_SUB_BOARDS
from game.win_detector import WIN_LINES, detect_winner, line_counts, sub_board_slots

from ..tactics import find_tactical_move

logger = logging.getLogger(__name__)

# centre > corner > edge, indexed by local cell
CELL_RANK = (1, 0, 1, 0, 2, 0, 1, 0, 1)


def evaluate_sub_board(board: Sequence, sub_board: int, player: Player,
                       weights: HeuristicWeights) -> int:
    """Score one sub-board for player: won/lost, open lines and centre."""
    slots = sub_board_slots(board, sub_board)
    opponent = player.opponent

    winner = detect_winner(slots)
    if winner is player:
        return weights.sub_board_won
    if winner is opponent:
        return -weights.sub_board_won

    score = 0
    for line in WIN_LINES:
        mine, theirs, _ = line_counts(slots, line, player)
        if mine > 0 and theirs == 0:
            score += mine
        elif theirs > 0 and mine == 0:
            score -= theirs

    if slots[CENTER] is player:
        score += weights.sub_board_center
    elif slots[CENTER] is opponent:
        score -= weights.sub_board_center

    return score


def evaluate_board(state: GameState, player: Player, weights: HeuristicWeights) -> int:
    """
    Static evaluation of a position from player's point of view.

    Basic mode sums the sub-board scores. Extended mode counts won
    sub-boards, scores the ones still in play and rewards meta-board lines
    the opponent has not touched.
    """
    if state.winner is player:
        return weights.decided
    if state.winner is not None:
        return -weights.decided

    board = state.board
    if state.mode is Mode.BASIC:
        return sum(evaluate_sub_board(board, g, player, weights) for g in range(NUM_SUB_BOARDS))

    winners = state.sub_board_winners
    opponent = player.opponent
    score = 0
    for g in range(NUM_SUB_BOARDS):
        if winners[g] is player:
            score += weights.grid_won
        elif winners[g] is opponent:
            score -= weights.grid_won
        elif not is_sub_board_full(board, g):
            score += evaluate_sub_board(board, g, player, weights)

    for line in WIN_LINES:
        mine, theirs, _ = line_counts(winners, line, player)
        if mine > 0 and theirs == 0:
            score += mine * weights.meta_line
        elif theirs > 0 and mine == 0:
            score -= theirs * weights.meta_line

    return score


class MinimaxAgent:
    """Agent using minimax search with alpha-beta pruning."""

    def __init__(self, rng: Optional[random.Random] = None, config: Optional[Config] = None):
        """
        Args:
            rng: Unused; accepted so every tier is built the same way.
            config: Search depths and evaluation weights.
        """
        self.name = "Minimax"
        self.config = config if config is not None else Config()
        self.nodes_searched = 0

    def select_action(self, state: GameState) -> int:
        """Select best move using minimax search.

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

        depth = self.config.search.hard_depth(len(moves))
        return self.search(state, moves, depth)

    def search(self, state: GameState, moves: List[int], depth: int,
               bonus: Optional[Callable[[int], int]] = None) -> int:
        """
        Pick the root move with the best minimax score.

        Args:
            state: Root position.
            moves: Legal root moves.
            depth: Plies searched below each root move.
            bonus: Optional per-move score added to the search result.

        Returns:
            The chosen move. Exact score ties go to the move with the better
            tie_break_rank.
        """
        self.nodes_searched = 0
        player = state.current_player

        best_move = None
        best_score = None
        for move in moves:
            child = apply_move(state, move, validate_move=False)
            score = self._minimax(child, depth, float('-inf'), float('inf'), False, player)
            if bonus is not None:
                score += bonus(move)

            if best_score is None or score > best_score:
                best_score = score
                best_move = move
            elif score == best_score and self.tie_break_rank(move) > self.tie_break_rank(best_move):
                best_move = move

        logger.debug("%s depth=%d nodes=%d move=%d score=%s",
                     self.name, depth, self.nodes_searched, best_move, best_score)
        return best_move

    def tie_break_rank(self, move: int) -> int:
        return 1 if move % 9 == CENTER else 0

    def _minimax(self, state: GameState, depth: int, alpha: float, beta: float,
                 maximizing: bool, original_player: Player) -> float:
        """Minimax with alpha-beta pruning."""
        self.nodes_searched += 1
        weights = self.config.heuristics

        if depth <= 0 or state.phase is Phase.FINISHED:
            return evaluate_board(state, original_player, weights)

        moves = legal_moves(state)
        if not moves:
            return evaluate_board(state, original_player, weights)

        if self.config.search.order_moves:
            moves.sort(key=lambda m: -CELL_RANK[m % 9])

        if maximizing:
            max_eval = float('-inf')
            for move in moves:
                child = apply_move(state, move, validate_move=False)
                eval_score = self._minimax(child, depth - 1, alpha, beta, False, original_player)
                max_eval = max(max_eval, eval_score)
                alpha = max(alpha, eval_score)
                if beta <= alpha:
                    break  # Beta cutoff
            return max_eval
        else:
            min_eval = float('inf')
            for move in moves:
                child = apply_move(state, move, validate_move=False)
                eval_score = self._minimax(child, depth - 1, alpha, beta, True, original_player)
                min_eval = min(min_eval, eval_score)
                beta = min(beta, eval_score)
                if beta <= alpha:
                    break  # Alpha cutoff
            return min_eval
