"""
Expert Agent - opening book, master-grid aware heuristics and trap scoring
layered on top of a deeper minimax search.
"""
import logging
from typing import Optional, Sequence

from config import Config
from game import GameState, Mode, NoLegalMovesError, Player, legal_moves
from game.constraint import compute_next_constraint, is_sub_board_won
from game.indexing import CORNERS, CENTER
from game.win_detector import WIN_LINES, find_completing_cell, line_counts, sub_board_slots

from ..tactics import find_tactical_move
from .heuristic_agent import grid_control, position_score
from .minimax_agent import CELL_RANK, MinimaxAgent

logger = logging.getLogger(__name__)


def master_grid_strategy(state: GameState, move: int, player: Player, config: Config) -> int:
    """Value of playing in move's sub-board for the meta-board (Extended mode only)."""
    if state.mode is not Mode.EXTENDED:
        return 0

    weights = config.expert
    grid = move // 9
    winners = state.sub_board_winners
    score = 0

    for line in WIN_LINES:
        if grid not in line:
            continue
        mine, theirs, empty = line_counts(winners, line, player)

        if mine == 2 and empty == 1:
            score += weights.meta_complete
        elif mine == 1 and empty == 2:
            score += weights.meta_build

        if theirs == 2 and empty == 1:
            score += weights.meta_block
        elif theirs == 1 and empty == 2:
            score += weights.meta_disrupt

    if grid == CENTER:
        score += weights.meta_center_grid
    elif grid in CORNERS:
        score += weights.meta_corner_grid

    return score


def trap_setting(state: GameState, move: int, player: Player, config: Config) -> int:
    """
    Reward threats created by the move and a cramped reply for the opponent.

    Threats are one-move-from-winning lines for player across all unclaimed
    sub-boards once the move is on the board.
    """
    weights = config.expert
    winners = state.sub_board_winners
    board = list(state.board)
    board[move] = player

    threats = 0
    for g in range(9):
        if winners[g] is not None:
            continue
        if find_completing_cell(sub_board_slots(board, g), player) is not None:
            threats += 1

    score = 0
    if threats >= 2:
        score += weights.double_threat
    elif threats == 1:
        score += weights.single_threat

    target = compute_next_constraint(move, board, winners)
    if target is not None and winners[target] is None:
        replies = sum(1 for cell in sub_board_slots(board, target) if cell is None)
        if replies <= 2:
            score += weights.squeeze_two
        elif replies <= 4:
            score += weights.squeeze_four

    return score


def tempo(state: GameState, move: int, player: Player, config: Config) -> int:
    """Sending the opponent where we already outnumber them is good tempo."""
    target = move % 9
    if is_sub_board_won(state.sub_board_winners, target):
        return 0

    cells = state.sub_board(target)
    ours = cells.count(player)
    theirs = cells.count(player.opponent)
    if ours > theirs:
        return config.expert.tempo_good
    if theirs > ours:
        return config.expert.tempo_bad
    return 0


def evaluate_position_advanced(state: GameState, move: int, player: Player, config: Config) -> int:
    score = position_score(move % 9, config.heuristics)
    score += grid_control(state, move, config.heuristics)
    score += master_grid_strategy(state, move, player, config)
    score += trap_setting(state, move, player, config)
    score += tempo(state, move, player, config)
    return score


def opening_book_move(state: GameState, moves: Sequence[int], config: Config) -> Optional[int]:
    """Book move for the first two plies of the game, if one is legal."""
    book = config.opening
    legal = set(moves)
    occupied = state.occupied_count

    if state.first_move or occupied == 0:
        for move in book.first_moves:
            if move in legal:
                return move

    if occupied == 1:
        first = next(i for i, cell in enumerate(state.board) if cell is not None)
        for move in book.responses.get(first, ()):
            if move in legal:
                return move

    return None


class ExpertAgent(MinimaxAgent):
    """Minimax agent with an opening book and a richer per-move heuristic."""

    def __init__(self, rng=None, config: Optional[Config] = None):
        super().__init__(rng, config)
        self.name = "Expert"

    def select_action(self, state: GameState) -> int:
        moves = legal_moves(state)

        if not moves:
            raise NoLegalMovesError("No valid moves available")

        book_move = opening_book_move(state, moves, self.config)
        if book_move is not None:
            logger.debug("Opening book move %d", book_move)
            return book_move

        tactical = find_tactical_move(state, moves)
        if tactical is not None:
            return tactical

        player = state.current_player
        depth = self.config.search.expert_depth(len(moves))
        return self.search(
            state, moves, depth,
            bonus=lambda move: evaluate_position_advanced(state, move, player, self.config),
        )

    def tie_break_rank(self, move: int) -> int:
        return CELL_RANK[move % 9]
