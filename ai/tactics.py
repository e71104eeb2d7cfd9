"""
One-move tactics shared by the Medium, Hard and Expert agents:
take a sub-board if possible, otherwise stop the opponent from taking one.
"""
from typing import List, Optional, Sequence

from game.indexing import NUM_SUB_BOARDS, to_global
from game.state import GameState, Player
from game.win_detector import find_completing_cell, sub_board_slots


def find_winning_move(board: Sequence, sub_board: int, player: Player) -> Optional[int]:
    """Global index that completes a line for player in sub_board, if any."""
    cell = find_completing_cell(sub_board_slots(board, sub_board), player)
    if cell is None:
        return None
    return to_global(sub_board, cell)


def find_blocking_move(board: Sequence, sub_board: int, player: Player) -> Optional[int]:
    return find_winning_move(board, sub_board, player.opponent)


def reachable_sub_boards(state: GameState) -> List[int]:
    """The constrained sub-board, or every unclaimed one under free choice."""
    if state.constraint is not None and not state.first_move:
        return [state.constraint]
    return [g for g in range(NUM_SUB_BOARDS) if state.sub_board_winners[g] is None]


def find_tactical_move(state: GameState, legal: Sequence[int]) -> Optional[int]:
    """
    Win-then-block short-circuit.

    Args:
        state: Position to move in.
        legal: Precomputed legal moves for state.

    Returns:
        A legal move that completes a line for the current player, else one
        that blocks the opponent's completion, else None.
    """
    legal_set = set(legal)
    sub_boards = reachable_sub_boards(state)
    player = state.current_player

    for sub_board in sub_boards:
        move = find_winning_move(state.board, sub_board, player)
        if move is not None and move in legal_set:
            return move

    for sub_board in sub_boards:
        move = find_blocking_move(state.board, sub_board, player)
        if move is not None and move in legal_set:
            return move

    return None
