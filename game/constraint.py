"""
Smart grid mapping: which sub-board the next player is sent to.

Playing local cell c sends the opponent to sub-board c. Only a physically
full target lifts the restriction; a won sub-board with empty cells is still
a valid destination.
"""
from typing import Optional, Sequence

from .indexing import local_cell_of, sub_board_cells

_OCCUPIED = object()


def is_sub_board_full(board: Sequence, sub_board: int) -> bool:
    return all(board[i] is not None for i in sub_board_cells(sub_board))


def is_sub_board_won(sub_board_winners: Sequence, sub_board: int) -> bool:
    return sub_board_winners[sub_board] is not None


def compute_next_constraint(index: int, board: Sequence, sub_board_winners: Sequence) -> Optional[int]:
    """
    Constraint for the move after `index` was played.

    Args:
        index: Global index just played (0-80).
        board: The 81 cells after the move.
        sub_board_winners: Winners after the move (unused by the fullness
            rule, accepted so callers pass the whole post-move position).

    Returns:
        The sub-board the next player must use, or None for free choice.
    """
    target = local_cell_of(index)
    if is_sub_board_full(board, target):
        return None
    return target


def would_trigger_free_choice(index: int, board: Sequence, sub_board_winners: Sequence) -> bool:
    """True if playing the empty cell `index` would leave the opponent unconstrained."""
    placed = list(board)
    placed[index] = _OCCUPIED
    return compute_next_constraint(index, placed, sub_board_winners) is None

