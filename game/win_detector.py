"""
Line-based win detection on a 3x3 grid.

The same scan serves a sub-board (its 9 cells) and the meta-board (the 9
sub-board winners), since both are plain 3x3 grids of owner-or-empty slots.
"""
from typing import List, Optional, Sequence, Tuple

from .indexing import sub_board_cells

WIN_LINES = (
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
)


def winning_line(slots: Sequence, player=None) -> Tuple[int, ...]:
    """
    First completed line in row, column, diagonal scan order.

    Args:
        slots: 9 owner-or-None values.
        player: If given, only lines owned by this player count.

    Returns:
        The line's 3 local indices, or an empty tuple.
    """
    for a, b, c in WIN_LINES:
        owner = slots[a]
        if owner is not None and owner == slots[b] == slots[c]:
            if player is None or owner == player:
                return (a, b, c)
    return ()


def detect_winner(slots: Sequence):
    line = winning_line(slots)
    return slots[line[0]] if line else None


def sub_board_slots(board: Sequence, sub_board: int) -> Sequence:
    start = sub_board * 9
    return board[start:start + 9]


def sub_board_winner(board: Sequence, sub_board: int):
    """Owner of a completed line inside one sub-board of the 81-cell board."""
    return detect_winner(sub_board_slots(board, sub_board))


def sub_board_winning_cells(board: Sequence, sub_board: int, player=None) -> List[int]:
    """Global indices of a sub-board's winning line (empty if none)."""
    line = winning_line(sub_board_slots(board, sub_board), player)
    cells = sub_board_cells(sub_board)
    return [cells[i] for i in line]


def master_grid_winner(sub_board_winners: Sequence):
    return detect_winner(sub_board_winners)


def master_grid_winning_cells(board: Sequence, sub_board_winners: Sequence) -> List[int]:
    """
    Global cells behind a meta-board win.

    Each sub-board on the winning meta-line contributes its own winning
    triple, so a completed meta-line yields 9 indices.
    """
    meta_line = winning_line(sub_board_winners)
    cells: List[int] = []
    for sub_board in meta_line:
        cells.extend(sub_board_winning_cells(board, sub_board, sub_board_winners[sub_board]))
    return cells


def line_counts(slots: Sequence, line: Tuple[int, int, int], player) -> Tuple[int, int, int]:
    """(player count, opponent count, empty count) along one line."""
    mine = theirs = empty = 0
    for i in line:
        owner = slots[i]
        if owner is None:
            empty += 1
        elif owner == player:
            mine += 1
        else:
            theirs += 1
    return mine, theirs, empty


def find_completing_cell(slots: Sequence, player) -> Optional[int]:
    """Local index that would complete a line for player (two owned, one empty)."""
    for line in WIN_LINES:
        mine, _, empty = line_counts(slots, line, player)
        if mine == 2 and empty == 1:
            for i in line:
                if slots[i] is None:
                    return i
    return None
