"""
Move legality against the current constraint and occupancy.
"""
from typing import List, Optional

from .errors import MoveError, MoveErrorKind
from .indexing import NUM_CELLS, sub_board_cells
from .state import GameState, Phase


def validate(state: GameState, index: int) -> Optional[MoveError]:
    """
    Check a candidate move.

    Args:
        state: Current game state.
        index: Global index (0-80) the player wants to play.

    Returns:
        None if the move is legal, otherwise a MoveError describing why not.
    """
    if state.phase is not Phase.PLAYING:
        return MoveError(MoveErrorKind.GAME_NOT_IN_PROGRESS, index)

    if not 0 <= index < NUM_CELLS:
        return MoveError(MoveErrorKind.OUT_OF_RANGE, index)

    if state.board[index] is not None:
        return MoveError(MoveErrorKind.CELL_OCCUPIED, index)

    if state.first_move or state.constraint is None:
        return None

    if index // 9 != state.constraint:
        return MoveError(MoveErrorKind.WRONG_SUB_BOARD, index, expected=state.constraint)

    return None


def is_legal(state: GameState, index: int) -> bool:
    return validate(state, index) is None


def legal_moves(state: GameState) -> List[int]:
    """All legal global indices, ascending. Empty unless the game is in progress."""
    if state.phase is not Phase.PLAYING:
        return []

    if state.first_move or state.constraint is None:
        candidates = range(NUM_CELLS)
    else:
        candidates = sub_board_cells(state.constraint)

    return [i for i in candidates if state.board[i] is None]
