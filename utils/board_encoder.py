"""
BoardEncoder - numpy views of a GameState
Visual 9x9 grid and legal-move mask for presentation consumers
"""
import numpy as np

from game import GameState, Player, legal_moves, to_row_col
from game.indexing import NUM_CELLS

_PLAYER_CODE = {None: 0, Player.X: 1, Player.O: 2}

# global index -> (row, col) on the visual 9x9 grid
_ROWS, _COLS = np.array([to_row_col(i) for i in range(NUM_CELLS)]).T


class BoardEncoder:
    """
    State conversions for code that draws or inspects the board.

    Usage:
        grid = BoardEncoder.to_grid(state)      # (9, 9) int8
        mask = BoardEncoder.legal_mask(state)   # (81,) bool
    """

    @staticmethod
    def to_grid(state: GameState) -> np.ndarray:
        """Board as it is drawn: 0 empty, 1 X, 2 O, indexed [row, col]."""
        grid = np.zeros((9, 9), dtype=np.int8)
        codes = np.array([_PLAYER_CODE[cell] for cell in state.board], dtype=np.int8)
        grid[_ROWS, _COLS] = codes
        return grid

    @staticmethod
    def legal_mask(state: GameState) -> np.ndarray:
        """Boolean mask over global indices 0-80."""
        mask = np.zeros(NUM_CELLS, dtype=bool)
        moves = legal_moves(state)
        if moves:
            mask[moves] = True
        return mask
