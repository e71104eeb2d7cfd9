from .errors import (
    GameStateError,
    IllegalMoveError,
    MoveError,
    MoveErrorKind,
    NoLegalMovesError,
    OutOfRangeError,
)
from .indexing import CellKind, classify, row_col_to_global, to_global, to_row_col, to_sub_cell
from .state import (
    Difficulty,
    GameState,
    Mode,
    Phase,
    Player,
    PlayerMode,
    check_state,
    configure,
    is_cpu_turn,
    new_game,
    reset_keeping_settings,
    start_game,
    status_message,
)
from .constraint import compute_next_constraint
from .validator import is_legal, legal_moves, validate
from .transition import apply_move, apply_moves
from .win_detector import detect_winner, master_grid_winner, winning_line

__all__ = [
    'GameStateError', 'IllegalMoveError', 'MoveError', 'MoveErrorKind',
    'NoLegalMovesError', 'OutOfRangeError',
    'CellKind', 'classify', 'row_col_to_global', 'to_global', 'to_row_col', 'to_sub_cell',
    'Difficulty', 'GameState', 'Mode', 'Phase', 'Player', 'PlayerMode',
    'check_state', 'configure', 'is_cpu_turn', 'new_game', 'reset_keeping_settings',
    'start_game', 'status_message',
    'compute_next_constraint', 'is_legal', 'legal_moves', 'validate',
    'apply_move', 'apply_moves',
    'detect_winner', 'master_grid_winner', 'winning_line',
]
