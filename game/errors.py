"""
Error types for the board engine.

Invalid human input is routine, so move problems are described by MoveError
values returned from validation. Exceptions are reserved for programming
errors (bad index arithmetic, applying an unchecked move, asking the CPU to
move when nothing is legal).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutOfRangeError(ValueError):
    """Index conversion given a value outside [0, 80] or [0, 8]."""


class GameStateError(RuntimeError):
    """Operation not allowed in the current game phase."""


class NoLegalMovesError(RuntimeError):
    """CPU move requested in a position with no legal move."""


class MoveErrorKind(Enum):
    GAME_NOT_IN_PROGRESS = "game-not-in-progress"
    OUT_OF_RANGE = "out-of-range"
    CELL_OCCUPIED = "cell-occupied"
    WRONG_SUB_BOARD = "wrong-sub-board"


@dataclass(frozen=True)
class MoveError:
    """Why a move was rejected.

    `expected` is only set for WRONG_SUB_BOARD and holds the sub-board
    (0-8) the player was required to play in.
    """
    kind: MoveErrorKind
    index: int
    expected: Optional[int] = None

    @property
    def message(self) -> str:
        if self.kind is MoveErrorKind.GAME_NOT_IN_PROGRESS:
            return "Game is not in progress"
        if self.kind is MoveErrorKind.OUT_OF_RANGE:
            return "Invalid cell index"
        if self.kind is MoveErrorKind.CELL_OCCUPIED:
            return "This cell is already occupied"
        return f"You must play in grid {self.expected + 1}"

    def __str__(self) -> str:
        return self.message


class IllegalMoveError(ValueError):
    """Raised by apply_move when asked to play a move that fails validation."""

    def __init__(self, error: MoveError):
        super().__init__(f"Illegal move {error.index}: {error.message}")
        self.error = error
