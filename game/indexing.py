"""
Index arithmetic for the 9x9 board.

A global index 0-80 is laid out sub-board by sub-board: index g*9 + c is
local cell c of sub-board g. Both g and c count row-major over a 3x3 grid,
so the same numbering is used for a sub-board inside the meta-board and for
a cell inside a sub-board.
"""
from enum import Enum
from typing import List, Tuple

from .errors import OutOfRangeError

NUM_CELLS = 81
NUM_SUB_BOARDS = 9
CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


class CellKind(Enum):
    CENTER = "center"
    CORNER = "corner"
    EDGE = "edge"


def _check_global(index: int) -> None:
    if not 0 <= index < NUM_CELLS:
        raise OutOfRangeError(f"Invalid global index: {index}. Must be between 0 and 80.")


def _check_local(value: int, what: str) -> None:
    if not 0 <= value < NUM_SUB_BOARDS:
        raise OutOfRangeError(f"Invalid {what}: {value}. Must be between 0 and 8.")


def to_sub_cell(index: int) -> Tuple[int, int]:
    """Split a global index into (sub_board, local_cell)."""
    _check_global(index)
    return divmod(index, 9)


def to_global(sub_board: int, cell: int) -> int:
    """Inverse of to_sub_cell."""
    _check_local(sub_board, "sub-board index")
    _check_local(cell, "cell index")
    return sub_board * 9 + cell


def sub_board_of(index: int) -> int:
    return to_sub_cell(index)[0]


def local_cell_of(index: int) -> int:
    return to_sub_cell(index)[1]


def sub_board_cells(sub_board: int) -> List[int]:
    """Global indices of the 9 cells of a sub-board, in local order."""
    _check_local(sub_board, "sub-board index")
    start = sub_board * 9
    return list(range(start, start + 9))


def to_row_col(index: int) -> Tuple[int, int]:
    """
    Visual (row, col) of a global index on the 9x9 grid.

    Args:
        index: Global index (0-80).

    Returns:
        (row, col), each 0-8, counted from the top-left corner of the board.
    """
    sub_board, cell = to_sub_cell(index)
    grid_row, grid_col = divmod(sub_board, 3)
    cell_row, cell_col = divmod(cell, 3)
    return grid_row * 3 + cell_row, grid_col * 3 + cell_col


def row_col_to_global(row: int, col: int) -> int:
    """Inverse of to_row_col."""
    _check_local(row, "row")
    _check_local(col, "column")
    sub_board = (row // 3) * 3 + col // 3
    cell = (row % 3) * 3 + col % 3
    return to_global(sub_board, cell)


def classify(cell: int) -> CellKind:
    _check_local(cell, "cell index")
    if cell == CENTER:
        return CellKind.CENTER
    if cell in CORNERS:
        return CellKind.CORNER
    return CellKind.EDGE


def display_number(cell: int) -> int:
    """1-based label shown to players for a local cell or sub-board."""
    _check_local(cell, "cell index")
    return cell + 1


def from_display_number(number: int) -> int:
    if not 1 <= number <= 9:
        raise OutOfRangeError(f"Invalid display number: {number}. Must be between 1 and 9.")
    return number - 1
