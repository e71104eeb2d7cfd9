"""
Pure state transition: apply one move and build the next snapshot.
"""
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from .constraint import compute_next_constraint
from .errors import IllegalMoveError
from .indexing import NUM_SUB_BOARDS
from .state import GameState, Mode, Phase, Player
from .validator import validate
from .win_detector import (
    master_grid_winner,
    master_grid_winning_cells,
    sub_board_winner,
    sub_board_winning_cells,
)


def game_result(board: Sequence, sub_board_winners: Sequence,
                mode: Mode) -> Tuple[Optional[Player], Tuple[int, ...]]:
    """
    Overall winner and winning cells for a position.

    Basic mode: the first won sub-board in ascending order decides the game.
    Extended mode: three sub-board wins in a line on the meta-board.
    """
    if mode is Mode.BASIC:
        for sub_board in range(NUM_SUB_BOARDS):
            owner = sub_board_winners[sub_board]
            if owner is not None:
                return owner, tuple(sub_board_winning_cells(board, sub_board, owner))
        return None, ()

    winner = master_grid_winner(sub_board_winners)
    if winner is None:
        return None, ()
    return winner, tuple(master_grid_winning_cells(board, sub_board_winners))


def apply_move(state: GameState, index: int, validate_move: bool = True) -> GameState:
    """
    Play `index` for the current player and return the next snapshot.

    Args:
        state: Current state (left untouched).
        index: Global index of the move.
        validate_move: Reject illegal moves with IllegalMoveError. Search code
            that only iterates legal_moves() passes False to skip the check.

    Returns:
        The new GameState.
    """
    if validate_move:
        error = validate(state, index)
        if error is not None:
            raise IllegalMoveError(error)

    player = state.current_player
    board = list(state.board)
    board[index] = player

    # Only the touched sub-board can change owner
    sub_board = index // 9
    winners = state.sub_board_winners
    if winners[sub_board] is None:
        owner = sub_board_winner(board, sub_board)
        if owner is not None:
            winners = winners[:sub_board] + (owner,) + winners[sub_board + 1:]

    winner, winning_cells = game_result(board, winners, state.mode)
    constraint = compute_next_constraint(index, board, winners)

    board = tuple(board)
    if winner is not None or all(cell is not None for cell in board):
        phase = Phase.FINISHED
    else:
        phase = Phase.PLAYING

    return replace(
        state,
        board=board,
        sub_board_winners=winners,
        constraint=constraint,
        current_player=player.opponent,
        first_move=False,
        phase=phase,
        winner=winner,
        winning_cells=winning_cells,
        last_move=index,
    )


def apply_moves(state: GameState, moves: Sequence[int]) -> GameState:
    """Apply a sequence of validated moves in order."""
    for index in moves:
        state = apply_move(state, index)
    return state
