"""
Move validation and legal move generation tests.
"""

import random

import pytest
from game import (
    GameState,
    MoveErrorKind,
    Phase,
    Player,
    is_legal,
    legal_moves,
    new_game,
    validate,
)

X, O = Player.X, Player.O


def _playing(board=None, constraint=None, current=X, winners=None):
    board = tuple(board) if board is not None else (None,) * 81
    return GameState(
        board=board,
        sub_board_winners=tuple(winners) if winners is not None else (None,) * 9,
        constraint=constraint,
        current_player=current,
        first_move=all(cell is None for cell in board),
        phase=Phase.PLAYING,
    )


class TestValidate:

    def test_first_move_anywhere(self, basic_game):
        for i in range(81):
            assert validate(basic_game, i) is None

    def test_setup_phase_rejected(self):
        error = validate(new_game(), 40)
        assert error.kind is MoveErrorKind.GAME_NOT_IN_PROGRESS
        assert error.message == "Game is not in progress"

    @pytest.mark.parametrize("index", [-1, 81])
    def test_out_of_range(self, basic_game, index):
        error = validate(basic_game, index)
        assert error.kind is MoveErrorKind.OUT_OF_RANGE
        assert error.message == "Invalid cell index"

    def test_occupied(self, play):
        state = play([40])
        error = validate(state, 40)
        assert error.kind is MoveErrorKind.CELL_OCCUPIED
        assert error.message == "This cell is already occupied"

    def test_wrong_sub_board(self, play):
        state = play([0])
        error = validate(state, 9)
        assert error.kind is MoveErrorKind.WRONG_SUB_BOARD
        assert error.expected == 0
        assert error.message == "You must play in grid 1"
        assert str(error) == error.message

    def test_occupied_reported_before_wrong_sub_board(self, play):
        state = play([40, 36])  # O sent X to sub-board 0
        assert validate(state, 40).kind is MoveErrorKind.CELL_OCCUPIED

    def test_free_choice(self):
        board = [None] * 81
        board[0] = X
        state = _playing(board, constraint=None, current=O)
        assert validate(state, 80) is None


class TestLegalMoves:

    def test_first_move_all_cells(self, basic_game):
        assert legal_moves(basic_game) == list(range(81))

    def test_constrained(self, play):
        state = play([40])
        assert legal_moves(state) == [36, 37, 38, 39, 41, 42, 43, 44]

    def test_not_playing(self):
        assert legal_moves(new_game()) == []

    def test_won_sub_board_can_be_target(self):
        board = [None] * 81
        for i in (0, 1, 2):
            board[i] = X
        board[9] = O
        state = _playing(board, constraint=0, winners=[X] + [None] * 8)
        assert legal_moves(state) == [3, 4, 5, 6, 7, 8]

    def test_idempotent(self, play):
        state = play([40, 36])
        assert legal_moves(state) == legal_moves(state)

    def test_occupied_never_legal_random_boards(self):
        rng = random.Random(7)
        for _ in range(50):
            board = [rng.choice([None, X, O]) for _ in range(81)]
            constraint = rng.choice([None] + list(range(9)))
            state = _playing(board, constraint=constraint)
            for i in range(81):
                if board[i] is not None:
                    assert not is_legal(state, i)

    def test_constrained_legality_random_boards(self):
        rng = random.Random(11)
        for _ in range(50):
            board = [rng.choice([None, None, X, O]) for _ in range(81)]
            board[0] = X  # not a first move
            k = rng.randrange(9)
            state = _playing(board, constraint=k)
            for i in range(81):
                expected = board[i] is None and i // 9 == k
                assert is_legal(state, i) == expected
            assert legal_moves(state) == [i for i in range(81) if board[i] is None and i // 9 == k]
