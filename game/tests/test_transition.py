"""
State transition and game-flow tests.
"""

import pytest
from game import (
    Difficulty,
    GameState,
    GameStateError,
    IllegalMoveError,
    Mode,
    MoveErrorKind,
    Phase,
    Player,
    PlayerMode,
    apply_move,
    apply_moves,
    check_state,
    configure,
    is_cpu_turn,
    legal_moves,
    new_game,
    reset_keeping_settings,
    start_game,
    status_message,
)
from game.transition import game_result

X, O = Player.X, Player.O

DRAWN = (X, O, X, X, O, O, O, X, X)


def _playing(board, constraint, current=X, winners=None, mode=Mode.BASIC):
    return GameState(
        board=tuple(board),
        sub_board_winners=tuple(winners) if winners is not None else (None,) * 9,
        constraint=constraint,
        current_player=current,
        first_move=False,
        mode=mode,
        phase=Phase.PLAYING,
    )


class TestNewGame:

    def test_defaults(self):
        state = new_game()
        assert state.board == (None,) * 81
        assert state.sub_board_winners == (None,) * 9
        assert state.constraint is None
        assert state.current_player is X
        assert state.first_move
        assert state.phase is Phase.SETUP
        assert state.winner is None
        assert state.winning_cells == ()

    def test_start_game(self):
        state = start_game(new_game(Mode.EXTENDED))
        assert state.phase is Phase.PLAYING
        assert state.mode is Mode.EXTENDED

    def test_start_twice_rejected(self, basic_game):
        with pytest.raises(GameStateError):
            start_game(basic_game)

    def test_configure_in_setup(self):
        state = configure(new_game(), mode=Mode.EXTENDED, difficulty=Difficulty.EXPERT,
                          player_mode=PlayerMode.HUMAN_VS_CPU)
        assert state.mode is Mode.EXTENDED
        assert state.difficulty is Difficulty.EXPERT
        assert state.player_mode is PlayerMode.HUMAN_VS_CPU

    def test_configure_after_start_rejected(self, basic_game):
        with pytest.raises(GameStateError):
            configure(basic_game, mode=Mode.EXTENDED)


class TestApplyMove:

    def test_first_move(self, basic_game):
        state = apply_move(basic_game, 40)
        assert state.board[40] is X
        assert state.current_player is O
        assert state.constraint == 4
        assert not state.first_move
        assert state.last_move == 40
        assert state.phase is Phase.PLAYING

    def test_original_untouched(self, basic_game):
        apply_move(basic_game, 40)
        assert basic_game.board[40] is None
        assert basic_game.first_move

    def test_illegal_move_raises(self, play):
        state = play([0])
        with pytest.raises(IllegalMoveError) as exc_info:
            apply_move(state, 9)
        assert exc_info.value.error.kind is MoveErrorKind.WRONG_SUB_BOARD
        assert exc_info.value.error.expected == 0

    def test_no_moves_after_finish(self, play):
        state = play([40, 36, 4, 37, 13, 38])
        assert legal_moves(state) == []
        with pytest.raises(IllegalMoveError):
            apply_move(state, 0)

    def test_sub_board_winner_is_not_overwritten(self):
        board = [None] * 81
        for i in (0, 1, 2):
            board[i] = X
        for i in (3, 4):
            board[i] = O
        board[50] = X
        state = _playing(board, constraint=0, current=O, winners=[X] + [None] * 8,
                         mode=Mode.EXTENDED)
        state = apply_move(state, 5)  # O completes row 3-4-5 of a board X already owns
        assert state.sub_board_winners[0] is X


class TestBasicMode:

    def test_end_to_end(self, basic_game):
        # O's replies ignore the constraint, so play them unchecked
        state = basic_game
        for move in (0, 9, 1, 10, 2):
            state = apply_move(state, move, validate_move=False)
        assert state.winner is X
        assert state.winning_cells == (0, 1, 2)
        assert state.phase is Phase.FINISHED
        assert state.sub_board_winners[0] is X

    def test_legal_game_won_by_o(self, play):
        state = play([40, 36, 4, 37, 13, 38])
        assert state.winner is O
        assert state.winning_cells == (36, 37, 38)
        assert state.phase is Phase.FINISHED
        assert status_message(state) == "Player O wins!"

    def test_first_won_sub_board_decides(self):
        board = [None] * 81
        for i in (27, 28, 29):
            board[i] = O
        winners = [None, None, None, O] + [None] * 5
        assert game_result(board, winners, Mode.BASIC) == (O, (27, 28, 29))


class TestExtendedMode:

    def test_sub_board_win_does_not_end_game(self, play):
        state = play([40, 36, 4, 37, 13, 38], mode=Mode.EXTENDED)
        assert state.sub_board_winners[4] is O
        assert state.winner is None
        assert state.phase is Phase.PLAYING

    def test_meta_row_win(self):
        board = [None] * 81
        for i in (0, 1, 2, 9, 10, 11, 18, 19):
            board[i] = X
        for i in (3, 4, 12, 13, 21, 22, 50, 60):
            board[i] = O
        state = _playing(board, constraint=2, winners=[X, X] + [None] * 7, mode=Mode.EXTENDED)

        state = apply_move(state, 20)

        assert state.sub_board_winners[:3] == (X, X, X)
        assert state.winner is X
        assert state.phase is Phase.FINISHED
        assert state.winning_cells == (0, 1, 2, 9, 10, 11, 18, 19, 20)


class TestDraw:

    @pytest.mark.parametrize("mode", [Mode.BASIC, Mode.EXTENDED])
    def test_full_board_without_lines(self, mode):
        board = list(DRAWN) * 9
        board[80] = None
        state = _playing(board, constraint=8, mode=mode)

        state = apply_move(state, 80)

        assert state.winner is None
        assert state.phase is Phase.FINISHED
        assert state.is_draw
        assert state.constraint is None
        assert state.winning_cells == ()
        assert status_message(state) == "Game ended in a draw!"


class TestGameFlow:

    def test_reset_keeps_settings(self):
        state = configure(new_game(), mode=Mode.EXTENDED, difficulty=Difficulty.HARD,
                          player_mode=PlayerMode.HUMAN_VS_CPU)
        state = apply_moves(start_game(state), [40, 36])
        fresh = reset_keeping_settings(state)
        assert fresh.board == (None,) * 81
        assert fresh.first_move
        assert fresh.phase is Phase.PLAYING
        assert fresh.mode is Mode.EXTENDED
        assert fresh.difficulty is Difficulty.HARD
        assert fresh.player_mode is PlayerMode.HUMAN_VS_CPU

    def test_is_cpu_turn(self):
        state = start_game(new_game(player_mode=PlayerMode.HUMAN_VS_CPU))
        assert not is_cpu_turn(state)
        state = apply_move(state, 40)
        assert is_cpu_turn(state)

    def test_no_cpu_in_two_player_games(self, play):
        assert not is_cpu_turn(play([40]))

    def test_status_messages(self, basic_game, play):
        assert status_message(new_game()).startswith("Select game options")
        assert status_message(basic_game) == "Player X's turn - You can play anywhere on the board"
        assert status_message(play([40])) == "Player O's turn - You must play in grid 5"

    def test_status_free_choice(self):
        board = list(DRAWN) + [None] * 72
        board[9] = O
        state = _playing(board, constraint=None)
        assert status_message(state) == "Player X's turn - You can play in any available grid"


class TestCheckState:

    def test_fresh_states_are_consistent(self, basic_game, play):
        assert check_state(new_game()) == []
        assert check_state(basic_game) == []
        assert check_state(play([40, 36, 4, 37, 13, 38])) == []

    def test_reports_problems(self):
        state = GameState(board=(None,) * 80, constraint=9, winner=X)
        errors = check_state(state)
        assert "Invalid board length" in errors
        assert "Invalid constraint value" in errors
        assert "Winner set while game is not finished" in errors
