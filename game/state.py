"""
Immutable game snapshot and the settings enums it carries.

A GameState is never modified in place; every move produces a new snapshot
(see game.transition). Holders simply drop superseded snapshots.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from .errors import GameStateError
from .indexing import NUM_CELLS, NUM_SUB_BOARDS


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Mode(Enum):
    BASIC = "basic"        # first sub-board won ends the game
    EXTENDED = "extended"  # three sub-boards in a line on the meta-board


class Phase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class PlayerMode(Enum):
    HUMAN_VS_HUMAN = "human-vs-human"
    HUMAN_VS_CPU = "human-vs-cpu"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


Cells = Tuple[Optional[Player], ...]

EMPTY_BOARD: Cells = (None,) * NUM_CELLS
NO_WINNERS: Cells = (None,) * NUM_SUB_BOARDS

# The CPU always plays O in human-vs-cpu games
CPU_PLAYER = Player.O


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game.

    constraint is the sub-board (0-8) the current player must use, or None
    for free choice. winning_cells holds one 3-cell line per sub-board that
    contributed to the win, concatenated.
    """
    board: Cells = EMPTY_BOARD
    sub_board_winners: Cells = NO_WINNERS
    constraint: Optional[int] = None
    current_player: Player = Player.X
    first_move: bool = True
    mode: Mode = Mode.BASIC
    phase: Phase = Phase.SETUP
    winner: Optional[Player] = None
    winning_cells: Tuple[int, ...] = field(default_factory=tuple)
    difficulty: Difficulty = Difficulty.MEDIUM
    player_mode: PlayerMode = PlayerMode.HUMAN_VS_HUMAN
    last_move: Optional[int] = None

    @property
    def occupied_count(self) -> int:
        return sum(1 for cell in self.board if cell is not None)

    @property
    def is_full(self) -> bool:
        return all(cell is not None for cell in self.board)

    @property
    def is_draw(self) -> bool:
        return self.phase is Phase.FINISHED and self.winner is None

    def sub_board(self, index: int) -> Cells:
        start = index * 9
        return self.board[start:start + 9]


def new_game(mode: Mode = Mode.BASIC,
             difficulty: Difficulty = Difficulty.MEDIUM,
             player_mode: PlayerMode = PlayerMode.HUMAN_VS_HUMAN) -> GameState:
    """Empty board in the SETUP phase; call start_game to begin play."""
    return GameState(mode=mode, difficulty=difficulty, player_mode=player_mode)


def configure(state: GameState,
              mode: Optional[Mode] = None,
              difficulty: Optional[Difficulty] = None,
              player_mode: Optional[PlayerMode] = None) -> GameState:
    """Change game settings. Only allowed before the game starts."""
    if state.phase is not Phase.SETUP:
        raise GameStateError(f"Settings can only change during setup (phase is {state.phase.value})")
    return replace(
        state,
        mode=mode if mode is not None else state.mode,
        difficulty=difficulty if difficulty is not None else state.difficulty,
        player_mode=player_mode if player_mode is not None else state.player_mode,
    )


def start_game(state: GameState) -> GameState:
    if state.phase is not Phase.SETUP:
        raise GameStateError(f"Game already started (phase is {state.phase.value})")
    return replace(state, phase=Phase.PLAYING)


def reset_keeping_settings(state: GameState) -> GameState:
    """Fresh board ready to play, same mode, difficulty and player mode."""
    return GameState(
        mode=state.mode,
        difficulty=state.difficulty,
        player_mode=state.player_mode,
        phase=Phase.PLAYING,
    )


def is_cpu_turn(state: GameState) -> bool:
    return (
        state.player_mode is PlayerMode.HUMAN_VS_CPU
        and state.current_player is CPU_PLAYER
        and state.phase is Phase.PLAYING
    )


def status_message(state: GameState) -> str:
    """One-line description of whose turn it is or how the game ended."""
    if state.phase is Phase.SETUP:
        return "Select game options and start the game to begin"
    if state.phase is Phase.FINISHED:
        if state.winner is not None:
            return f"Player {state.winner.value} wins!"
        return "Game ended in a draw!"

    player = state.current_player.value
    if state.first_move:
        return f"Player {player}'s turn - You can play anywhere on the board"
    if state.constraint is None:
        return f"Player {player}'s turn - You can play in any available grid"
    return f"Player {player}'s turn - You must play in grid {state.constraint + 1}"


def check_state(state: GameState) -> List[str]:
    """Structural problems in a hand-built snapshot (empty list if consistent)."""
    errors = []
    if len(state.board) != NUM_CELLS:
        errors.append("Invalid board length")
    if len(state.sub_board_winners) != NUM_SUB_BOARDS:
        errors.append("Invalid sub-board winners length")
    if state.constraint is not None and not 0 <= state.constraint < NUM_SUB_BOARDS:
        errors.append("Invalid constraint value")
    if state.first_move != (state.occupied_count == 0):
        errors.append("First-move flag does not match occupied cells")
    if state.winner is not None and state.phase is not Phase.FINISHED:
        errors.append("Winner set while game is not finished")
    if len(state.winning_cells) % 3 != 0:
        errors.append("Winning cells are not whole lines")
    return errors
