"""Shared fixtures for the engine and CPU tests."""
import random

import pytest

from config import Config, SearchConfig
from game import Mode, apply_moves, new_game, start_game


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def basic_game():
    return start_game(new_game(Mode.BASIC))


@pytest.fixture
def extended_game():
    return start_game(new_game(Mode.EXTENDED))


@pytest.fixture
def play():
    """Start a game in the given mode and play a move list."""
    def _play(moves, mode=Mode.BASIC):
        return apply_moves(start_game(new_game(mode)), moves)
    return _play


@pytest.fixture
def shallow_config():
    """Config with one reply searched per root move so Hard/Expert tests stay fast."""
    search = SearchConfig(
        hard_depths=(), hard_default_depth=1,
        expert_depths=(), expert_default_depth=1,
    )
    return Config(search=search)
