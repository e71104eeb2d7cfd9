from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass
class SearchConfig:
    # (max root moves, plies below the root move) pairs checked in order; first match wins
    hard_depths: Tuple[Tuple[int, int], ...] = ((10, 4), (20, 3))
    hard_default_depth: int = 2
    expert_depths: Tuple[Tuple[int, int], ...] = ((20, 6), (30, 5))
    expert_default_depth: int = 4
    order_moves: bool = True   # search centre/corner replies first (same result, more cutoffs)

    def hard_depth(self, num_moves: int) -> int:
        return _pick_depth(self.hard_depths, self.hard_default_depth, num_moves)

    def expert_depth(self, num_moves: int) -> int:
        return _pick_depth(self.expert_depths, self.expert_default_depth, num_moves)


def _pick_depth(table, default, num_moves):
    for max_moves, depth in table:
        if num_moves <= max_moves:
            return depth
    return default

@dataclass
class HeuristicWeights:
    center: int = 3
    corner: int = 2
    edge: int = 1

    # grid control: where the move sends the opponent
    free_choice: int = 2
    opponent_stronghold: int = -2
    open_center: int = -1

    sub_board_won: int = 10
    sub_board_center: int = 2
    grid_won: int = 100
    meta_line: int = 50
    decided: int = 1000

@dataclass
class ExpertWeights:
    meta_complete: int = 200
    meta_build: int = 50
    meta_block: int = 150
    meta_disrupt: int = 30
    meta_center_grid: int = 25
    meta_corner_grid: int = 15

    double_threat: int = 75
    single_threat: int = 25
    squeeze_two: int = 40     # opponent left with <= 2 replies
    squeeze_four: int = 20    # opponent left with <= 4 replies

    tempo_good: int = 15
    tempo_bad: int = -10

@dataclass
class OpeningBook:
    # centre of the centre grid, then strategic corners
    first_moves: Tuple[int, ...] = (40, 36, 44, 4, 76)
    responses: Dict[int, Tuple[int, ...]] = field(default_factory=lambda: {
        40: (36, 38, 54, 56),
        36: (40,), 38: (40,), 54: (40,), 56: (40,),
        4: (40, 36),
        76: (40, 44),
    })

@dataclass
class Config:
    search: SearchConfig = None
    heuristics: HeuristicWeights = None
    expert: ExpertWeights = None
    opening: OpeningBook = None

    def __post_init__(self):
        if self.search is None:
            self.search = SearchConfig()
        if self.heuristics is None:
            self.heuristics = HeuristicWeights()
        if self.expert is None:
            self.expert = ExpertWeights()
        if self.opening is None:
            self.opening = OpeningBook()
