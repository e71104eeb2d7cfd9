from .baselines import RandomAgent, HeuristicAgent, MinimaxAgent, ExpertAgent
from .selector import AGENTS, make_agent, select_cpu_move, play_cpu_turn

__all__ = [
    'RandomAgent', 'HeuristicAgent', 'MinimaxAgent', 'ExpertAgent',
    'AGENTS', 'make_agent', 'select_cpu_move', 'play_cpu_turn',
]
