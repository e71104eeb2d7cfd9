"""
CPU opponents, one per difficulty tier.
"""
from .random_agent import RandomAgent
from .heuristic_agent import HeuristicAgent
from .minimax_agent import MinimaxAgent
from .expert_agent import ExpertAgent

__all__ = ['RandomAgent', 'HeuristicAgent', 'MinimaxAgent', 'ExpertAgent']
