"""Match harness for pitting CPU tiers against each other."""
from .evaluator import MatchResult, play_agents, run_difficulty_ladder

__all__ = ['MatchResult', 'play_agents', 'run_difficulty_ladder']
