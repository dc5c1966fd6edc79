"""
Bots module - Automatic players.

Provides:
- YBot: Interface for bot decision-making
- RandomBot: Uniform random baseline
- GreedyBot: One-pass heuristic over available cells
- MctsBot: Random-playout win-rate search
- BotRegistry: Name-based lookup
"""

from .policy import YBot, RandomBot
from .evaluator import HeuristicEvaluator, EvaluationWeights
from .greedy_bot import GreedyBot
from .mcts_bot import MctsBot, CandidateStats
from .registry import BotRegistry, default_registry

__all__ = [
    "YBot",
    "RandomBot",
    "HeuristicEvaluator",
    "EvaluationWeights",
    "GreedyBot",
    "MctsBot",
    "CandidateStats",
    "BotRegistry",
    "default_registry",
]
