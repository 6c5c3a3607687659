from .base import BaseSolver, merge_pools
from .single import Solver, SolverState
from .multi import MultiSolver, Board
from .absurdle import ChallengeSolver, ChallengeResult, judge

__all__ = [
    "BaseSolver", "merge_pools", "Solver", "SolverState", "MultiSolver", "Board",
    "ChallengeSolver", "ChallengeResult", "judge",
]
