from .scoring import (score, encode, decode, pattern, is_win, all_possible_feedbacks,
                      entropy_tiebreak, WORD_LENGTH, NUM_FEEDBACKS, WIN)
from .constraints import (filter_candidates, is_consistent, narrow, SolverError,
                          NoPossibilitiesError)
from .evaluation import (Eval, Key, Strategy, rank, evaluate, evaluate_bounded, evaluate_capped,
                         reduce_evals, best_guesses, pick_guess, get_strategy_names)
from .validation import validate_guess, is_word_shape

__all__ = [
    "score", "encode", "decode", "pattern", "is_win", "all_possible_feedbacks",
    "entropy_tiebreak", "WORD_LENGTH", "NUM_FEEDBACKS", "WIN",
    "filter_candidates", "is_consistent", "narrow", "SolverError", "NoPossibilitiesError",
    "Eval", "Key", "Strategy", "rank", "evaluate", "evaluate_bounded", "evaluate_capped",
    "reduce_evals", "best_guesses", "pick_guess", "get_strategy_names",
    "validate_guess", "is_word_shape",
]
