import pytest
from wordle_solver.engine import (Eval, Strategy, evaluate, reduce_evals, best_guesses,
                                  evaluate_bounded, evaluate_capped, pick_guess, get_strategy_names,
                                  decode)

SOLUTIONS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "adieu", "alone",
             "level"]
GUESSABLE = ["slate", "roate", "belle", "lemon", "fghij"]


def test_perfect_split_beats_single_bucket():
    poss = ["abcde", "edcba"]
    split = evaluate("abcde", poss)
    lump = evaluate("fghij", poss)
    assert split == Eval(count=2, worst=1)
    assert lump == Eval(count=1, worst=2)
    assert Strategy.GROUP_SIZE.key(split) > Strategy.GROUP_SIZE.key(lump)
    assert Strategy.GROUP_COUNT.key(split) > Strategy.GROUP_COUNT.key(lump)


def test_strategy_keys():
    ev = Eval(count=7, worst=3)
    assert Strategy.GROUP_SIZE.key(ev) == (-3, 7)
    assert Strategy.GROUP_COUNT.key(ev) == (7, -3)


def test_strategy_from_name():
    assert Strategy.from_name("groupsize") is Strategy.GROUP_SIZE
    assert Strategy.from_name("groupcount") is Strategy.GROUP_COUNT
    assert get_strategy_names() == ["groupcount", "groupsize"]
    with pytest.raises(ValueError, match="Unknown strategy"):
        Strategy.from_name("entropy")


def test_reduce_evals_sums_counts_and_keeps_worst():
    assert reduce_evals([Eval(2, 3), Eval(4, 1)]) == Eval(6, 3)
    assert reduce_evals([Eval(5, 2)]) == Eval(5, 2)


def test_evaluate_empty():
    assert evaluate("crane", []) == Eval(0, 0)


@pytest.mark.parametrize("strategy", list(Strategy))
def test_pruning_matches_brute_force(strategy):
    pool = SOLUTIONS + GUESSABLE
    keys = {g: strategy.key(evaluate(g, SOLUTIONS)) for g in pool}
    best = max(keys.values())

    best_key, tied = best_guesses(pool, SOLUTIONS, strategy)
    assert best_key == best
    assert tied == [g for g in pool if keys[g] == best]


@pytest.mark.parametrize("strategy", list(Strategy))
def test_bounded_returns_none_only_when_strictly_worse(strategy):
    best_key = strategy.key(evaluate("crane", SOLUTIONS))
    for g in SOLUTIONS + GUESSABLE:
        full = strategy.key(evaluate(g, SOLUTIONS))
        bounded = evaluate_bounded(g, SOLUTIONS, strategy, best_key)
        if bounded is None:
            assert full < best_key
        else:
            assert bounded == full


@pytest.mark.parametrize("limit", [1, 2, 3, 10])
def test_capped_gives_up_past_limit(limit):
    for g in SOLUTIONS + GUESSABLE:
        full = evaluate(g, SOLUTIONS)
        capped = evaluate_capped(g, SOLUTIONS, limit)
        if full.worst > limit:
            assert capped is None
        else:
            assert capped == full


def test_best_guesses_hard_mode_filters_pool():
    history = [("raise", decode("ppaac"))]
    pool = SOLUTIONS + GUESSABLE
    _, tied = best_guesses(pool, ["crane"], Strategy.GROUP_SIZE, hard_history=history)
    # every survivor ties against a single possibility; only hard-mode legal words survive
    assert tied == ["crane", "trace"]


def test_pick_guess_prefers_possible_answer():
    assert pick_guess(["slate", "crane", "trace"], {"trace", "crane"}) == "crane"
    assert pick_guess(["slate", "roate"], {"crane"}) == "slate"
