import pytest
from wordle_solver.engine import all_possible_feedbacks, decode, score
from wordle_solver.solvers import ChallengeSolver, judge


def test_judge_prefers_fewest_eliminated():
    # 'abcde' lumps the two f-words together, so Absurdle answers 'aaaaa'
    code, elim = judge("abcde", ["abcde", "fghij", "fghik"], all_possible_feedbacks())
    assert code == decode("aaaaa")
    assert elim == 1


def test_judge_breaks_ties_toward_less_information():
    # three singleton buckets: ccccc, ppcpp, aaaaa -> the all-absent one
    code, elim = judge("abcde", ["abcde", "edcba", "fghij"], all_possible_feedbacks())
    assert code == decode("aaaaa")
    assert elim == 2


def test_target_must_be_a_solution():
    with pytest.raises(ValueError, match="not in the solutions list"):
        ChallengeSolver("zzzzz", [], ["abcde", "fghij"])


def test_two_word_catalog():
    res = ChallengeSolver("fghij", [], ["abcde", "fghij"]).solve()
    assert res.solved
    assert res.guesses == ["abcde", "fghij"]
    assert res.backtracks == 0


@pytest.mark.parametrize("hard_mode", [False, True])
def test_forces_judge_down_to_target(hard_mode):
    # 'fghik' first would get 'aaaaa' (the abcde bucket) and lose the target,
    # so 'abcde' has to go first to lump the f-words together.
    solver = ChallengeSolver("fghij", [], ["abcde", "fghij", "fghik"], hard_mode=hard_mode)
    assert solver.viable_guesses() == ["abcde"]

    res = solver.solve()
    assert res.solved
    assert res.guesses == ["abcde", "fghik", "fghij"]
    assert res.guesses[-1] == "fghij"


def test_path_is_consistent_with_target():
    res = ChallengeSolver("fghij", [], ["abcde", "fghij", "fghik"]).solve()
    possibilities = ["abcde", "fghij", "fghik"]
    for g in res.guesses[:-1]:
        code, _ = judge(g, possibilities, all_possible_feedbacks())
        assert code == score(g, "fghij")
        possibilities = [w for w in possibilities if score(g, w) == code]
    assert possibilities == ["fghij"]


def test_total_failure_is_reported_not_raised():
    # Each non-target word gets a lower-information answer from the other
    # non-target word than from the target, so the target is always dropped.
    res = ChallengeSolver("abcde", [], ["abcde", "abcdf", "gbcde"]).solve()
    assert not res.solved
    assert res.guesses == []


def test_guessable_words_join_the_pool():
    solver = ChallengeSolver("abcde", ["vwxyz"], ["abcde", "abcdf", "gbcde"])
    assert "vwxyz" in solver.pool
    assert "abcde" not in solver.pool


# abcde is the target. abcdf and gbcde are each closer to it than to one
# another, so once only those three are left every guess drops the target.
# 'nosyz' lumps exactly those three together; 'aklme' keeps abcde with the
# two an-words instead.
BACKTRACK_SOLUTIONS = ["abcde", "abcdf", "gbcde", "anope", "anose"]


def test_backtracks_out_of_dead_end_then_wins():
    solver = ChallengeSolver("abcde", ["aklme", "nosyz"], BACKTRACK_SOLUTIONS)
    # both openers eliminate two words; the later one is tried first
    assert solver.viable_guesses() == ["aklme", "nosyz"]

    res = solver.solve()
    assert res.solved
    assert res.backtracks == 1
    assert res.guesses == ["aklme", "anose", "abcde"]

    possibilities = list(BACKTRACK_SOLUTIONS)
    for g in res.guesses[:-1]:
        code, _ = judge(g, possibilities, all_possible_feedbacks())
        assert code == score(g, "abcde")
        possibilities = [w for w in possibilities if score(g, w) == code]
    assert possibilities == ["abcde"]


def test_emptied_first_level_ends_the_search():
    # Without 'aklme' the only opener leads into the dead end, so its level
    # empties and the search gives up.
    res = ChallengeSolver("abcde", ["nosyz"], BACKTRACK_SOLUTIONS[:4]).solve()
    assert not res.solved
    assert res.guesses == []
    assert res.backtracks == 1
