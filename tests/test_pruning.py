import pytest

from wordfilter.constraints import Filter
from wordfilter.dictionary import Dictionary
from wordfilter.errors import IncompleteFilter
from wordfilter.feedback import score_pattern

POOL = [
    "sassy", "bassi", "least", "leapt", "slate", "crane", "total", "stoal",
    "allot", "tally", "alloy", "atoll", "abbey", "cabin", "press", "spree",
    "belle", "level", "lemon", "cools", "scoop", "eerie", "geese", "those",
    "llama", "mamma", "tepee", "error", "sissy", "abcde", "edcba",
]


def test_pruning_after_allot_pattern():
    # Small controlled pool so the test doesn't depend on a CSV
    words = Dictionary(["total", "stoal", "allot", "tally", "alloy", "atoll"])
    patt = score_pattern("allot", "total")  # should be [1,1,0,1,1]

    remaining = words.filter(Filter.from_feedback("allot", patt))

    # "total" and "stoal" are consistent; others are not.
    assert remaining.words() == ["total", "stoal"]


def test_pruning_is_monotonic_with_more_feedback():
    words = Dictionary(["total", "stoal", "bleed", "blend"])
    rem1 = words.filter(Filter.from_feedback("allot", score_pattern("allot", "total")))
    rem2 = rem1.filter(Filter.from_feedback("stoal", score_pattern("stoal", "total")))
    assert set(rem2.words()).issubset(set(rem1.words()))
    assert rem2.words() == ["total"]


def test_least_against_leapt():
    words = Dictionary(["crane", "slate", "least", "leapt"])
    f = Filter()
    f.mark_correct("l")
    f.mark_correct("e")
    f.mark_correct("a")
    f.mark_incorrect("s")
    f.mark_correct("t")
    assert words.filter(f).words() == ["leapt"]


def test_single_a_in_aaaaa_guess():
    words = Dictionary(["abcde", "edcba", "aabcd", "bcdef"])
    f = Filter.from_feedback("aaaaa", [2, 0, 0, 0, 0])
    state = f.constraint("a")
    assert (state.bound.count, state.bound.limit.name) == (1, "EXACTLY")
    # edcba has its a in a ruled-out slot, aabcd has two, bcdef has none
    assert words.filter(f).words() == ["abcde"]


def test_duplicate_guess_keeps_exactly_one_copy():
    # x correct in slot 0, incorrect in slot 3: exactly one x, not zero
    words = Dictionary(["xabcd", "xabxd", "babcd", "xbbcd"])
    f = Filter()
    f.mark_correct("x")
    f.mark_incorrect("q")
    f.mark_incorrect("r")
    f.mark_incorrect("x")
    f.mark_incorrect("z")
    assert words.filter(f).words() == ["xabcd", "xbbcd"]


def test_sassy_against_bassi():
    words = Dictionary(["bassi", "sassi", "basss", "massa", "lasso"])
    f = Filter.from_feedback("sassy", score_pattern("sassy", "bassi"))
    # exactly two s's in slots 2 and 3, none in slot 0
    assert words.filter(f).words() == ["bassi", "massa", "lasso"]


@pytest.mark.parametrize("guess", POOL)
def test_filter_matches_scoring_for_every_answer(guess):
    words = Dictionary(POOL)
    for answer in POOL:
        patt = score_pattern(guess, answer)
        expected = [w for w in POOL if score_pattern(guess, w) == patt]
        got = words.filter(Filter.from_feedback(guess, patt))
        assert got.words() == expected, (guess, answer, patt)
        assert answer in got


@pytest.mark.parametrize("guess,answer", [("allot", "total"), ("sassy", "bassi"), ("eerie", "geese")])
def test_coarse_pass_does_not_change_results(guess, answer):
    words = Dictionary(POOL)
    f = Filter.from_feedback(guess, score_pattern(guess, answer))
    assert words.filter(f).words() == words.filter(f, coarse=False).words()


def test_coarse_pass_is_a_superset_of_survivors():
    words = Dictionary(POOL)
    f = Filter.from_feedback("least", [2, 2, 2, 0, 2])
    mask = words.coarse_mask(f)
    coarse = {w for w, keep in zip(words.words(), mask) if keep}
    assert set(words.filter(f).words()) <= coarse


def test_filter_is_idempotent_and_never_grows():
    words = Dictionary(POOL)
    f = Filter.from_feedback("crane", score_pattern("crane", "slate"))
    once = words.filter(f)
    twice = once.filter(Filter.from_feedback("crane", score_pattern("crane", "slate")))
    assert once.words() == twice.words()
    assert len(once) <= len(words)


def test_filter_returns_new_dictionary_and_keeps_source():
    words = Dictionary(POOL)
    before = words.words()
    out = words.filter(Filter.from_feedback("least", [2, 2, 2, 0, 2]))
    assert out is not words
    assert words.words() == before


def test_filter_keeps_duplicates_in_order():
    words = Dictionary(["leapt", "crane", "leapt"])
    out = words.filter(Filter.from_feedback("least", [2, 2, 2, 0, 2]))
    assert out.words() == ["leapt", "leapt"]


def test_incomplete_filter_is_rejected():
    words = Dictionary(["crane"])
    f = Filter()
    f.mark_correct("c")
    with pytest.raises(IncompleteFilter):
        words.filter(f)


def test_overfull_filter_is_rejected():
    words = Dictionary(["crane"])
    f = Filter.from_feedback("crane", [2, 2, 2, 2, 2])
    f.mark_correct("s")
    with pytest.raises(IncompleteFilter):
        words.filter(f)


def test_empty_dictionary_filters_to_empty():
    out = Dictionary().filter(Filter.from_feedback("crane", [0, 0, 0, 0, 0]))
    assert out.is_empty()
