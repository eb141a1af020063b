import pytest
from wordl.engine import (Hit, Miss, Contains, GuessRecord, Constraints, DictionaryStore,
                          make_is_valid, filter_candidates, score_record)
from wordl.errors import MalformedRecord


def rec(*letters):
    return GuessRecord(letters)


# Four rounds whose derived constraints are: excludes {c}, required e,g,g,y,
# and positional exclusions that "eggyy" does not trip.
HISTORY = [
    rec(Miss("c"), Miss("c"), Contains("e"), Miss("c"), Miss("c")),
    rec(Miss("c"), Contains("e"), Miss("c"), Contains("g"), Miss("c")),
    rec(Contains("g"), Miss("c"), Contains("e"), Contains("g"), Miss("c")),
    rec(Contains("y"), Miss("c"), Miss("c"), Miss("c"), Miss("c")),
]


def test_predicate_worked_example():
    c = Constraints(
        hits=(None,) * 5,
        excludes_at=(frozenset(),) * 5,
        excludes=frozenset("c"),
        required=("e", "g", "g", "y"),
    )
    f = make_is_valid(c)
    assert f("match") is False
    assert f("eggyy") is True


def test_end_to_end_filtering():
    store = DictionaryStore(["match", "eggyy", "eggzz"])
    store.retain(make_is_valid(HISTORY))
    assert store.words() == ["eggyy"]


def test_empty_history_accepts_everything():
    f = make_is_valid([])
    assert all(f(w) for w in ["crane", "zzzzz", "eggyy"])


def test_wrong_length_raises():
    f = make_is_valid([])
    with pytest.raises(MalformedRecord):
        f("cranes")


def test_required_letter_consumed_even_where_banned():
    # 'e' required, but not at position 0: "eerie"-like words still need a legal 'e'
    c = Constraints(
        hits=(None,) * 5,
        excludes_at=(frozenset("e"),) + (frozenset(),) * 4,
        excludes=frozenset(),
        required=("e",),
    )
    f = make_is_valid(c)
    assert f("ebony") is False
    assert f("abbey") is True
    assert f("crank") is False


def test_hit_mismatch_rejects():
    f = make_is_valid([rec(Hit("c"), Miss("x"), Miss("y"), Miss("z"), Miss("q"))])
    assert f("crane") is True
    assert f("trace") is False


def test_predicate_is_reusable():
    f = make_is_valid(HISTORY)
    assert [f(w) for w in ["eggyy", "eggzz", "eggyy"]] == [True, False, True]


def test_filter_is_idempotent():
    words = ["match", "eggyy", "eggzz", "yegge", "gygey"]
    once = filter_candidates(words, HISTORY)
    assert filter_candidates(once, HISTORY) == once


WORDS = ["crane", "slate", "trace", "caret", "react", "cater", "crate", "stare",
         "pious", "lemon", "abbey", "geese", "level", "nymph"]


@pytest.mark.parametrize("answer", WORDS)
def test_answer_survives_every_round(answer):
    history = []
    remaining = list(WORDS)
    for guess in ["slate", "crown", "pudgy"]:
        history.append(score_record(guess, answer))
        survivors = filter_candidates(remaining, history)
        assert answer in survivors
        assert len(survivors) <= len(remaining)
        remaining = survivors
