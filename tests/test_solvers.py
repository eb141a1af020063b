import pytest
from wordl.engine import Constraints
from wordl.errors import ExhaustedCandidates
from wordl.solvers import create_ranker, get_ranker_ids

EMPTY = Constraints.empty()


def test_registry_ids():
    assert get_ranker_ids() == ["dictionary_order", "overlap", "positional_freq"]
    with pytest.raises(ValueError):
        create_ranker("entropy")


def test_positional_freq_ranking():
    r = create_ranker("positional_freq")
    cands = ["trace", "crate", "crane"]
    assert r.rank(cands, EMPTY, 3) == ["crane", "crate", "trace"]
    scores = dict(r.scores(cands, EMPTY))
    assert scores["crane"] == pytest.approx(12 / 3)
    assert scores["trace"] == pytest.approx(11 / 3)


def test_overlap_ranking():
    c = Constraints(
        hits=("c", None, None, None, None),
        excludes_at=(frozenset(), frozenset(), frozenset("a"), frozenset(), frozenset()),
        excludes=frozenset("s"),
        required=("a",),
    )
    r = create_ranker("overlap")
    cands = ["crane", "cloud", "chump", "track"]
    assert r.rank(cands, c, 3) == ["chump", "cloud", "crane"]
    assert r.rank(cands, c) == ["chump"]
    assert dict(r.scores(cands, c)) == {"crane": 16.0, "cloud": 21.0, "chump": 21.0}


def test_overlap_all_filtered_by_hits():
    c = Constraints(hits=("c",) + (None,) * 4, excludes_at=(frozenset(),) * 5,
                    excludes=frozenset(), required=())
    with pytest.raises(ExhaustedCandidates):
        create_ranker("overlap").rank(["track"], c)


def test_dictionary_order():
    r = create_ranker("dictionary_order")
    assert r.rank(["abbey", "zesty", "crane"], EMPTY, 2) == ["abbey", "zesty"]


@pytest.mark.parametrize("rid", ["dictionary_order", "overlap", "positional_freq"])
def test_exhausted_is_signalled(rid):
    with pytest.raises(ExhaustedCandidates):
        create_ranker(rid).rank([], EMPTY, 3)


@pytest.mark.parametrize("rid", ["dictionary_order", "overlap", "positional_freq"])
def test_rank_needs_positive_n(rid):
    with pytest.raises(ValueError):
        create_ranker(rid).rank(["crane"], EMPTY, 0)
