import csv
import json
import pytest
from wordl.engine import Hit, Miss, Contains, make_is_valid, score_record
from wordl.harness import run_case, run_batch, write_csv, write_manifest, summarize

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    r = run_case("positional_freq", "stare", words=WORDS)
    assert r["success"] is True and r["reason"] == "solved"
    assert r["history"] == [("crane", "-YG-G"), ("stare", "GGGGG")]
    assert r["guesses"] == 2


def test_run_case_answer_outside_dictionary():
    r = run_case("dictionary_order", "pious", words=["crane", "slate"])
    assert r["success"] is False
    assert r["reason"] == "exhausted"
    assert r["guesses"] == 1


def test_turn_budget_is_enforced():
    with pytest.raises(ValueError):
        run_case("overlap", "crane", words=WORDS, max_turns=7)


@pytest.mark.parametrize("rid", ["dictionary_order", "overlap", "positional_freq"])
def test_run_batch_solves_small_pool(rid):
    results = run_batch(rid, WORDS, words=WORDS)
    assert [r["answer"] for r in results] == WORDS
    assert all(r["success"] for r in results)
    assert all(r["ranker_id"] == rid for r in results)


def test_outputs(tmp_path):
    results = run_batch("overlap", WORDS, words=WORDS, sample=2)
    assert len(results) == 2

    csv_path = write_csv(results, str(tmp_path / "run.csv"), max_turns=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "crane" and rows[0]["ranker"] == "overlap"
    assert rows[0]["patt_1"].startswith("'")

    summary = summarize(results)
    assert summary["games"] == 2 and summary["wins"] == 2
    man = write_manifest({"summary": summary}, str(tmp_path / "m.json"))
    with open(man, encoding="utf-8") as f:
        assert json.load(f)["summary"]["win_rate"] == 1.0


def test_gray_copy_of_green_letter_keeps_answer():
    rec = score_record("aerie", "crane")
    assert rec.letters == (Contains("a"), Contains("e"), Contains("r"), Miss("i"), Hit("e"))
    assert make_is_valid([rec])("crane") is True

    r = run_case("dictionary_order", "crane", words=["aerie", "crane"])
    assert r["success"] is True and r["guesses"] == 2
    assert r["history"] == [("aerie", "Y-Y-G"), ("crane", "GGGGG")]


def test_extra_gray_copies_stay_misses():
    # one green 'e' covers one gray 'e'; the second gray has nothing to lean on
    rec = score_record("eerie", "crane")
    assert rec.letters[:2] == (Contains("e"), Miss("e"))
    # with hits already counted as required, no gray is converted
    assert score_record("aerie", "crane", include_hits=True)[1] == Miss("e")
