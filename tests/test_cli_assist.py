from pathlib import Path

from apps.cli import assist

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def _feed(monkeypatch, lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def _words_file(tmp_path: Path) -> str:
    p = tmp_path / "words_5.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_assist_pattern_entry_solves(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["crane GG", "crane -YG-G", "stare GGGGG"])
    rc = assist.main(["--words", _words_file(tmp_path)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "error:" in out            # the short pattern was rejected, not recorded
    assert "suggestion: stare" in out
    assert "solved: stare" in out


def test_assist_marks_entry(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["crane", "35", "r", "q"])
    rc = assist.main(["--words", _words_file(tmp_path), "--ranker", "overlap"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "1 candidate(s) left" in out
    assert "suggestion: stare" in out


def test_assist_fix_last_round(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["crane G----", "fix crane -YG-G", "q"])
    assist.main(["--words", _words_file(tmp_path)])
    out = capsys.readouterr().out
    assert "use 'fix'" in out
    assert "suggestion: stare" in out


def test_assist_missing_dictionary(tmp_path):
    assert assist.main(["--words", str(tmp_path / "missing.txt")]) == 2


def test_assist_warns_on_word_outside_dictionary(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["blimp -----", "q"])
    assist.main(["--words", _words_file(tmp_path)])
    out = capsys.readouterr().out
    assert "warning: 'blimp' is not in the dictionary" in out
    assert "4 candidate(s) left" in out
