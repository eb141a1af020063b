import argparse
import json
from pathlib import Path

import pytest

from apps.cli import run
from wordl.config import Settings, add_settings_arguments, settings_from_args

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_settings_from_args():
    ap = argparse.ArgumentParser()
    add_settings_arguments(ap)
    s = settings_from_args(ap.parse_args(["--ranker", "overlap", "--top", "5", "--lenient"]))
    assert s == Settings(ranker="overlap", top_n=5, strict=False)


def test_settings_reject_bad_top():
    ap = argparse.ArgumentParser()
    add_settings_arguments(ap)
    with pytest.raises(ValueError):
        settings_from_args(ap.parse_args(["--top", "0"]))


def test_run_writes_reports(tmp_path: Path, capsys):
    words = tmp_path / "words_5.txt"
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = run.main(["--words", str(words), "--ranker", "positional_freq",
                   "--outdir", str(outdir), "--progress", "off", "--sample", "3"])
    assert rc == 0
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("run_*.csv"))) == 1
    man = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert man["num_cases"] == 3 and man["summary"]["wins"] == 3
    assert "won 3/3" in capsys.readouterr().out
