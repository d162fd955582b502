import json

import pytest

from wordle_analysis import main as cli
from wordle_analysis.config import CONFIG, load_config_overrides, scoring_weights
from wordle_analysis.report import read_summaries_csv
from wordle_analysis.scoring import ScoringWeights


def test_load_config_overrides(tmp_path):
    path = tmp_path / "overrides.json"
    path.write_text(json.dumps({"subset_size": 7, "hit_points": 5, "bogus": 1}), encoding="utf-8")
    applied = load_config_overrides(path)
    assert applied == ["subset_size", "hit_points"]
    assert CONFIG["subset_size"] == 7
    assert "bogus" not in CONFIG
    assert scoring_weights(CONFIG) == ScoringWeights(hit=5, present=1, absent=0)


def test_load_config_overrides_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_overrides(tmp_path / "nope.json")


def test_cli_end_to_end(tmp_path, source_text, capsys):
    src = tmp_path / "main.js"
    src.write_text(source_text, encoding="utf-8")
    out_dir = tmp_path / "out"

    rc = cli.main([
        "--source-file", str(src),
        "--subset-size", "10",
        "--serial",
        "--no-plots",
        "--pairs-csv",
        "--out-dir", str(out_dir),
        "--top-k", "3",
    ])
    assert rc == 0

    summaries = read_summaries_csv(out_dir / "guess_summary.csv")
    assert len(summaries) == 10
    assert all(s.num_targets == 9 for s in summaries)
    assert (out_dir / "letter_stats.csv").exists()
    assert (out_dir / "pair_scores.csv").exists()

    out = capsys.readouterr().out
    assert "Best guesses by average score" in out
    assert summaries[0].guess in out


def test_cli_with_plots(tmp_path, source_text):
    pytest.importorskip("matplotlib")
    src = tmp_path / "main.js"
    src.write_text(source_text, encoding="utf-8")
    out_dir = tmp_path / "out"

    rc = cli.main(["--source-file", str(src), "--subset-size", "5", "--serial", "--out-dir", str(out_dir)])
    assert rc == 0
    for name in ["letter_frequency.png", "positional_frequency.png", "guess_ranking.png"]:
        assert (out_dir / name).exists()


def test_cli_reports_malformed_source(tmp_path, capsys):
    src = tmp_path / "main.js"
    src.write_text('["cigar","rebut","ab","shave"]', encoding="utf-8")

    rc = cli.main(["--source-file", str(src), "--serial", "--no-plots", "--out-dir", str(tmp_path / "out")])
    assert rc == 1
    assert "malformed word 'AB'" in capsys.readouterr().err


def test_cli_reports_missing_word_list(tmp_path, capsys):
    src = tmp_path / "main.js"
    src.write_text("no words here", encoding="utf-8")

    rc = cli.main(["--source-file", str(src), "--serial", "--no-plots", "--out-dir", str(tmp_path / "out")])
    assert rc == 1
    assert "ERROR" in capsys.readouterr().err
