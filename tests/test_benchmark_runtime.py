from wordle_analysis.benchmark_runtime import approx_num_pairs, run_benchmark


def test_approx_num_pairs():
    assert approx_num_pairs(0) == 0
    assert approx_num_pairs(1) == 0
    assert approx_num_pairs(50) == 2450


def test_run_benchmark_writes_csv_and_plot(tmp_path, sample_words):
    csv_path = tmp_path / "runtime.csv"
    fig_path = tmp_path / "runtime.png"
    rows = run_benchmark(tuple(sample_words), [2, 5, 10], 2, csv_path, fig_path)

    assert [(n, pairs, run_idx) for n, pairs, run_idx, _ in rows] == [
        (2, 2, 1), (2, 2, 2),
        (5, 20, 1), (5, 20, 2),
        (10, 90, 1), (10, 90, 2),
    ]
    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "subset_size,num_pairs,run_idx,runtime_seconds"
    assert len(lines) == 7
    assert fig_path.exists()
