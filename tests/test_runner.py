# tests/test_runner.py
import os

from id3_tree.runner import (
    DATASETS_DIR,
    format_dataset_summary,
    format_performance_summary,
    main,
    resolve_dataset_path,
    run_dataset,
)
from id3_tree.arff import read_arff


def test_format_dataset_summary():
    dataset = read_arff(os.path.join(DATASETS_DIR, "weather.nominal.arff"))
    assert format_dataset_summary(dataset) == "play\nAttributes: 5\nExamples: 14\n"


def test_format_performance_summary():
    assert format_performance_summary(13 / 14) == "Performance Summary:\nAccuracy: 92.86%"
    assert format_performance_summary(1.0) == "Performance Summary:\nAccuracy: 100.00%"


def test_resolve_dataset_path_falls_back_to_bundled_datasets(tmp_path):
    assert resolve_dataset_path("weather.nominal.arff") == os.path.join(DATASETS_DIR, "weather.nominal.arff")
    local = tmp_path / "local.arff"
    local.write_text("@attribute play {yes}\n@data\nyes\n")
    assert resolve_dataset_path(str(local)) == str(local)


def test_run_dataset_prints_report(capsys):
    results = run_dataset(os.path.join(DATASETS_DIR, "weather.nominal.arff"))
    out = capsys.readouterr().out
    assert "outlook = overcast: yes" in out
    assert "Accuracy: 100.00%" in out
    assert results["dataset_name"] == "weather.nominal.arff"
    assert results["accuracy"] == 1.0
    assert results["num_leaf_nodes"] == 5


def test_main_runs_bundled_datasets(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Performance Summary:") == 3
    assert "tear-prod-rate = reduced: none" in out


def test_main_reports_missing_files(tmp_path, capsys):
    assert main([str(tmp_path / "missing.arff")]) == 1
    assert "Failed to read ARFF file." in capsys.readouterr().err


def test_main_with_single_leaf_dataset(tmp_path, capsys):
    path = tmp_path / "constant.arff"
    path.write_text("@attribute colour {red, blue}\n@attribute play {yes}\n@data\nred,yes\nblue,yes\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "play\nAttributes: 2\nExamples: 2\n" in out
    assert "Accuracy: 100.00%" in out


def test_main_rejects_dataset_without_data_rows(tmp_path, capsys):
    path = tmp_path / "header_only.arff"
    path.write_text("@relation empty\n@attribute colour {red, blue}\n@attribute play {yes, no}\n@data\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Attributes:" not in captured.out
    assert "Failed to read ARFF file. No data rows in" in captured.err
