"""Tests for the command-line entry point and its environment overrides."""

from pathlib import Path

import pyreadr
import pytest

from dpm_cluster_report import cli, config
from dpm_cluster_report.env import get_env_int, get_env_str


def test_cli_renders_report(results_dir, tmp_path: Path, capsys):
    output = tmp_path / "cli_report.pdf"
    code = cli.main(
        [
            "--results-dir",
            str(results_dir),
            "--output",
            str(output),
            "--scenarios",
            "miller",
            "raj3",
            "--seed",
            "5",
        ]
    )
    assert code == 0
    assert output.exists()
    assert str(output) in capsys.readouterr().out


def test_cli_missing_results_returns_error_code(tmp_path: Path):
    code = cli.main(
        ["--results-dir", str(tmp_path), "--output", str(tmp_path / "r.pdf")]
    )
    assert code == 1
    assert not (tmp_path / "r.pdf").exists()


def test_cli_rejects_unknown_scenario(tmp_path: Path):
    with pytest.raises(SystemExit):
        cli.main(["--results-dir", str(tmp_path), "--scenarios", "nope"])


def test_results_dir_default_from_environment(monkeypatch):
    monkeypatch.setenv(config.ENV_RESULTS_DIR, "/data/sims")
    monkeypatch.setenv(config.ENV_SEED, "17")
    args = cli._parse_args([])
    assert args.results_dir == "/data/sims"
    assert args.seed == 17
    assert args.scenarios == ["miller", "raj4", "raj3"]


def test_env_helpers_fall_back_to_defaults(monkeypatch):
    monkeypatch.delenv("DPM_TEST_UNSET", raising=False)
    monkeypatch.setenv("DPM_TEST_BAD_INT", "abc")
    monkeypatch.setenv("DPM_TEST_BLANK", "   ")

    assert get_env_int("DPM_TEST_UNSET", 3) == 3
    assert get_env_int("DPM_TEST_BAD_INT", 4) == 4
    assert get_env_str("DPM_TEST_BLANK", "x") == "x"
    assert get_env_str("DPM_TEST_UNSET") is None


@pytest.mark.parametrize("level", ["NaN", "alpha_n"])
def test_cli_bad_alpha_level_returns_error_code(
    results_dir, results_frame, tmp_path: Path, level
):
    table = results_frame.copy()
    table.loc[0, "alpha"] = level
    pyreadr.write_rdata(
        str(results_dir / "miller_results.RData"), table, df_name="results"
    )
    output = tmp_path / "bad_alpha.pdf"

    code = cli.main(
        [
            "--results-dir",
            str(results_dir),
            "--output",
            str(output),
            "--scenarios",
            "miller",
            "raj4",
        ]
    )
    assert code == 1
    assert not output.exists()
