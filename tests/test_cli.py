from __future__ import annotations

from pathlib import Path

import pytest

from inertial_dsp import __main__ as cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # Mantém os handlers do pytest no logger raiz
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.window == cli.get_settings().window_size
    assert not args.lowpass


def test_processes_file(accel_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    plot_dir = tmp_path / "plots"
    code = cli.main([str(accel_csv), "-w", "3", "--start", "0", "--end", "1", "--plot-dir", str(plot_dir)])

    assert code == 0
    out = capsys.readouterr().out
    assert "coluna 0: 41 valores, status=ok" in out
    assert "coluna 1: 40 valores, status=ok" in out
    assert (plot_dir / "columns_0_1.png").exists()


def test_missing_file_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = cli.main([str(tmp_path / "missing.csv"), "--start", "0", "--end", "0"])
    assert code == 1
    assert "status=read_error" in capsys.readouterr().out


def test_no_values_in_range_exits_with_error(accel_csv: Path) -> None:
    assert cli.main([str(accel_csv), "--start", "8", "--end", "9"]) == 1
