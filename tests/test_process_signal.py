from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from inertial_dsp.infrastructure.config import Settings
from inertial_dsp.infrastructure.data import ColumnReadResult
from inertial_dsp.use_cases import ProcessRequest, ProcessSignalUseCase


def test_processes_each_column(settings: Settings, accel_csv: Path, tmp_path: Path) -> None:
    request = ProcessRequest(data_file=accel_csv, start_column=0, end_column=3, plot_dir=tmp_path / "plots")
    report = ProcessSignalUseCase(settings).execute(request)

    by_column = {c.column: c for c in report.channels}
    assert list(by_column) == [0, 1, 2, 3]

    still = by_column[0]
    assert still.status == "ok"
    assert still.count == 41
    assert still.stationary
    assert still.zupt_status == 1
    assert still.motion_samples == 0
    assert still.duration == pytest.approx(41 / 50.0)

    moving = by_column[1]
    assert moving.status == "ok"
    assert moving.count == 40
    assert not moving.stationary
    assert moving.zupt_status == 0
    assert moving.motion_samples > 0

    assert by_column[3].status == "empty"
    assert by_column[3].count == 0

    assert report.any_success
    assert report.plot_path == tmp_path / "plots" / "columns_0_3.png"
    assert report.plot_path.exists()


def test_missing_file_reports_read_errors(settings: Settings, tmp_path: Path) -> None:
    request = ProcessRequest(data_file=tmp_path / "missing.csv", start_column=2, end_column=4, plot_dir=tmp_path)
    report = ProcessSignalUseCase(settings).execute(request)

    assert [c.status for c in report.channels] == ["read_error"] * 3
    assert all(c.count == -1 for c in report.channels)
    assert not report.any_success
    assert report.plot_path is None
    assert report.to_dict()["plot_path"] is None


def test_lowpass_and_injected_collaborators(settings: Settings) -> None:
    calls = []

    def reader(path, max_size, column):
        return ColumnReadResult(column=column, values=np.array([0.0, 1.0, 1.0, 1.0]), count=4, total_rows=4)

    def plotter(traces, title="", save_path=None):
        calls.append((traces, title, save_path))
        return save_path

    use_case = ProcessSignalUseCase(settings, reader=reader, plotter=plotter)
    report = use_case.execute(
        ProcessRequest(data_file=Path("ignored.csv"), start_column=1, end_column=1, apply_lowpass=True, plot_dir=Path("out"))
    )

    assert report.channels[0].status == "ok"
    assert report.channels[0].duration == pytest.approx(4 / 50.0)
    assert report.plot_path == Path("out") / "columns_1_1.png"

    traces, title, _ = calls[0]
    assert traces[0].label == "Coluna 1"
    assert title == "Colunas 1 a 1"
    np.testing.assert_array_equal(traces[0].input_values, [0.0, 1.0, 1.0, 1.0])
    # Média móvel (janela 3) seguida do passa-baixa: saída atenuada e crescente
    assert traces[0].output_values[0] == 0.0
    assert np.all(np.diff(traces[0].output_values) > 0)
    assert traces[0].output_values[-1] < 1.0


def test_without_plot_dir_nothing_is_plotted(settings: Settings, accel_csv: Path) -> None:
    def plotter(*args, **kwargs):
        raise AssertionError("plotter não deveria ser chamado")

    report = ProcessSignalUseCase(settings, plotter=plotter).execute(
        ProcessRequest(data_file=accel_csv, start_column=0, end_column=0)
    )
    assert report.plot_path is None
    assert report.to_dict()["channels"][0]["stationary"] is True
