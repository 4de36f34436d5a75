from __future__ import annotations

from pathlib import Path

import pytest

from inertial_dsp.infrastructure.config.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        base_dir=tmp_path,
        data_file=tmp_path / "demo.csv",
        plot_dir=None,
        max_samples=1000,
        start_column=0,
        end_column=1,
        window_size=3,
        cutoff_frequency=5.0,
        sampling_rate=50.0,
        motion_threshold=0.5,
        zupt_threshold=0.1,
        zupt_min_samples=5,
        log_level="INFO",
        api_token="test-token",
    )


@pytest.fixture
def accel_csv(tmp_path: Path) -> Path:
    """Coluna 0 parada, coluna 1 com movimento, algumas linhas curtas."""
    lines = []
    for i in range(40):
        moving = 5.0 if (i // 4) % 2 == 0 else -5.0
        lines.append(f"0.0,{moving},{i}")
    lines.append("0.0")
    path = tmp_path / "demo.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
