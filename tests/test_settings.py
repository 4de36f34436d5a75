from __future__ import annotations

from pathlib import Path

import pytest

from inertial_dsp.domain.entities import FilterParameters
from inertial_dsp.infrastructure.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATA_FILE", "PLOT_DIR", "WINDOW_SIZE", "START_COLUMN", "END_COLUMN", "MAX_SAMPLES"):
        monkeypatch.delenv(f"INERTIAL_DSP_{name}", raising=False)
    monkeypatch.delenv("TOKEN", raising=False)

    settings = Settings.from_env()
    assert settings.data_file == Path("./demo.csv")
    assert settings.plot_dir is None
    assert settings.max_samples == 100000
    assert (settings.start_column, settings.end_column) == (5, 10)
    assert settings.window_size == 13
    assert settings.api_token == "1337"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INERTIAL_DSP_WINDOW_SIZE", "7")
    monkeypatch.setenv("INERTIAL_DSP_PLOT_DIR", "/tmp/plots")
    monkeypatch.setenv("INERTIAL_DSP_ZUPT_THRESHOLD", "0.25")
    monkeypatch.setenv("TOKEN", "secret")

    settings = Settings.from_env()
    assert settings.window_size == 7
    assert settings.plot_dir == Path("/tmp/plots")
    assert settings.zupt_threshold == 0.25
    assert settings.api_token == "secret"


def test_parameters(settings: Settings) -> None:
    params = settings.parameters()
    assert isinstance(params, FilterParameters)
    assert params.window_size == 3
    assert params.continuous_count_threshold == 5
    assert params.dt == pytest.approx(0.02)
    assert params.to_dict()["zupt_threshold"] == 0.1
    with pytest.raises(AttributeError):
        params.window_size = 10


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
