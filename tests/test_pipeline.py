from __future__ import annotations

import numpy as np
import pytest

from inertial_dsp.components.signal_processing.filters import (
    BlockInput,
    FilterPipeline,
    FilterRegistry,
    LowPassFilter,
    MovingAverageFilter,
    create_filter_pipeline,
    create_smoothing_pipeline,
)


def test_registry_lists_builtin_filters() -> None:
    filters = FilterRegistry.list_filters()
    assert {"moving_average", "lowpass", "exponential"} <= set(filters)
    with pytest.raises(KeyError):
        FilterRegistry.get("does_not_exist")


def test_pipeline_from_mixed_configs() -> None:
    pipeline = FilterPipeline([
        "moving_average",
        {"name": "lowpass", "cutoff_freq": 2.0, "sample_rate": 50.0},
        MovingAverageFilter(window=3),
    ])
    assert len(pipeline) == 3
    assert repr(pipeline) == "FilterPipeline([moving_average -> lowpass -> moving_average])"


def test_pipeline_matches_manual_chain() -> None:
    data = np.sin(np.linspace(0, 10, 100))
    pipeline = create_smoothing_pipeline(window=5, cutoff_freq=3.0, sample_rate=50.0)
    expected = LowPassFilter(cutoff_freq=3.0, sample_rate=50.0).apply(
        MovingAverageFilter(window=5).apply(data)
    )
    np.testing.assert_allclose(pipeline.apply(data), expected)


def test_pipeline_does_not_modify_input() -> None:
    data = np.array([1.0, 5.0, 2.0, 8.0])
    FilterPipeline(["exponential"]).apply(data)
    np.testing.assert_array_equal(data, [1.0, 5.0, 2.0, 8.0])


def test_history_keys() -> None:
    pipeline = FilterPipeline([{"name": "moving_average", "window": 2}, {"name": "exponential", "alpha": 0.5}])
    history = pipeline.apply_with_history(np.array([1.0, 3.0, 5.0]))
    assert list(history) == ["original", "step_0_moving_average", "step_1_exponential", "final"]
    np.testing.assert_allclose(history["step_0_moving_average"], [1.0, 2.0, 4.0])
    np.testing.assert_allclose(history["final"], [1.0, 1.5, 2.75])


def test_describe_and_preset() -> None:
    pipeline = FilterPipeline.from_preset({"filters": [{"name": "lowpass", "cutoff_freq": 2.0}]})
    assert pipeline.describe() == [
        {
            "name": "lowpass",
            "description": LowPassFilter.description,
            "params": {"cutoff_freq": 2.0, "sample_rate": 50.0},
        }
    ]
    assert len(FilterPipeline.from_preset({})) == 0


def test_invalid_configs_raise() -> None:
    with pytest.raises(ValueError):
        FilterPipeline([{"window": 3}])
    with pytest.raises(ValueError):
        FilterPipeline([42])
    with pytest.raises(ValueError):
        FilterPipeline([{"name": "moving_average", "window": 0}])
    with pytest.raises(KeyError):
        FilterPipeline(["nope"])


def test_create_filter_pipeline_disabled_or_empty() -> None:
    assert create_filter_pipeline(None) is None
    assert create_filter_pipeline({"enabled": False, "filters": ["lowpass"]}) is None
    assert create_filter_pipeline({"enabled": True, "filters": []}) is None
    assert len(create_filter_pipeline({"filters": ["lowpass"]})) == 1


def test_process_wraps_result_in_block_output() -> None:
    output = MovingAverageFilter(window=2).process(BlockInput(np.array([2.0, 4.0]), {"channel": 5}))
    assert output.success
    assert output.metadata["filter_applied"] == "moving_average"
    assert output.metadata["channel"] == 5
    np.testing.assert_allclose(output.data, [2.0, 3.0])


def test_process_reports_errors_instead_of_raising() -> None:
    data = np.ones((2, 2))
    output = MovingAverageFilter(window=2).process(BlockInput(data))
    assert not output.success
    assert "1D" in output.error
    assert output.data is data
