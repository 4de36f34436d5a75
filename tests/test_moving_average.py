from __future__ import annotations

import numpy as np
import pytest

from inertial_dsp.components.signal_processing.filters import (
    FilterStatus,
    MovingAverageFilter,
    calculate_moving_average,
)


def test_truncated_window_at_start() -> None:
    out = np.zeros(5)
    status = calculate_moving_average([1.0, 2.0, 3.0, 4.0, 5.0], out, 3)
    assert status is FilterStatus.OK
    np.testing.assert_allclose(out, [1.0, 1.5, 2.0, 3.0, 4.0])


def test_first_output_equals_first_input() -> None:
    data = np.array([3.25, -1.0, 8.0])
    out = np.zeros(3)
    calculate_moving_average(data, out, 2)
    assert out[0] == data[0]


def test_window_larger_than_data_uses_available_samples() -> None:
    out = np.zeros(3)
    status = calculate_moving_average([2.0, 4.0, 6.0], out, 10)
    assert status is FilterStatus.OK
    np.testing.assert_allclose(out, [2.0, 3.0, 4.0])


def test_window_of_one_copies_input() -> None:
    data = np.array([1.0, -2.0, 7.5])
    out = np.zeros(3)
    calculate_moving_average(data, out, 1)
    np.testing.assert_array_equal(out, data)


def test_data_size_limits_written_range() -> None:
    out = np.full(5, -9.0)
    status = calculate_moving_average([1.0, 2.0, 3.0, 4.0, 5.0], out, 2, data_size=3)
    assert status is FilterStatus.OK
    np.testing.assert_allclose(out, [1.0, 1.5, 2.5, -9.0, -9.0])


@pytest.mark.parametrize(
    "input_data, window, data_size",
    [
        (None, 3, None),
        ([1.0, 2.0], 0, None),
        ([1.0, 2.0], -1, None),
        ([1.0, 2.0], 2.5, None),
        ([1.0, 2.0], 2, 0),
        ([1.0, 2.0], 2, -4),
        ([1.0, 2.0], 2, 5),
        ([], 2, None),
    ],
)
def test_invalid_input_leaves_output_untouched(input_data, window, data_size) -> None:
    out = np.full(2, 42.0)
    status = calculate_moving_average(input_data, out, window, data_size)
    assert status is FilterStatus.INVALID_INPUT
    np.testing.assert_array_equal(out, [42.0, 42.0])


def test_missing_output_buffer_is_invalid() -> None:
    assert calculate_moving_average([1.0], None, 1) is FilterStatus.INVALID_INPUT


def test_output_shorter_than_input_is_invalid() -> None:
    out = np.full(2, 7.0)
    status = calculate_moving_average([1.0, 2.0, 3.0], out, 2)
    assert status is FilterStatus.INVALID_INPUT
    np.testing.assert_array_equal(out, [7.0, 7.0])


def test_list_output_buffer_is_written() -> None:
    out = [0.0, 0.0, 0.0]
    calculate_moving_average([3.0, 5.0, 7.0], out, 2)
    assert out == pytest.approx([3.0, 4.0, 6.0])


def test_repeated_calls_are_identical() -> None:
    rng = np.random.default_rng(7)
    data = rng.normal(size=200)
    first, second = np.zeros(200), np.zeros(200)
    calculate_moving_average(data, first, 13)
    calculate_moving_average(data, second, 13)
    np.testing.assert_array_equal(first, second)


def test_filter_class_matches_function_and_keeps_input() -> None:
    data = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    filtered = MovingAverageFilter(window=3).apply(data)
    np.testing.assert_allclose(filtered, [1.0, 1.5, 2.0, 3.0, 4.0])
    np.testing.assert_array_equal(data, [1.0, 2.0, 3.0, 4.0, 5.0])


def test_filter_class_rejects_bad_window() -> None:
    with pytest.raises(ValueError):
        MovingAverageFilter(window=0)
    with pytest.raises(ValueError):
        MovingAverageFilter(window=2.5)


def test_filter_class_empty_signal() -> None:
    assert len(MovingAverageFilter(window=3).apply(np.array([]))) == 0


def test_filter_class_raises_on_rejected_window() -> None:
    ma = MovingAverageFilter(window=3)
    ma.window = 0
    with pytest.raises(ValueError):
        ma.apply(np.array([1.0, 2.0, 3.0]))
