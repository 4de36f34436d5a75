from __future__ import annotations

import numpy as np
import pytest

from inertial_dsp.domain.validators import (
    BufferValidator,
    ValidationConfig,
    ValidationResult,
    check_positive,
    check_positive_int,
    validate_buffers,
)


def test_resolves_data_size_from_first_buffer() -> None:
    result = validate_buffers([1.0, 2.0, 3.0], np.zeros(3))
    assert result.is_valid
    assert result.metadata["data_size"] == 3
    assert result.warnings == []


def test_explicit_data_size_shorter_than_buffers() -> None:
    result = validate_buffers([1.0, 2.0, 3.0], np.zeros(5), data_size=2)
    assert result.is_valid
    assert result.metadata["data_size"] == 2
    assert result.warnings


@pytest.mark.parametrize(
    "buffers, data_size",
    [
        (([1.0], None), None),
        (([1.0, 2.0], [0.0]), None),
        (([1.0], [0.0]), 2),
        (([1.0], [0.0]), 0),
        ((5.0,), None),
        ((), None),
    ],
)
def test_invalid_buffers(buffers, data_size) -> None:
    result = validate_buffers(*buffers, data_size=data_size)
    assert not result.is_valid
    assert result.errors


def test_min_size() -> None:
    assert not validate_buffers([1.0, 2.0], min_size=3).is_valid
    assert validate_buffers([1.0, 2.0, 3.0], min_size=3).is_valid


def test_check_positive() -> None:
    result = check_positive(ValidationResult.ok(), a=1.0, b=0.0, c=float("nan"), d="x", e=float("inf"))
    assert not result.is_valid
    assert len(result.errors) == 4


def test_check_positive_int() -> None:
    result = check_positive_int(ValidationResult.ok(), a=1, b=np.int64(3))
    assert result.is_valid
    result = check_positive_int(ValidationResult.ok(), a=True, b=2.0, c=0)
    assert len(result.errors) == 3


def test_buffer_validator_with_config() -> None:
    validator = BufferValidator()
    assert validator.name == "buffers"
    result = validator.validate(([1.0, 2.0], [0.0, 0.0]), ValidationConfig(min_data_points=2))
    assert result.is_valid
    assert result.metadata["lengths"] == [2, 2]
    assert not validator.validate(([1.0],), ValidationConfig(min_data_points=2)).is_valid
