"""Tests for parameter and result models."""

import numpy as np
import pytest
from models.compression_params import CompressionMethod, CompressionParams, DEFAULT_COMPONENTS
from models.compression_result import ComponentLevel, CompressionResult


def _level(k, size=8):
    return ComponentLevel(num_components=k, approximate_byte_size=size, reconstructed_image=np.zeros((2, 2)))


def test_params_defaults():
    params = CompressionParams()
    assert params.method is CompressionMethod.BLOCK_TRANSFORM
    assert params.num_components == DEFAULT_COMPONENTS == 64
    assert params.max_workers is None


def test_params_parse_method_string():
    assert CompressionParams(method="svd").method is CompressionMethod.LOW_RANK


@pytest.mark.parametrize("kwargs", [
    {"method": "JPEG"},
    {"num_components": 2.5},
    {"num_components": True},
    {"max_workers": 0},
])
def test_params_validation(kwargs):
    with pytest.raises(ValueError):
        CompressionParams(**kwargs)


def test_params_accept_numpy_integer():
    assert CompressionParams(num_components=np.int64(12)).num_components == 12


def test_result_requires_levels():
    with pytest.raises(ValueError):
        CompressionResult(method=CompressionMethod.LOW_RANK, original_byte_size=12, levels=[])


def test_result_requires_ascending_levels():
    with pytest.raises(ValueError):
        CompressionResult(
            method=CompressionMethod.LOW_RANK,
            original_byte_size=12,
            levels=[_level(2), _level(2)],
        )


def test_result_helpers():
    result = CompressionResult(
        method=CompressionMethod.BLOCK_TRANSFORM,
        original_byte_size=960,
        levels=[_level(1, 96), _level(3, 288)],
    )
    assert result.component_counts == [1, 3]
    assert result.final_level.num_components == 3
    assert result.compression_ratio(result.levels[0]) == pytest.approx(10.0)
