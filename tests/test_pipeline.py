"""Tests for the compression facade."""

import numpy as np
import pytest
from engines.errors import FactorizationError, InvalidImageError
from engines.pipeline import CODERS, compress, compress_with_params
from engines.scheduler import ReconstructionScheduler
from models.compression_params import CompressionMethod, CompressionParams
from utils.test_images import generate_checkerboard, generate_gradient


def test_every_method_has_a_coder():
    assert set(CODERS) == set(CompressionMethod)


@pytest.mark.parametrize("method", list(CompressionMethod))
def test_levels_ascending_and_end_at_budget(method):
    image = np.random.randint(0, 256, (40, 48, 3), dtype=np.uint8)
    result = compress(image, method, 30)
    counts = result.component_counts
    assert counts[-1] == 30
    assert all(a < b for a, b in zip(counts, counts[1:]))
    assert result.original_byte_size == 40 * 48 * 3


def test_dct_budget_clamped_to_64():
    """Requesting 1000 components on a 64x64 image with DCT clamps to 64."""
    image = np.random.randint(0, 256, (64, 64, 3), dtype=np.uint8)
    result = compress(image, CompressionMethod.BLOCK_TRANSFORM, 1000)
    assert result.final_level.num_components == 64


def test_svd_budget_clamped_to_smaller_dimension():
    image = np.random.randint(0, 256, (24, 50), dtype=np.uint8)
    result = compress(image, "SVD", 1000)
    assert result.final_level.num_components == 24


def test_method_given_as_string():
    image = generate_gradient(32)
    assert compress(image, "dct", 4).method is CompressionMethod.BLOCK_TRANSFORM
    assert compress(image, "SVD", 4).method is CompressionMethod.LOW_RANK


def test_unknown_method_rejected():
    with pytest.raises(ValueError, match="Unknown method"):
        compress(np.ones((8, 8)), "wavelet", 4)


@pytest.mark.parametrize("method", list(CompressionMethod))
def test_empty_image_rejected(method):
    with pytest.raises(InvalidImageError):
        compress(np.zeros((0, 16, 3), dtype=np.uint8), method, 8)


def test_factorization_error_surfaces_unchanged(monkeypatch):
    import engines.low_rank as low_rank

    def broken_factorize(luma):
        raise FactorizationError("no convergence")

    monkeypatch.setattr(low_rank, "factorize", broken_factorize)
    with pytest.raises(FactorizationError, match="no convergence"):
        compress(np.random.rand(16, 16), CompressionMethod.LOW_RANK, 8)


def test_explicit_scheduler_is_used():
    image = generate_checkerboard(32, square=8)
    with ReconstructionScheduler(max_workers=2) as scheduler:
        result = compress(image, CompressionMethod.BLOCK_TRANSFORM, 8, scheduler)
    assert result.component_counts == list(range(1, 9))


def test_compress_with_params_dedicated_pool():
    image = generate_gradient(32)
    params = CompressionParams(method="SVD", num_components=10, max_workers=2)
    result = compress_with_params(image, params)
    assert result.method is CompressionMethod.LOW_RANK
    assert result.component_counts == list(range(1, 11))


def test_gradient_favours_low_rank():
    """A smooth gradient is close to rank one, so SVD k=2 is already accurate."""
    image = generate_gradient(64)
    result = compress(image, CompressionMethod.LOW_RANK, 2)
    luma = 0.299 * image[:, :, 0] + 0.587 * image[:, :, 1] + 0.114 * image[:, :, 2]
    assert np.mean(np.abs(result.final_level.reconstructed_image - luma)) < 1.0


def test_result_summary_dict():
    result = compress(np.full((16, 16), 50.0), CompressionMethod.BLOCK_TRANSFORM, 3)
    summary = result.to_dict()
    assert summary["method"] == "DCT"
    assert summary["originalSize"] == 16 * 16 * 3
    assert [lvl["numComponents"] for lvl in summary["componentLevels"]] == [1, 2, 3]
    assert summary["componentLevels"][0]["dataSize"] == 1 * 4 * 8


@pytest.mark.parametrize("method", list(CompressionMethod))
def test_image_validated_once_per_call(method, monkeypatch):
    import engines.preprocessing as preprocessing

    calls = []
    original = preprocessing.validate_image

    def counting_validate(image):
        calls.append(1)
        return original(image)

    monkeypatch.setattr(preprocessing, "validate_image", counting_validate)
    compress(np.random.rand(16, 16) * 255, method, 4)
    assert len(calls) == 1
