"""Block DCT coder: progressive reconstructions from zig-zag truncated coefficients."""

import logging
from typing import Tuple

import numpy as np

from engines.block_processor import (
    block_grid_shape,
    extract_block,
    iter_block_indices,
    merge_blocks,
)
from engines.dct_engine import BLOCK_SIZE, MAX_COEFFICIENTS, dct2, idct2, truncate_coefficients
from engines.preprocessing import clamp, pad_to_multiple, to_luma
from engines.sample_points import generate_sample_points
from engines.scheduler import ReconstructionScheduler
from models.compression_params import CompressionMethod
from models.compression_result import ComponentLevel, CompressionResult
from utils.metrics import Timer

logger = logging.getLogger(__name__)

BYTES_PER_COEFFICIENT = 8


def clamp_budget(requested: int) -> int:
    """Limit a requested coefficient count to [1, 64]."""
    return int(min(max(requested, 1), MAX_COEFFICIENTS))


def approximate_byte_size(num_components: int, blocks_y: int, blocks_x: int) -> int:
    """Illustrative size: each kept coefficient stored as a float64."""
    return num_components * blocks_y * blocks_x * BYTES_PER_COEFFICIENT


def forward_transform_blocks(padded: np.ndarray, scheduler: ReconstructionScheduler) -> np.ndarray:
    """
    DCT every block of a block-aligned plane, one scheduler unit per block.

    Returns coefficients shaped (blocks_y, blocks_x, 8, 8). Each unit writes
    only its own slot, and the array is read-only once all units finish.
    """
    blocks_y, blocks_x = block_grid_shape(padded.shape, BLOCK_SIZE)
    coefficients = np.empty((blocks_y, blocks_x, BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)

    def transform(index: Tuple[int, int]) -> None:
        i, j = index
        coefficients[i, j] = dct2(extract_block(padded, i, j, BLOCK_SIZE))

    scheduler.run_all(transform, iter_block_indices(blocks_y, blocks_x))
    coefficients.flags.writeable = False
    return coefficients


def reconstruct_level(
    coefficients: np.ndarray,
    num_components: int,
    original_shape: Tuple[int, int],
) -> np.ndarray:
    """
    Rebuild the image from the first `num_components` zig-zag coefficients.

    Every block lands in its own slice of a buffer owned by this call, so
    concurrent levels never share output memory.
    """
    truncated = truncate_coefficients(coefficients, num_components)
    spatial_blocks = idct2(truncated)
    padded = clamp(merge_blocks(spatial_blocks))
    h, w = original_shape
    image = padded[:h, :w].copy()
    image.flags.writeable = False
    return image


def compress_block_transform(
    image,
    requested_components: int,
    scheduler: ReconstructionScheduler,
) -> CompressionResult:
    """Progressive block DCT reconstructions up to the clamped budget."""
    timer = Timer()
    luma = to_luma(image)
    luma.flags.writeable = False
    original_shape = luma.shape
    h, w = original_shape

    budget = clamp_budget(requested_components)
    if budget != requested_components:
        logger.warning("Clamped DCT budget from %d to %d", requested_components, budget)

    padded, _ = pad_to_multiple(luma, BLOCK_SIZE)
    blocks_y, blocks_x = block_grid_shape(padded.shape, BLOCK_SIZE)
    logger.debug("DCT: %dx%d image, %dx%d blocks", w, h, blocks_x, blocks_y)

    coefficients = timer.measure_forward(forward_transform_blocks, padded, scheduler)

    sample_points = generate_sample_points(budget)

    def build_level(k: int) -> ComponentLevel:
        return ComponentLevel(
            num_components=k,
            approximate_byte_size=approximate_byte_size(k, blocks_y, blocks_x),
            reconstructed_image=reconstruct_level(coefficients, k, original_shape),
        )

    levels = timer.measure_reconstruct(scheduler.run_all, build_level, sample_points)

    logger.info(
        "DCT compression: budget=%d, levels=%d, forward=%.1f ms, reconstruct=%.1f ms",
        budget, len(levels), timer.forward_time_ms, timer.reconstruct_time_ms,
    )
    return CompressionResult(
        method=CompressionMethod.BLOCK_TRANSFORM,
        original_byte_size=w * h * 3,
        levels=levels,
        original_shape=original_shape,
        forward_time_ms=timer.forward_time_ms,
        reconstruct_time_ms=timer.reconstruct_time_ms,
    )
