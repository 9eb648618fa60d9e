"""Compressor facade: one entry point for both coders."""

import logging
from typing import Callable, Dict, Optional, Union

from engines.block_transform import compress_block_transform
from engines.low_rank import compress_low_rank
from engines.scheduler import ReconstructionScheduler, get_default_scheduler
from models.compression_params import CompressionMethod, CompressionParams
from models.compression_result import CompressionResult

logger = logging.getLogger(__name__)

CoderFn = Callable[..., CompressionResult]

CODERS: Dict[CompressionMethod, CoderFn] = {
    CompressionMethod.BLOCK_TRANSFORM: compress_block_transform,
    CompressionMethod.LOW_RANK: compress_low_rank,
}


def compress(
    image,
    method: Union[CompressionMethod, str],
    requested_components: int,
    scheduler: Optional[ReconstructionScheduler] = None,
) -> CompressionResult:
    """
    Progressive reconstructions of `image` with the chosen coder.

    The budget is clamped to the coder's valid range. Raises
    InvalidImageError for malformed input and FactorizationError when the
    low-rank factorization fails; no partial result is returned.
    """
    method = CompressionMethod.parse(method)
    if scheduler is None:
        scheduler = get_default_scheduler()

    logger.info("Starting %s compression (requested components=%d)", method.value, requested_components)
    return CODERS[method](image, requested_components, scheduler)


def compress_with_params(image, params: CompressionParams) -> CompressionResult:
    """Run `compress` from a CompressionParams, on a dedicated pool if max_workers is set."""
    if params.max_workers is None:
        return compress(image, params.method, params.num_components)

    with ReconstructionScheduler(params.max_workers) as scheduler:
        return compress(image, params.method, params.num_components, scheduler)
