"""Low-rank (SVD) coder: progressive reconstructions from the top-k singular triples."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy.linalg import LinAlgError, svd

from engines.errors import FactorizationError
from engines.preprocessing import clamp, to_luma
from engines.sample_points import generate_sample_points
from engines.scheduler import ReconstructionScheduler
from models.compression_params import CompressionMethod
from models.compression_result import ComponentLevel, CompressionResult
from utils.metrics import Timer

logger = logging.getLogger(__name__)

BYTES_PER_VALUE = 8


@dataclass(frozen=True, eq=False)
class SingularTriples:
    """U, S (descending) and V^T of one luma matrix. Arrays are read-only."""

    u: np.ndarray
    s: np.ndarray
    vt: np.ndarray

    @property
    def rank(self) -> int:
        return len(self.s)


def factorize(luma: np.ndarray) -> SingularTriples:
    """All min(h, w) singular triples of the luma matrix.

    Only the economy-size U and V^T are kept: columns beyond min(h, w) never
    contribute to a reconstruction. Raises FactorizationError on failure.
    """
    matrix = np.asarray(luma, dtype=np.float64)
    if matrix.ndim != 2 or matrix.size == 0:
        raise FactorizationError(f"Cannot factorize matrix of shape {matrix.shape}")

    try:
        u, s, vt = svd(matrix, full_matrices=False)
    except (LinAlgError, ValueError) as e:
        raise FactorizationError(f"SVD factorization failed: {e}") from e

    for array in (u, s, vt):
        array.flags.writeable = False
    return SingularTriples(u=u, s=s, vt=vt)


def clamp_budget(requested: int, rank: int) -> int:
    """Limit a requested singular value count to [1, rank]."""
    return int(min(max(requested, 1), rank))


def approximate_byte_size(num_components: int, height: int, width: int) -> int:
    """Illustrative size: k singular values plus k left and k right vectors."""
    return num_components * (height + width + 1) * BYTES_PER_VALUE


def reconstruct_level(triples: SingularTriples, num_components: int, shape: Tuple[int, int]) -> np.ndarray:
    """U_k diag(S_k) V_k^T, clamped to [0, 255], as a new array of `shape`."""
    k = num_components
    if not 1 <= k <= triples.rank:
        raise FactorizationError(f"Rank {k} outside [1, {triples.rank}]")

    # Scaling columns of U_k is diag(S_k) without building the diagonal matrix
    approximation = (triples.u[:, :k] * triples.s[:k]) @ triples.vt[:k, :]
    image = clamp(approximation).reshape(shape)
    image.flags.writeable = False
    return image


def compress_low_rank(
    image,
    requested_components: int,
    scheduler: ReconstructionScheduler,
) -> CompressionResult:
    """Progressive low-rank reconstructions up to the clamped budget."""
    timer = Timer()
    luma = to_luma(image)
    luma.flags.writeable = False
    original_shape = luma.shape
    h, w = original_shape

    triples = timer.measure_forward(factorize, luma)

    budget = clamp_budget(requested_components, triples.rank)
    if budget != requested_components:
        logger.warning("Clamped SVD budget from %d to %d", requested_components, budget)

    sample_points = generate_sample_points(budget)

    def build_level(k: int) -> ComponentLevel:
        return ComponentLevel(
            num_components=k,
            approximate_byte_size=approximate_byte_size(k, h, w),
            reconstructed_image=reconstruct_level(triples, k, original_shape),
        )

    levels = timer.measure_reconstruct(scheduler.run_all, build_level, sample_points)

    logger.info(
        "SVD compression: budget=%d, levels=%d, factorize=%.1f ms, reconstruct=%.1f ms",
        budget, len(levels), timer.forward_time_ms, timer.reconstruct_time_ms,
    )
    return CompressionResult(
        method=CompressionMethod.LOW_RANK,
        original_byte_size=w * h * 3,
        levels=levels,
        original_shape=original_shape,
        forward_time_ms=timer.forward_time_ms,
        reconstruct_time_ms=timer.reconstruct_time_ms,
    )
