"""Metrics: PSNR, SSIM, size ratios, phase timing."""

import time
from typing import List

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

from models.compression_result import ComponentLevel, CompressionResult
from models.level_metrics import LevelMetrics


def compute_psnr_ssim(original_luma: np.ndarray, reconstructed_luma: np.ndarray) -> tuple:
    """PSNR (dB) and SSIM between two luma planes on a 0-255 scale."""
    original = np.asarray(original_luma, dtype=np.float64)
    reconstructed = np.asarray(reconstructed_luma, dtype=np.float64)
    if original.shape != reconstructed.shape:
        raise ValueError(f"Shape mismatch: {original.shape} vs {reconstructed.shape}")

    if np.array_equal(original, reconstructed):
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(original, reconstructed, data_range=255))

    # SSIM needs a window no larger than the image; 7 is skimage's default
    win_size = min(7, *original.shape)
    if win_size % 2 == 0:
        win_size -= 1
    if win_size < 3:
        ssim = 1.0 if np.allclose(original, reconstructed) else 0.0
    else:
        ssim = float(structural_similarity(
            original, reconstructed, data_range=255, win_size=win_size
        ))
    return psnr, ssim


def compute_level_metrics(
    original_luma: np.ndarray,
    level: ComponentLevel,
    original_byte_size: int,
) -> LevelMetrics:
    """Quality and size figures for one level against the source luma."""
    psnr, ssim = compute_psnr_ssim(original_luma, level.reconstructed_image)
    size = max(level.approximate_byte_size, 1)
    return LevelMetrics(
        num_components=level.num_components,
        psnr=psnr,
        ssim=ssim,
        compression_ratio=original_byte_size / size,
        size_percentage=level.approximate_byte_size / original_byte_size * 100.0,
    )


def evaluate_result(original_luma: np.ndarray, result: CompressionResult) -> List[LevelMetrics]:
    """Metrics for every level, in level order."""
    return [
        compute_level_metrics(original_luma, level, result.original_byte_size)
        for level in result.levels
    ]


class Timer:
    """Wall-clock timer for the forward and reconstruction phases."""

    def __init__(self):
        self.forward_time_ms = 0.0
        self.reconstruct_time_ms = 0.0

    def measure_forward(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.forward_time_ms = (time.perf_counter() - start) * 1000.0
        return result

    def measure_reconstruct(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.reconstruct_time_ms = (time.perf_counter() - start) * 1000.0
        return result
