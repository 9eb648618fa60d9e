"""Per-level quality metrics."""

from dataclasses import dataclass


@dataclass
class LevelMetrics:
    """Quality and size figures for one ComponentLevel."""

    num_components: int
    psnr: float
    ssim: float
    compression_ratio: float
    size_percentage: float
