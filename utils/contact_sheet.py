"""Render every level of a result side by side with matplotlib."""

import math
from pathlib import Path
from typing import List, Optional

from matplotlib.figure import Figure

from models.compression_result import CompressionResult
from models.level_metrics import LevelMetrics
from utils.formatting import format_kib


def build_contact_sheet(
    result: CompressionResult,
    metrics: Optional[List[LevelMetrics]] = None,
    columns: int = 4,
    tile_inches: float = 2.5,
) -> Figure:
    """
    Grid of level reconstructions, ascending by component count.

    Each tile is titled with its component count and estimated size, plus
    PSNR when `metrics` (one entry per level) is given.
    """
    if metrics is not None and len(metrics) != len(result.levels):
        raise ValueError("metrics must have one entry per level")

    count = len(result.levels)
    columns = max(1, min(columns, count))
    rows = math.ceil(count / columns)

    fig = Figure(figsize=(columns * tile_inches, rows * tile_inches + 0.6), dpi=100, tight_layout=True)
    fig.suptitle(
        f"{result.method.value}: {count} levels, original {format_kib(result.original_byte_size)} KiB"
    )

    for idx in range(rows * columns):
        ax = fig.add_subplot(rows, columns, idx + 1)
        ax.axis('off')
        if idx >= count:
            continue

        level = result.levels[idx]
        ax.imshow(level.reconstructed_image, cmap='gray', vmin=0, vmax=255, interpolation='nearest')
        title = f"k={level.num_components}  {format_kib(level.approximate_byte_size)} KiB"
        if metrics is not None:
            psnr = metrics[idx].psnr
            title += "\nPSNR inf" if math.isinf(psnr) else f"\nPSNR {psnr:.1f} dB"
        ax.set_title(title, fontsize=8)

    return fig


def render_contact_sheet(
    result: CompressionResult,
    path,
    metrics: Optional[List[LevelMetrics]] = None,
    columns: int = 4,
) -> Path:
    """Save the contact sheet image to `path` and return the path."""
    path = Path(path)
    fig = build_contact_sheet(result, metrics, columns)
    fig.savefig(str(path), facecolor='white')
    return path
