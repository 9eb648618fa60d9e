"""Progressive compression result."""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from models.compression_params import CompressionMethod


@dataclass(frozen=True, eq=False)
class ComponentLevel:
    """One rendered rung: a reconstruction from `num_components` components."""

    num_components: int
    approximate_byte_size: int
    # Float64 luma, clamped to [0, 255], original height x width
    reconstructed_image: np.ndarray


@dataclass
class CompressionResult:
    """All levels produced by one compression call, ascending by component count."""

    method: CompressionMethod
    original_byte_size: int
    levels: List[ComponentLevel]

    original_shape: Tuple[int, int] = (0, 0)

    # Runtime
    forward_time_ms: float = 0.0
    reconstruct_time_ms: float = 0.0

    size_label: str = "Estimated (no quantization or entropy coding)"

    def __post_init__(self):
        if not self.levels:
            raise ValueError("CompressionResult needs at least one level")
        counts = self.component_counts
        if any(a >= b for a, b in zip(counts, counts[1:])):
            raise ValueError(f"Levels must be strictly ascending, got {counts}")

    @property
    def component_counts(self) -> List[int]:
        return [level.num_components for level in self.levels]

    @property
    def final_level(self) -> ComponentLevel:
        return self.levels[-1]

    def compression_ratio(self, level: ComponentLevel) -> float:
        """Original size over the level's estimated size."""
        return self.original_byte_size / max(level.approximate_byte_size, 1)

    def to_dict(self) -> dict:
        """Plain-data summary, without images."""
        return {
            'method': self.method.value,
            'originalSize': self.original_byte_size,
            'componentLevels': [
                {
                    'numComponents': level.num_components,
                    'dataSize': level.approximate_byte_size,
                }
                for level in self.levels
            ],
        }
