"""Data models for compression parameters and results."""

from .compression_params import CompressionMethod, CompressionParams, DEFAULT_COMPONENTS
from .compression_result import ComponentLevel, CompressionResult
from .level_metrics import LevelMetrics

__all__ = [
    'CompressionMethod',
    'CompressionParams',
    'DEFAULT_COMPONENTS',
    'ComponentLevel',
    'CompressionResult',
    'LevelMetrics',
]
