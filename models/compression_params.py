"""Compression parameters."""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

DEFAULT_COMPONENTS = 64


class CompressionMethod(str, Enum):
    """Available coders. Values are the short names used by callers."""

    BLOCK_TRANSFORM = 'DCT'
    LOW_RANK = 'SVD'

    @classmethod
    def parse(cls, value: Union['CompressionMethod', str]) -> 'CompressionMethod':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            names = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown method {value!r}, use one of: {names}") from None


@dataclass
class CompressionParams:
    """Progressive compression request."""

    method: CompressionMethod = CompressionMethod.BLOCK_TRANSFORM
    num_components: int = DEFAULT_COMPONENTS
    max_workers: Optional[int] = None

    def __post_init__(self):
        self.method = CompressionMethod.parse(self.method)
        if isinstance(self.num_components, bool) or not isinstance(self.num_components, numbers.Integral):
            raise ValueError(f"num_components must be an integer, got {self.num_components!r}")
        self.num_components = int(self.num_components)
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
