"""Compression engines - pure computation, no I/O."""

from .errors import CompressionError, InvalidImageError, FactorizationError
from .preprocessing import validate_image, to_luma, pad_to_multiple, clamp
from .sample_points import generate_sample_points
from .block_processor import split_into_blocks, merge_blocks
from .dct_engine import BLOCK_SIZE, MAX_COEFFICIENTS, ZIGZAG_ORDER, dct2, idct2, truncate_coefficients
from .scheduler import ReconstructionScheduler, get_default_scheduler, shutdown_default_scheduler
from .block_transform import compress_block_transform
from .low_rank import SingularTriples, factorize, compress_low_rank
from .pipeline import compress, compress_with_params

__all__ = [
    'CompressionError',
    'InvalidImageError',
    'FactorizationError',
    'validate_image',
    'to_luma',
    'pad_to_multiple',
    'clamp',
    'generate_sample_points',
    'split_into_blocks',
    'merge_blocks',
    'BLOCK_SIZE',
    'MAX_COEFFICIENTS',
    'ZIGZAG_ORDER',
    'dct2',
    'idct2',
    'truncate_coefficients',
    'ReconstructionScheduler',
    'get_default_scheduler',
    'shutdown_default_scheduler',
    'compress_block_transform',
    'SingularTriples',
    'factorize',
    'compress_low_rank',
    'compress',
    'compress_with_params',
]
