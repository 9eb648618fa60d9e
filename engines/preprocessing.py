"""Image normalization: luma conversion, block padding, clamping."""

import numpy as np
from typing import Tuple

from engines.errors import InvalidImageError

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def validate_image(image) -> np.ndarray:
    """Check that `image` is a non-empty gray, RGB or RGBA pixel array."""
    try:
        array = np.asarray(image)
    except (TypeError, ValueError) as e:
        raise InvalidImageError(f"Image is not array-like: {e}") from e

    if array.dtype == object or not np.issubdtype(array.dtype, np.number):
        raise InvalidImageError(f"Image must be numeric, got dtype {array.dtype}")
    if array.ndim == 3:
        if array.shape[2] not in (3, 4):
            raise InvalidImageError(
                f"Color image must have 3 or 4 channels, got {array.shape[2]}"
            )
    elif array.ndim != 2:
        raise InvalidImageError(f"Image must be 2D or 3D, got {array.ndim}D")

    h, w = array.shape[:2]
    if h == 0 or w == 0:
        raise InvalidImageError(f"Image is empty ({w}x{h})")
    if not np.all(np.isfinite(array)):
        raise InvalidImageError("Image contains non-finite values")
    return array


def to_luma(image) -> np.ndarray:
    """RGB(A) to luma using BT.601 weights; 2D input is taken as luma already."""
    array = validate_image(image)
    if array.ndim == 2:
        return array.astype(np.float64)

    rgb = array[:, :, :3].astype(np.float64)
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    wr, wg, wb = LUMA_WEIGHTS
    return wr * R + wg * G + wb * B


def pad_to_multiple(matrix: np.ndarray, block_size: int) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Pad matrix to a multiple of block_size by replicating edge pixels."""
    h, w = matrix.shape
    pad_h = (block_size - h % block_size) % block_size
    pad_w = (block_size - w % block_size) % block_size
    if pad_h > 0 or pad_w > 0:
        padded = np.pad(matrix, ((0, pad_h), (0, pad_w)), mode='edge')
    else:
        padded = matrix.copy()
    return padded, (h, w)


def clamp(values, low: float = 0.0, high: float = 255.0):
    """Clamp output pixel values. Never apply to transform coefficients."""
    return np.clip(values, low, high)
