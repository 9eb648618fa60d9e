"""DCT/IDCT operations and zig-zag coefficient truncation."""

import numpy as np
from scipy.fft import dctn, idctn

BLOCK_SIZE = 8
MAX_COEFFICIENTS = BLOCK_SIZE * BLOCK_SIZE


def _build_zigzag_order(size: int) -> np.ndarray:
    """Flat positions (row * size + col) from lowest to highest frequency."""
    order = []
    for diagonal in range(2 * size - 1):
        if diagonal % 2 == 0:
            # Even diagonals run bottom-left to top-right
            rows = range(diagonal, -1, -1)
        else:
            rows = range(0, diagonal + 1)
        for i in rows:
            j = diagonal - i
            if i < size and j < size:
                order.append(i * size + j)
    return np.array(order, dtype=np.intp)


ZIGZAG_ORDER = _build_zigzag_order(BLOCK_SIZE)
ZIGZAG_ORDER.flags.writeable = False

# ZIGZAG_RANK[u, v] = position of (u, v) in ZIGZAG_ORDER
ZIGZAG_RANK = np.empty(MAX_COEFFICIENTS, dtype=np.intp)
ZIGZAG_RANK[ZIGZAG_ORDER] = np.arange(MAX_COEFFICIENTS)
ZIGZAG_RANK = ZIGZAG_RANK.reshape(BLOCK_SIZE, BLOCK_SIZE)
ZIGZAG_RANK.flags.writeable = False


def dct2(block: np.ndarray) -> np.ndarray:
    """2D DCT-II with orthonormal normalization over the last two axes."""
    return dctn(block, type=2, axes=(-2, -1), norm='ortho')


def idct2(coeffs: np.ndarray) -> np.ndarray:
    """2D inverse DCT over the last two axes."""
    return idctn(coeffs, type=2, axes=(-2, -1), norm='ortho')


def zigzag_mask(num_components: int) -> np.ndarray:
    """Boolean 8x8 mask keeping the first `num_components` zig-zag positions."""
    return ZIGZAG_RANK < num_components


def truncate_coefficients(coeffs: np.ndarray, num_components: int) -> np.ndarray:
    """Zero every coefficient whose zig-zag rank is >= num_components.

    Accepts one 8x8 block or any stack shaped (..., 8, 8). Returns a new array.
    """
    return np.where(zigzag_mask(num_components), coeffs, 0.0)
