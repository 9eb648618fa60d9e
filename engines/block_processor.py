"""Block processing: splitting a padded plane into a block grid and back."""

import numpy as np
from typing import Iterator, Tuple


def block_grid_shape(shape: Tuple[int, int], block_size: int) -> Tuple[int, int]:
    """Number of (block rows, block columns) in a block-aligned plane."""
    h, w = shape
    if h % block_size or w % block_size:
        raise ValueError(f"Shape {shape} is not a multiple of block size {block_size}")
    return h // block_size, w // block_size


def split_into_blocks(channel: np.ndarray, block_size: int) -> np.ndarray:
    """View a block-aligned 2D plane as a (blocks_y, blocks_x, B, B) array."""
    blocks_y, blocks_x = block_grid_shape(channel.shape, block_size)
    return channel.reshape(blocks_y, block_size, blocks_x, block_size).swapaxes(1, 2)


def merge_blocks(blocks: np.ndarray) -> np.ndarray:
    """Inverse of split_into_blocks; returns a new contiguous 2D plane."""
    blocks_y, blocks_x, bh, bw = blocks.shape
    return blocks.swapaxes(1, 2).reshape(blocks_y * bh, blocks_x * bw)


def iter_block_indices(blocks_y: int, blocks_x: int) -> Iterator[Tuple[int, int]]:
    """Row-major (block_row, block_col) pairs."""
    for i in range(blocks_y):
        for j in range(blocks_x):
            yield i, j


def extract_block(channel: np.ndarray, block_row: int, block_col: int, block_size: int) -> np.ndarray:
    """Copy of one block addressed by its block-grid indices."""
    y = block_row * block_size
    x = block_col * block_size
    return channel[y:y + block_size, x:x + block_size].copy()
