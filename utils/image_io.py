"""Image I/O using OpenCV."""

from pathlib import Path

import cv2
import numpy as np

SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg')


def load_image(path: str) -> np.ndarray:
    """Load a PNG or JPEG as RGB uint8."""
    if Path(path).suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported image format: {path}. Use JPG or PNG")
    img = cv2.imread(str(path))
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def to_uint8(luma: np.ndarray) -> np.ndarray:
    """Round and clamp a float luma plane to 8-bit gray."""
    return np.clip(np.rint(luma), 0, 255).astype(np.uint8)


def save_image(image: np.ndarray, path: str) -> None:
    """Save a gray (2D) or RGB image; float input is converted with to_uint8."""
    if image.dtype != np.uint8:
        image = to_uint8(image)
    if image.ndim == 3:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(path), image):
        raise ValueError(f"Could not write image to {path}")
