"""Shared utilities."""

from .metrics import compute_psnr_ssim, compute_level_metrics, evaluate_result, Timer
from .formatting import (
    format_kib,
    format_compression_ratio,
    format_size_percentage,
    format_size_per_component,
    pluralize,
)
from .test_images import generate_checkerboard, generate_gradient, generate_rings, generate_demo_image
from .image_io import load_image, save_image, to_uint8
from .contact_sheet import build_contact_sheet, render_contact_sheet

__all__ = [
    'compute_psnr_ssim',
    'compute_level_metrics',
    'evaluate_result',
    'Timer',
    'format_kib',
    'format_compression_ratio',
    'format_size_percentage',
    'format_size_per_component',
    'pluralize',
    'generate_checkerboard',
    'generate_gradient',
    'generate_rings',
    'generate_demo_image',
    'load_image',
    'save_image',
    'to_uint8',
    'build_contact_sheet',
    'render_contact_sheet',
]
