"""
Progressive Compression Studio
Watch luma reconstructions sharpen as the DCT or SVD component budget grows.
"""

import argparse
import logging
import math
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("studio")


def build_parser() -> argparse.ArgumentParser:
    from models.compression_params import CompressionMethod, DEFAULT_COMPONENTS
    from utils.test_images import DEMO_IMAGE_KEYS

    parser = argparse.ArgumentParser(
        prog="studio",
        description="Render progressive DCT/SVD reconstructions of an image.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("image", nargs="?", help="PNG or JPEG input")
    source.add_argument("--synthetic", choices=DEMO_IMAGE_KEYS, help="use a generated test image")
    parser.add_argument(
        "--method", default=CompressionMethod.BLOCK_TRANSFORM.value,
        choices=[m.value for m in CompressionMethod], type=str.upper,
    )
    parser.add_argument("--components", type=int, default=DEFAULT_COMPONENTS,
                        help="component budget (clamped to the coder's range)")
    parser.add_argument("--output", default="levels", help="directory for level images")
    parser.add_argument("--workers", type=int, default=None, help="worker threads (default: CPU count)")
    parser.add_argument("--sheet", action="store_true", help="also write contact_sheet.png")
    parser.add_argument("--size", type=int, default=256, help="synthetic image size")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _format_psnr(psnr: float) -> str:
    return "inf" if math.isinf(psnr) else f"{psnr:.2f}"


def run_cli(argv=None) -> int:
    """Compress one image, print the level table, write level PNGs. Returns exit code."""
    from engines.errors import CompressionError
    from engines.pipeline import compress_with_params
    from engines.preprocessing import to_luma
    from models.compression_params import CompressionParams
    from utils.contact_sheet import render_contact_sheet
    from utils.formatting import (
        format_compression_ratio,
        format_kib,
        format_size_per_component,
        format_size_percentage,
        pluralize,
    )
    from utils.image_io import load_image, save_image
    from utils.metrics import evaluate_result
    from utils.test_images import generate_demo_image

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    try:
        params = CompressionParams(
            method=args.method,
            num_components=args.components,
            max_workers=args.workers,
        )
        if args.synthetic:
            logger.info("Generating synthetic image: %s", args.synthetic)
            image = generate_demo_image(args.synthetic, args.size)
        else:
            logger.info("Loading: %s", args.image)
            image = load_image(args.image)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    h, w = image.shape[:2]
    logger.info("Image: %dx%d, method=%s, components=%d", w, h, params.method.value, params.num_components)

    try:
        result = compress_with_params(image, params)
    except CompressionError as e:
        logger.error("Compression failed: %s", e)
        return 1

    metrics = evaluate_result(to_luma(image), result)

    n = len(result.levels)
    print(f"\n=== {result.method.value}: {n} level{pluralize(n)} "
          f"(original {format_kib(result.original_byte_size)} KiB) ===")
    print(f"{'k':>5} {'size KiB':>10} {'ratio':>8} {'% orig':>7} {'KiB/comp':>9} {'PSNR':>7} {'SSIM':>7}")
    for level, m in zip(result.levels, metrics):
        print(f"{level.num_components:>5} "
              f"{format_kib(level.approximate_byte_size):>10} "
              f"{format_compression_ratio(result.original_byte_size, level.approximate_byte_size):>8} "
              f"{format_size_percentage(level.approximate_byte_size, result.original_byte_size):>7} "
              f"{format_size_per_component(level.approximate_byte_size, level.num_components):>9} "
              f"{_format_psnr(m.psnr):>7} "
              f"{m.ssim:>7.4f}")
    print(f"Time: forward {result.forward_time_ms:.1f} ms, "
          f"reconstruct {result.reconstruct_time_ms:.1f} ms")

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    for level in result.levels:
        save_image(level.reconstructed_image, output_dir / f"level_{level.num_components:03d}.png")
    logger.info("Saved %d level images to %s", n, output_dir)

    if args.sheet:
        sheet = render_contact_sheet(result, output_dir / "contact_sheet.png", metrics)
        logger.info("Saved contact sheet: %s", sheet)

    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
