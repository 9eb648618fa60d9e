"""Smoke tests for the command-line entry point."""

import numpy as np
import pytest
from main import build_parser, run_cli
from utils.image_io import load_image, save_image, to_uint8


def test_parser_requires_a_source():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_normalizes_method():
    args = build_parser().parse_args(["--synthetic", "rings", "--method", "svd"])
    assert args.method == "SVD"
    assert args.components == 64


def test_synthetic_run_writes_levels(tmp_path, capsys):
    out = tmp_path / "levels"
    code = run_cli([
        "--synthetic", "checkerboard", "--size", "32",
        "--components", "5", "--output", str(out), "--workers", "2", "--sheet",
    ])
    assert code == 0
    written = sorted(p.name for p in out.glob("level_*.png"))
    assert written == [f"level_{k:03d}.png" for k in range(1, 6)]
    assert (out / "contact_sheet.png").exists()
    assert "DCT: 5 levels" in capsys.readouterr().out


def test_image_file_run(tmp_path):
    image = np.random.randint(0, 256, (20, 12, 3), dtype=np.uint8)
    source = tmp_path / "input.png"
    save_image(image, source)
    assert np.array_equal(load_image(str(source)), image)

    out = tmp_path / "svd"
    assert run_cli([str(source), "--method", "SVD", "--components", "100", "--output", str(out)]) == 0
    assert (out / "level_012.png").exists()


def test_unsupported_extension_fails(tmp_path):
    bad = tmp_path / "image.gif"
    bad.write_bytes(b"GIF89a")
    assert run_cli([str(bad), "--output", str(tmp_path / "out")]) == 1


def test_to_uint8_rounds_and_clamps():
    assert to_uint8(np.array([-3.0, 0.4, 127.6, 300.0])).tolist() == [0, 0, 128, 255]
