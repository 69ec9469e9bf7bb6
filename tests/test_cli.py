"""Tests for the oledframe-convert command line tool (oledframe/cli.py)."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from oledframe.cli import main
from oledframe.frame import OLED_FRAME_SIZE
from PIL import Image


@pytest.fixture
def gray_png(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("RGB", (300, 150), (90, 90, 90)).save(path)
    return path


def test_writes_frame_next_to_input(clean_env, gray_png):
    assert main([str(gray_png), "--threshold", "50"]) == 0
    output = gray_png.with_suffix(".bin")
    assert output.read_bytes() == b"\xff" * OLED_FRAME_SIZE


def test_explicit_output_and_threshold(clean_env, gray_png, tmp_path):
    output = tmp_path / "frame.raw"
    assert main([str(gray_png), "-o", str(output), "-t", "90"]) == 0
    assert output.read_bytes() == bytes(OLED_FRAME_SIZE)


def test_threshold_defaults_from_environment(gray_png, tmp_path):
    output = tmp_path / "frame.bin"
    with patch.dict("os.environ", {"OLEDFRAME_THRESHOLD": "100"}, clear=True):
        assert main([str(gray_png), "-o", str(output)]) == 0
    assert output.read_bytes() == bytes(OLED_FRAME_SIZE)


def test_preview_written_when_requested(clean_env, gray_png, tmp_path):
    preview = tmp_path / "preview.png"
    assert main([str(gray_png), "--preview", str(preview), "-t", "0"]) == 0
    with Image.open(preview) as image:
        assert image.size == (128, 64)
        assert image.convert("L").getextrema() == (255, 255)


def test_preview_enabled_from_environment(gray_png, tmp_path):
    output = tmp_path / "frame.bin"
    with patch.dict("os.environ", {"OLEDFRAME_WRITE_PREVIEW": "true"}, clear=True):
        assert main([str(gray_png), "-o", str(output)]) == 0
    assert (tmp_path / "frame.preview.png").exists()


def test_missing_input_returns_error(clean_env, tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="oledframe.cli"):
        assert main([str(tmp_path / "absent.png")]) == 1
    assert "Unable to read" in caplog.text


def test_undecodable_input_returns_error(clean_env, tmp_path):
    bogus = tmp_path / "bogus.png"
    bogus.write_bytes(b"definitely not an image")
    assert main([str(bogus)]) == 1
    assert not bogus.with_suffix(".bin").exists()


def test_unwritable_output_returns_error(clean_env, gray_png, tmp_path):
    output = tmp_path / "missing-dir" / "frame.bin"
    assert main([str(gray_png), "-o", str(output)]) == 1


@pytest.mark.parametrize("threshold", ["-1", "256", "bright"])
def test_invalid_threshold_is_a_usage_error(clean_env, gray_png, threshold):
    with pytest.raises(SystemExit) as excinfo:
        main([str(gray_png), "-t", threshold])
    assert excinfo.value.code == 2
