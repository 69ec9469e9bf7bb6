"""Convert an image file into a raw 128x64 SSD1306 frame."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from oledframe.config import LOG_LEVELS, ConverterConfig
from oledframe.converter import oled_byte_array_to_image, to_oled_byte_array
from oledframe.frame import FrameBuffer, InvalidImageDimensions

LOGGER = logging.getLogger("oledframe.cli")


def _threshold(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value!r}") from exc
    if not 0 <= parsed <= 255:
        raise argparse.ArgumentTypeError(f"threshold must be within 0..255, got {parsed}")
    return parsed


def parse_args(argv: list[str] | None, config: ConverterConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", type=Path, help="Image file to convert (any format Pillow can decode)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Destination for the 1024-byte frame (defaults to INPUT with a .bin suffix)",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_threshold,
        default=config.threshold,
        help=f"Brightness cutoff; pixels averaging above it are lit (default: {config.threshold})",
    )
    parser.add_argument("--preview", type=Path, help="Also write a PNG preview of the frame to this path")
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _load_frame(path: Path) -> FrameBuffer:
    with Image.open(path) as image:
        return FrameBuffer.from_image(image)


def main(argv: list[str] | None = None) -> int:
    config = ConverterConfig.from_env()
    args = parse_args(argv, config)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    input_path = args.input.expanduser()
    output_path = (args.output or input_path.with_suffix(".bin")).expanduser()
    preview_path = args.preview
    if preview_path is None and config.write_preview:
        preview_path = output_path.with_suffix(".preview.png")

    try:
        frame = _load_frame(input_path)
    except (OSError, UnidentifiedImageError) as exc:
        LOGGER.error("Unable to read %s: %s", input_path, exc)
        return 1
    except InvalidImageDimensions as exc:
        LOGGER.error("Unusable image %s: %s", input_path, exc)
        return 1

    LOGGER.debug("Loaded %s (%dx%d)", input_path, frame.width, frame.height)
    data = to_oled_byte_array(frame, args.threshold)

    try:
        output_path.write_bytes(data)
        if preview_path is not None:
            oled_byte_array_to_image(data).save(preview_path, format="PNG")
    except OSError as exc:
        LOGGER.error("Unable to write output: %s", exc)
        return 1

    LOGGER.info("Wrote %s (%d bytes)", output_path, len(data))
    if preview_path is not None:
        LOGGER.info("Wrote preview %s", preview_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
