import sys

import atheris

with atheris.instrument_imports():
    from oledframe.converter import iter_pages, oled_byte_array_to_image, to_oled_byte_array
    from oledframe.frame import OLED_FRAME_SIZE, FrameBuffer, InvalidImageDimensions


def TestOneInput(data: bytes) -> None:
    """Fuzz frame construction and conversion with arbitrary pixel data."""
    if len(data) < 3:
        return
    width = (data[0] % 48) + 1
    threshold = data[1]
    pixels = data[2:]

    # Malformed buffers must be rejected up front
    try:
        frame = FrameBuffer(width=width, height=max(1, len(pixels) // (width * 3)), data=pixels)
    except InvalidImageDimensions:
        return

    result = to_oled_byte_array(frame, threshold)
    if len(result) != OLED_FRAME_SIZE:
        raise AssertionError(f"unexpected frame size {len(result)}")
    if len(list(iter_pages(result))) != 8:
        raise AssertionError("frame did not split into eight pages")
    if oled_byte_array_to_image(result).tobytes() != result:
        raise AssertionError("preview image does not match packed frame")


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
