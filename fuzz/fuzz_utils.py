import sys

import atheris

with atheris.instrument_imports():
    from oledframe.utils import (
        chunk_bytes,
        clamp_byte,
        parse_bool,
        parse_int,
    )


def TestOneInput(data: bytes) -> None:
    """Fuzz utility parsing functions with arbitrary input."""
    value = data.decode("utf-8", errors="ignore")

    # Test parsers with default fallbacks (should never raise)
    parse_bool(value)
    parsed = parse_int(value, default=0)
    if not 0 <= clamp_byte(parsed) <= 255:
        raise AssertionError("clamp_byte escaped the byte range")

    # Test chunk_bytes with the raw data
    if len(data) > 0:
        try:
            # Use a size derived from input to vary chunk sizes
            size = (data[0] % 64) + 1  # 1-64 byte chunks
            list(chunk_bytes(data, size))
        except ValueError:
            pass  # Expected for size <= 0


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
