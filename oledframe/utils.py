"""
Shared utility functions for parsing and byte handling

Provides common helpers for:
- String parsing: Environment variable conversion (parse_bool, parse_int)
- Value coercion: Clamping integers into the unsigned 8-bit range
- Byte utilities: Fixed-size chunking of frame buffers

These utilities are used by the config layer and the converter.
"""

from __future__ import annotations

from collections.abc import Iterable


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Interpret env-style booleans."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_int(value: str | None, default: int) -> int:
    """Best-effort int parser with fallback."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def clamp_byte(value: int) -> int:
    """Clamp an integer into 0..255."""
    return max(0, min(255, value))


def chunk_bytes(data: bytes, size: int) -> Iterable[bytes]:
    """Yield fixed-size chunks from a byte buffer."""
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    for start in range(0, len(data), size):
        end = min(start + size, len(data))
        yield data[start:end]
