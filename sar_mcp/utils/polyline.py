"""
Google Encoded Polyline Decoder

Decodes the positional encoding used by mapping services for route
geometry into (latitude, longitude) tuples.

Each coordinate delta is a run of 5-bit chunks offset by 63, with 0x20 as
the continuation bit, zig-zag encoded for sign and accumulated onto the
previous point starting from (0, 0). Values are scaled by 1e-5.

Malformed input is decoded on a best-effort basis and may produce
meaningless coordinates rather than an error.
"""

from typing import Optional

PRECISION = 1e-5


def _decode_chunk(value: str, index: int) -> tuple[int, int]:
    """Decode one signed delta starting at index. Returns (delta, next_index)."""
    result = 0
    shift = 0
    while True:
        byte = ord(value[index]) - 63
        index += 1
        result |= (byte & 0x1F) << shift
        shift += 5
        if byte < 0x20 or index >= len(value):
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode_polyline(value: Optional[str]) -> list[tuple[float, float]]:
    """
    Decode an encoded polyline.

    Args:
        value: Encoded polyline string

    Returns:
        Ordered list of (lat, lon) tuples; empty for an empty string
    """
    if not value:
        return []

    coordinates: list[tuple[float, float]] = []
    index = 0
    lat = 0
    lon = 0

    while index < len(value):
        delta, index = _decode_chunk(value, index)
        lat += delta
        # Odd-length garbage can leave no characters for the longitude
        if index < len(value):
            delta, index = _decode_chunk(value, index)
            lon += delta
        coordinates.append((lat * PRECISION, lon * PRECISION))

    return coordinates
