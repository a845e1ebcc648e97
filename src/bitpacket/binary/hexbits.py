from __future__ import annotations

import string

from .errors import MalformedHexInput

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bits(text: str) -> tuple[bytes, int]:
    """
    Expand a hex transmission into packed bits, 4 per digit, MSB first.
    Returns (data, bit_length); an odd digit count leaves the last nibble
    of ``data`` as zero padding outside ``bit_length``.
    """
    digits = text.strip()
    if not digits:
        raise MalformedHexInput("empty transmission")
    for i, ch in enumerate(digits):
        if ch not in _HEX_DIGITS:
            raise MalformedHexInput(f"non-hex character {ch!r} at offset {i}")
    bit_length = len(digits) * 4
    if len(digits) % 2:
        digits += "0"
    return bytes.fromhex(digits), bit_length


def bits_to_hex(data: bytes) -> str:
    return data.hex().upper()
