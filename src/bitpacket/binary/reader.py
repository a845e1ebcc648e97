from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .codecs.bitcursor import BitCursor
from .codecs.packet_codec import decode_packet
from .errors import DecodeError
from .hexbits import hex_to_bits
from ..config import DEFAULT_CONFIG, DecoderConfig
from ..models.transmission import Transmission

logger = logging.getLogger(__name__)

HexSource = Union[str, Path]


def load_transmission(src: HexSource, *, as_text: bool = False) -> str:
    """
    Hex text from a file path, or the argument itself when it is not an existing file.
    An existing file wins over a string that also reads as hex; ``as_text`` skips the lookup.
    """
    if isinstance(src, Path):
        return src.read_text(encoding="ascii")
    if as_text:
        return src
    p = Path(src)
    try:
        is_file = p.is_file()
    except OSError:  # e.g. name too long for the filesystem
        is_file = False
    return p.read_text(encoding="ascii") if is_file else src


def parse_transmission(src: HexSource, *, config: DecoderConfig | None = None, as_text: bool = False) -> Transmission:
    """
    Decode the outermost packet of a transmission. Bits after it are padding
    and are left unread, unless ``config.strict_padding`` requires them to be zero.
    """
    config = config or DEFAULT_CONFIG
    data, bit_length = hex_to_bits(load_transmission(src, as_text=as_text))
    cur = BitCursor(data, bit_length)

    packet = decode_packet(cur, config=config)

    padding = cur.remaining()
    logger.debug("decoded %d of %d bits; %d padding bits", cur.tell(), bit_length, padding)
    if config.strict_padding:
        while cur.remaining():
            n = min(cur.remaining(), 16)
            if cur.read_bits(n):
                raise DecodeError(f"non-zero padding after bit {bit_length - padding}")

    return Transmission(packet=packet)
