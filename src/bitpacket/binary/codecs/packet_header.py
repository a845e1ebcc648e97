from __future__ import annotations
from .bitcursor import BitCursor
from .bitwriter import BitWriter

VERSION_BITS = 3
TYPE_ID_BITS = 3


def decode_packet_header(cur: BitCursor) -> tuple[int, int]:
    """
    6-bit packet header: version (3 bits), type id (3 bits).
    Returns (version, type_id).
    """
    version = cur.read_bits(VERSION_BITS)
    type_id = cur.read_bits(TYPE_ID_BITS)
    return version, type_id


def encode_packet_header(out: BitWriter, version: int, type_id: int) -> None:
    out.write_bits(version, VERSION_BITS)
    out.write_bits(type_id, TYPE_ID_BITS)
