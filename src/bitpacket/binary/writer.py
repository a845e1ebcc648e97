from __future__ import annotations
from .codecs.bitwriter import BitWriter
from .codecs.packet_codec import encode_packet
from .hexbits import bits_to_hex
from ..models.packet import Packet


def write_transmission(packet: Packet) -> str:
    """Encode a packet tree as upper-case hex, zero-padded to a whole byte."""
    out = BitWriter()
    encode_packet(out, packet)
    return bits_to_hex(out.to_bytes())
