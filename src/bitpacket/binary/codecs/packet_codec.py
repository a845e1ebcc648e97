from __future__ import annotations

import logging
from typing import List

from .bitcursor import BitCursor
from .bitwriter import BitWriter
from .packet_header import decode_packet_header, encode_packet_header
from ..errors import (
    EmptyOperator,
    EncodeError,
    LengthMismatch,
    LiteralOverflow,
    NestingTooDeep,
    UnexpectedEnd,
)
from ...config import DEFAULT_CONFIG, DecoderConfig
from ...models.packet import (
    LITERAL_TYPE_ID,
    LengthType,
    LiteralPacket,
    OperatorKind,
    OperatorPacket,
    Packet,
)

logger = logging.getLogger(__name__)

GROUP_BITS = 5
NIBBLE_BITS = 4
CONTINUE_FLAG = 0b10000
TOTAL_LENGTH_BITS = 15
PACKET_COUNT_BITS = 11


def decode_packet(cur: BitCursor, *, config: DecoderConfig | None = None, _depth: int = 0) -> Packet:
    """
    Decode one packet (and, for operators, all of its sub-packets) starting at
    the cursor's position. The cursor is left just past the packet.
    """
    config = config or DEFAULT_CONFIG
    if _depth >= config.max_depth:
        raise NestingTooDeep(f"packet nesting exceeds {config.max_depth} levels at bit {cur.pos}")

    start = cur.pos
    version, type_id = decode_packet_header(cur)
    if type_id == LITERAL_TYPE_ID:
        packet: Packet = LiteralPacket(version=version, value=_decode_literal_value(cur, config))
    else:
        packet = _decode_operator(cur, version, OperatorKind(type_id), config, _depth)
    logger.debug("%s packet v%d at bit %d (%d bits)", packet.packet_type, version, start, cur.pos - start)
    return packet


def _decode_literal_value(cur: BitCursor, config: DecoderConfig) -> int:
    start = cur.pos
    value = 0
    groups = 0
    while True:
        group = cur.read_bits(GROUP_BITS)
        value = (value << NIBBLE_BITS) | (group & (CONTINUE_FLAG - 1))
        groups += 1
        limit = config.literal_max_bits
        if limit is not None and value.bit_length() > limit:
            raise LiteralOverflow(f"literal at bit {start} exceeds {limit} bits after {groups} groups")
        if not group & CONTINUE_FLAG:
            return value


def _decode_operator(cur: BitCursor, version: int, kind: OperatorKind, config: DecoderConfig, depth: int) -> OperatorPacket:
    length_type = LengthType(cur.read_bits(1))
    children: List[Packet] = []

    if length_type is LengthType.TOTAL_BITS:
        total_length = cur.read_bits(TOTAL_LENGTH_BITS)
        # Fence the sub-packets to exactly the declared length, then step the parent past it
        view = cur.sub_view(total_length)
        try:
            while not view.is_exhausted():
                children.append(decode_packet(view, config=config, _depth=depth + 1))
        except UnexpectedEnd as e:
            raise LengthMismatch(
                f"sub-packets overrun declared length {total_length} at bit {view.start}: {e}"
            ) from e
        if view.tell() != total_length:
            raise LengthMismatch(
                f"sub-packets at bit {view.start} used {view.tell()} of declared {total_length} bits"
            )
        cur.skip(total_length)
    else:
        packet_count = cur.read_bits(PACKET_COUNT_BITS)
        for _ in range(packet_count):
            children.append(decode_packet(cur, config=config, _depth=depth + 1))

    if not children:
        raise EmptyOperator(f"{kind.name} operator before bit {cur.pos} has no sub-packets")
    return OperatorPacket(version=version, kind=kind, length_type=length_type, children=tuple(children))


def encode_packet(out: BitWriter, packet: Packet) -> None:
    if isinstance(packet, LiteralPacket):
        encode_packet_header(out, packet.version, LITERAL_TYPE_ID)
        _encode_literal_value(out, packet.value)
        return

    encode_packet_header(out, packet.version, int(packet.kind))
    out.write_bits(int(packet.length_type), 1)
    body = BitWriter()
    for child in packet.children:
        encode_packet(body, child)

    if packet.length_type is LengthType.TOTAL_BITS:
        if len(body) >= 1 << TOTAL_LENGTH_BITS:
            raise EncodeError(f"sub-packets span {len(body)} bits; limit is {(1 << TOTAL_LENGTH_BITS) - 1}")
        out.write_bits(len(body), TOTAL_LENGTH_BITS)
    else:
        if len(packet.children) >= 1 << PACKET_COUNT_BITS:
            raise EncodeError(f"{len(packet.children)} sub-packets; limit is {(1 << PACKET_COUNT_BITS) - 1}")
        out.write_bits(len(packet.children), PACKET_COUNT_BITS)
    out.extend(body)


def _encode_literal_value(out: BitWriter, value: int) -> None:
    nibbles = max(1, -(-value.bit_length() // NIBBLE_BITS))
    for i in range(nibbles - 1, -1, -1):
        flag = CONTINUE_FLAG if i else 0
        out.write_bits(flag | ((value >> (i * NIBBLE_BITS)) & 0xF), GROUP_BITS)
