import pytest

from bitpacket.binary.codecs.bitcursor import BitCursor
from bitpacket.binary.codecs.bitwriter import BitWriter
from bitpacket.binary.codecs.packet_codec import decode_packet
from bitpacket.binary.errors import (
    EmptyOperator,
    LengthMismatch,
    LiteralOverflow,
    NestingTooDeep,
    UnexpectedEnd,
)
from bitpacket.binary.hexbits import hex_to_bits
from bitpacket.config import DecoderConfig
from bitpacket.models.packet import LengthType, LiteralPacket, OperatorKind, OperatorPacket


def _decode_hex(text, **cfg):
    data, n = hex_to_bits(text)
    return decode_packet(BitCursor(data, n), config=DecoderConfig(**cfg))


def _decode_writer(w, **cfg):
    return decode_packet(BitCursor(w.to_bytes(), len(w)), config=DecoderConfig(**cfg))


def _literal_bits(w, version, nibbles):
    w.write_bits(version, 3)
    w.write_bits(4, 3)
    for i, nib in enumerate(nibbles):
        w.write_bits((0b10000 if i < len(nibbles) - 1 else 0) | nib, 5)


def _total_length_operator(declared, *, trailing_bits=0):
    w = BitWriter()
    w.write_bits(1, 3)  # version
    w.write_bits(0, 3)  # sum
    w.write_bits(0, 1)  # total length mode
    w.write_bits(declared, 15)
    _literal_bits(w, 2, [0x7])  # 11 bits
    if trailing_bits:
        w.write_bits(0, trailing_bits)
    return w


def test_literal_packet():
    p = _decode_hex("D2FE28")
    assert p == LiteralPacket(version=6, value=2021)


def test_operator_total_length_mode():
    p = _decode_hex("38006F45291200")
    assert isinstance(p, OperatorPacket)
    assert p.version == 1
    assert p.kind is OperatorKind.LESS_THAN
    assert p.length_type is LengthType.TOTAL_BITS
    assert [c.value for c in p.children] == [10, 20]


def test_operator_packet_count_mode():
    p = _decode_hex("EE00D40C823060")
    assert p.version == 7
    assert p.kind is OperatorKind.MAX
    assert p.length_type is LengthType.PACKET_COUNT
    assert [c.value for c in p.children] == [1, 2, 3]


def test_nested_operators():
    p = _decode_hex("8A004A801A8002F478")
    assert p.version == 4
    inner = p.children[0]
    assert inner.version == 1
    innermost = inner.children[0]
    assert innermost.version == 5
    assert innermost.children == (LiteralPacket(version=6, value=15),)


def test_parent_cursor_lands_after_packet():
    data, n = hex_to_bits("38006F45291200")
    cur = BitCursor(data, n)
    decode_packet(cur)
    assert cur.tell() == 6 + 1 + 15 + 27


def test_truncated_literal_raises_unexpected_end():
    with pytest.raises(UnexpectedEnd):
        _decode_hex("D2FE")


def test_declared_length_longer_than_children():
    with pytest.raises(LengthMismatch):
        _decode_writer(_total_length_operator(12, trailing_bits=1))


def test_declared_length_with_undecodable_tail():
    with pytest.raises(LengthMismatch):
        _decode_writer(_total_length_operator(14, trailing_bits=3))


def test_declared_length_shorter_than_children():
    with pytest.raises(LengthMismatch) as info:
        _decode_writer(_total_length_operator(10))
    assert isinstance(info.value.__cause__, UnexpectedEnd)


def test_declared_length_exact():
    p = _decode_writer(_total_length_operator(11))
    assert p.children == (LiteralPacket(version=2, value=7),)


def test_declared_length_beyond_transmission():
    with pytest.raises(UnexpectedEnd):
        _decode_writer(_total_length_operator(200))


def test_operator_without_children():
    w = BitWriter()
    w.write_bits(0, 3)
    w.write_bits(1, 3)
    w.write_bits(1, 1)
    w.write_bits(0, 11)
    with pytest.raises(EmptyOperator):
        _decode_writer(w)


def test_literal_width_limit():
    w = BitWriter()
    _literal_bits(w, 0, [0xF] * 17)
    with pytest.raises(LiteralOverflow):
        _decode_writer(w)
    assert _decode_writer(w, literal_max_bits=None).value == (1 << 68) - 1


def test_literal_at_64_bits_is_accepted():
    w = BitWriter()
    _literal_bits(w, 3, [0xF] * 16)
    assert _decode_writer(w).value == (1 << 64) - 1


def test_nesting_limit():
    with pytest.raises(NestingTooDeep):
        _decode_hex("8A004A801A8002F478", max_depth=3)
    assert _decode_hex("8A004A801A8002F478", max_depth=4).version == 4
