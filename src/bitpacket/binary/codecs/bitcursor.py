from __future__ import annotations

from ..errors import UnexpectedEnd

MAX_READ_BITS = 16


class BitCursor:
    """
    MSB-first bit reader over a window [start, end) of packed bytes.
    Sub-views share the parent's memory; each view owns only its position.
    """
    __slots__ = ("buf", "start", "end", "pos")

    def __init__(self, data: bytes | bytearray | memoryview, bit_length: int | None = None, *, start: int = 0):
        self.buf = data if isinstance(data, memoryview) else memoryview(data)
        total = len(self.buf) * 8
        end = total if bit_length is None else start + bit_length
        if not (0 <= start <= end <= total):
            raise ValueError(f"bit window [{start}, {end}) outside buffer of {total} bits")
        self.start = start
        self.end = end
        self.pos = start

    def __len__(self) -> int: return self.end - self.start
    def __repr__(self) -> str:
        return f"BitCursor(start={self.start}, end={self.end}, pos={self.pos})"

    def tell(self) -> int: return self.pos - self.start
    def remaining(self) -> int: return self.end - self.pos

    def is_exhausted(self) -> bool:
        # a trailing single bit cannot begin a packet
        return self.remaining() <= 1

    def _require(self, n: int) -> None:
        if n > self.remaining():
            raise UnexpectedEnd(f"need {n} bits at bit {self.pos}, {self.remaining()} left")

    def read_bits(self, n: int) -> int:
        if not (0 < n <= MAX_READ_BITS): raise ValueError(f"bits 1..{MAX_READ_BITS}")
        self._require(n)
        first, last = self.pos // 8, (self.pos + n - 1) // 8
        chunk = int.from_bytes(self.buf[first:last + 1], "big")
        shift = (last + 1) * 8 - (self.pos + n)
        self.pos += n
        return (chunk >> shift) & ((1 << n) - 1)

    def skip(self, n: int) -> None:
        if n < 0: raise ValueError("cannot skip backwards")
        self._require(n)
        self.pos += n

    def sub_view(self, n: int) -> "BitCursor":
        """Cursor over the next ``n`` bits; the parent does not move until it skips them."""
        if n < 0: raise ValueError("negative view length")
        self._require(n)
        return BitCursor(self.buf, n, start=self.pos)
