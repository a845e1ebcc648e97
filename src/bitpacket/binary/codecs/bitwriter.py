from __future__ import annotations


class BitWriter:
    __slots__ = ("_acc", "_nbits")

    def __init__(self):
        self._acc = 0
        self._nbits = 0

    def __len__(self) -> int: return self._nbits

    # bits (MSB-first)
    def write_bits(self, value: int, n: int) -> None:
        if n <= 0: raise ValueError("bit count must be positive")
        if not (0 <= value < (1 << n)): raise ValueError(f"{value} does not fit in {n} bits")
        self._acc = (self._acc << n) | value
        self._nbits += n

    def extend(self, other: "BitWriter") -> None:
        self._acc = (self._acc << other._nbits) | other._acc
        self._nbits += other._nbits

    def to_bytes(self) -> bytes:
        """Packed bits, zero-padded on the right to a whole byte."""
        pad = -self._nbits % 8
        return (self._acc << pad).to_bytes((self._nbits + pad) // 8, "big")
