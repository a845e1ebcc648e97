from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel
from .packet import Packet
from ..config import DecoderConfig


class Transmission(BaseModel):
    packet: Packet

    # Convenience constructors; the work lives in the binary layer and evaluator
    @classmethod
    def from_hex(cls, data: str | Path, *, config: DecoderConfig | None = None, as_text: bool = False) -> "Transmission":
        from ..binary.reader import parse_transmission
        return parse_transmission(data, config=config, as_text=as_text)

    def to_hex(self) -> str:
        from ..binary.writer import write_transmission
        return write_transmission(self.packet)

    def version_sum(self) -> int:
        from ..evaluator import count_versions
        return count_versions(self.packet)

    def value(self) -> int:
        from ..evaluator import evaluate
        return evaluate(self.packet)
