from __future__ import annotations

import math
from typing import Callable, Dict, List

from .models.packet import LiteralPacket, OperatorKind, Packet


class EvaluationError(ValueError):
    pass


def count_versions(packet: Packet) -> int:
    """Sum of the version field over the packet and all packets nested in it."""
    if isinstance(packet, LiteralPacket):
        return packet.version
    return packet.version + sum(count_versions(child) for child in packet.children)


_REDUCERS: Dict[OperatorKind, Callable[[List[int]], int]] = {
    OperatorKind.SUM: sum,
    OperatorKind.PRODUCT: math.prod,
    OperatorKind.MIN: min,
    OperatorKind.MAX: max,
    OperatorKind.GREATER_THAN: lambda v: int(v[0] > v[1]),
    OperatorKind.LESS_THAN: lambda v: int(v[0] < v[1]),
    OperatorKind.EQUAL_TO: lambda v: int(v[0] == v[1]),
}


def evaluate(packet: Packet) -> int:
    if isinstance(packet, LiteralPacket):
        return packet.value
    if packet.kind.is_comparison and len(packet.children) != 2:
        raise EvaluationError(f"{packet.kind.name} needs exactly 2 operands, got {len(packet.children)}")
    values = [evaluate(child) for child in packet.children]
    return _REDUCERS[packet.kind](values)
