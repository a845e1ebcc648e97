from __future__ import annotations
from enum import IntEnum
from typing import Annotated, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

LITERAL_TYPE_ID = 4


class OperatorKind(IntEnum):
    SUM = 0
    PRODUCT = 1
    MIN = 2
    MAX = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @property
    def is_comparison(self) -> bool:
        return self in (OperatorKind.GREATER_THAN, OperatorKind.LESS_THAN, OperatorKind.EQUAL_TO)


class LengthType(IntEnum):
    TOTAL_BITS = 0
    PACKET_COUNT = 1


class LiteralPacket(BaseModel):
    model_config = ConfigDict(frozen=True)

    packet_type: Literal["literal"] = "literal"
    version: int = Field(..., ge=0, le=7)
    value: int = Field(..., ge=0)


class OperatorPacket(BaseModel):
    model_config = ConfigDict(frozen=True)

    packet_type: Literal["operator"] = "operator"
    version: int = Field(..., ge=0, le=7)
    kind: OperatorKind
    length_type: LengthType = LengthType.PACKET_COUNT
    children: Tuple[Packet, ...] = Field(..., min_length=1)


Packet = Annotated[Union[LiteralPacket, OperatorPacket], Field(discriminator="packet_type")]

OperatorPacket.model_rebuild()
