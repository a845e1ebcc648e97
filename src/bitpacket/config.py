from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

# Deepest packet nesting whose JSON form pydantic can still dump and reload
MAX_NESTING_DEPTH = 90


class DecoderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(MAX_NESTING_DEPTH, ge=1, le=MAX_NESTING_DEPTH)
    # None lifts the width limit on literal values
    literal_max_bits: int | None = Field(64, ge=4)
    strict_padding: bool = False


DEFAULT_CONFIG = DecoderConfig()
