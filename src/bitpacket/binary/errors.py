from __future__ import annotations


class DecodeError(ValueError):
    pass


class UnexpectedEnd(DecodeError):
    """A read, skip or sub-view asked for more bits than the view holds."""


class LengthMismatch(DecodeError):
    """Sub-packets of a total-length operator did not fill the declared length exactly."""


class EmptyOperator(DecodeError):
    pass


class NestingTooDeep(DecodeError):
    pass


class LiteralOverflow(DecodeError):
    pass


class MalformedHexInput(ValueError):
    pass


class EncodeError(ValueError):
    pass
