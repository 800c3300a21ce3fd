"""Exceptions raised by the board engine."""


class InvariantError(ValueError):
    """An operation was asked to do something the board cannot represent.

    Raised for unknown column or item ids, out-of-range indices and
    malformed drop events. These are caller bugs, not user errors.
    """


def invariant(condition: object, message: str) -> None:
    """Raise InvariantError with message unless condition holds."""
    if not condition:
        raise InvariantError(message)
