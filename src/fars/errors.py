"""Exception types raised by the FARS helpers.

Missing input files raise the built-in ``FileNotFoundError`` and bad numeric
input raises whatever ``int()`` raises; only the domain-specific failures get
their own classes here.
"""


class FarsError(Exception):
    """Base class for FARS helper errors."""


class InvalidStateError(FarsError, ValueError):
    """The requested STATE code does not appear in the loaded records."""

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


class EmptyResultError(FarsError, ValueError):
    """Nothing was left to aggregate (every requested year failed to load)."""


__all__ = ["FarsError", "InvalidStateError", "EmptyResultError"]
