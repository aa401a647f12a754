"""Exceptions raised by gnss_decoder."""

from collections.abc import Iterable

__all__ = ["InvalidConfigurationError"]


class InvalidConfigurationError(ValueError):
    """Raised when a session is configured with unsupported sentence types.

    Attributes:
        offending_types: Every requested item that is not a supported
            sentence type, in the order it was given.
    """

    def __init__(self, offending_types: Iterable[object]) -> None:
        self.offending_types = list(offending_types)
        names = ", ".join(repr(t) for t in self.offending_types)
        super().__init__(f"unsupported sentence type(s): {names}")
