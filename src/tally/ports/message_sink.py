"""Message sink interface."""

from typing import Protocol

from tally.core.notices import Notice


class MessageSink(Protocol):
    """Receives malformed-input notices from the parser and store."""

    def notify(self, notice: Notice) -> None:
        """Report that a condition occurred."""
        ...
