"""Adapters - I/O implementations of ports."""

from .console_sink import ConsoleMessageSink
from .file_store import FileTaskStore

__all__ = [
    "ConsoleMessageSink",
    "FileTaskStore",
]
