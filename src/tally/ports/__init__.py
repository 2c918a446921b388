"""Ports - interfaces for external dependencies."""

from .message_sink import MessageSink
from .task_store import TaskStore

__all__ = ["MessageSink", "TaskStore"]
