"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind, TaskList, Todo, Deadline, Event
from .notices import Notice
from .parser import parse_command, parse_deadline, parse_event, parse_index, parse_date, parse_datetime
from .codec import decode, encode

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    "TaskList",
    "Todo",
    "Deadline",
    "Event",
    # Parsing
    "Notice",
    "parse_command",
    "parse_deadline",
    "parse_event",
    "parse_index",
    "parse_date",
    "parse_datetime",
    # Save file
    "decode",
    "encode",
]
