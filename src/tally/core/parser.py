"""
Free-text command parsing.

Pure functions apart from reporting notices to an optional message sink.
Fields inside one argument string are split on literal markers
(/by, /from, /to), matched at their first occurrence. A description that
itself contains a marker is cut short there.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import TYPE_CHECKING

from .codec import can_store
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    FindByDate,
    FindByKeyword,
    Goodbye,
    Incorrect,
    List,
    Mark,
    Unmark,
)
from .notices import Notice

if TYPE_CHECKING:
    from tally.ports.message_sink import MessageSink

logger = logging.getLogger(__name__)

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

DATE_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)
DATETIME_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4} \d{2}:\d{2}", re.ASCII)
INDEX_PATTERN = re.compile(r"-?\d+", re.ASCII)
DATE_FORMAT = "%d-%m-%Y"
DATETIME_FORMAT = "%d-%m-%Y %H:%M"

COMMAND_WORDS = ("todo", "deadline", "event", "delete", "mark", "unmark", "list", "find", "on", "bye")


class _Rejected(Exception):
    """Internal signal that a sub-parser already reported a notice."""

    def __init__(self, notice: Notice):
        super().__init__(notice.value)
        self.notice = notice


def _report(sink: MessageSink | None, notice: Notice) -> None:
    logger.debug(f"Rejected input: {notice.value}")
    if sink is not None:
        sink.notify(notice)


def split_command(line: str) -> tuple[str, str]:
    """Split a line into (keyword, arguments), both trimmed."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0]
    arguments = parts[1].strip() if len(parts) > 1 else ""
    return keyword, arguments


def parse_deadline(arguments: str, sink: MessageSink | None = None) -> tuple[str, str] | None:
    """Split 'description /by time' into (description, time text)."""
    position = arguments.find(BY_MARKER)
    if position == -1:
        _report(sink, Notice.MALFORMED_COMMAND_ARGUMENTS)
        return None
    description = arguments[:position].strip()
    end_time = arguments[position + len(BY_MARKER):].strip()
    return description, end_time


def parse_event(arguments: str, sink: MessageSink | None = None) -> tuple[str, str, str] | None:
    """Split 'description /from start /to end' into its three texts."""
    from_position = arguments.find(FROM_MARKER)
    to_position = arguments.find(TO_MARKER)
    if from_position == -1 or to_position == -1 or to_position < from_position:
        _report(sink, Notice.MALFORMED_COMMAND_ARGUMENTS)
        return None
    description = arguments[:from_position].strip()
    start_time = arguments[from_position + len(FROM_MARKER):to_position].strip()
    end_time = arguments[to_position + len(TO_MARKER):].strip()
    return description, start_time, end_time


def parse_index(text: str, sink: MessageSink | None = None) -> int | None:
    """Convert a 1-based task number into a 0-based index."""
    text = text.strip()
    if not INDEX_PATTERN.fullmatch(text):
        _report(sink, Notice.NON_INTEGER_INDEX)
        return None
    return int(text) - 1


def parse_date(text: str | None, sink: MessageSink | None = None) -> datetime | None:
    """Parse dd-MM-yyyy into midnight of that day. None passes through silently."""
    if text is None:
        return None
    if DATE_PATTERN.fullmatch(text):
        try:
            return datetime.strptime(text, DATE_FORMAT)
        except ValueError:
            pass
    _report(sink, Notice.INVALID_DATE_FORMAT)
    return None


def parse_datetime(text: str | None, sink: MessageSink | None = None) -> datetime | None:
    """Parse dd-MM-yyyy HH:mm. None passes through silently."""
    if text is None:
        return None
    if DATETIME_PATTERN.fullmatch(text):
        try:
            return datetime.strptime(text, DATETIME_FORMAT)
        except ValueError:
            pass
    _report(sink, Notice.INVALID_DATETIME_FORMAT)
    return None


def parse_when(text: str, sink: MessageSink | None = None) -> datetime | None:
    """Parse a time given either as a date or as a date and time."""
    if " " in text:
        return parse_datetime(text, sink)
    return parse_date(text, sink)


def _require(value, notice: Notice):
    if value is None:
        raise _Rejected(notice)
    return value


def _require_text(text: str, sink: MessageSink | None) -> str:
    if not text:
        _report(sink, Notice.MALFORMED_COMMAND_ARGUMENTS)
        raise _Rejected(Notice.MALFORMED_COMMAND_ARGUMENTS)
    return text


def _require_description(text: str, sink: MessageSink | None) -> str:
    """Descriptions must be non-empty and free of the save-file separator."""
    if not can_store(text):
        _report(sink, Notice.MALFORMED_COMMAND_ARGUMENTS)
        raise _Rejected(Notice.MALFORMED_COMMAND_ARGUMENTS)
    return text


def _build_deadline(arguments: str, sink: MessageSink | None) -> AddDeadline:
    description, due_text = _require(
        parse_deadline(arguments, sink), Notice.MALFORMED_COMMAND_ARGUMENTS
    )
    _require_description(description, sink)
    due = parse_when(due_text, sink)
    if due is None:
        raise _Rejected(_when_notice(due_text))
    return AddDeadline(description, due)


def _build_event(arguments: str, sink: MessageSink | None) -> AddEvent:
    description, start_text, end_text = _require(
        parse_event(arguments, sink), Notice.MALFORMED_COMMAND_ARGUMENTS
    )
    _require_description(description, sink)
    start = parse_when(start_text, sink)
    if start is None:
        raise _Rejected(_when_notice(start_text))
    end = parse_when(end_text, sink)
    if end is None:
        raise _Rejected(_when_notice(end_text))
    if end < start:
        _report(sink, Notice.MALFORMED_COMMAND_ARGUMENTS)
        raise _Rejected(Notice.MALFORMED_COMMAND_ARGUMENTS)
    return AddEvent(description, start, end)


def _when_notice(text: str) -> Notice:
    return Notice.INVALID_DATETIME_FORMAT if " " in text else Notice.INVALID_DATE_FORMAT


def _build_index(arguments: str, sink: MessageSink | None) -> int:
    return _require(parse_index(arguments, sink), Notice.NON_INTEGER_INDEX)


def parse_command(line: str, sink: MessageSink | None = None) -> Command:
    """
    Turn one line of user input into a command.

    Never raises. Unknown keywords and empty input give Incorrect(); input
    whose arguments cannot be parsed reports a notice to the sink and gives
    Incorrect(notice).
    """
    keyword, arguments = split_command(line)

    try:
        match keyword:
            case "todo":
                return AddTodo(_require_description(arguments, sink))
            case "deadline":
                return _build_deadline(arguments, sink)
            case "event":
                return _build_event(arguments, sink)
            case "delete":
                return Delete(_build_index(arguments, sink))
            case "mark":
                return Mark(_build_index(arguments, sink))
            case "unmark":
                return Unmark(_build_index(arguments, sink))
            case "list":
                return List()
            case "find":
                return FindByKeyword(_require_text(arguments, sink))
            case "on":
                day = _require(parse_date(arguments, sink), Notice.INVALID_DATE_FORMAT)
                return FindByDate(day.date())
            case "bye":
                return Goodbye()
            case _:
                logger.debug(f"Unrecognized command word: {keyword!r}")
                return Incorrect()
    except _Rejected as e:
        return Incorrect(e.notice)
